"""Allow ``python -m bookoutline``."""

import sys

from bookoutline.cli import main

if __name__ == "__main__":
    sys.exit(main())
