"""Server configuration."""

from __future__ import annotations

import os

MAX_OUTLINE_SIZE_KB = int(os.getenv("BOOKOUTLINE_MAX_OUTLINE_SIZE_KB", "256"))
MAX_OUTLINE_DEPTH = int(os.getenv("BOOKOUTLINE_SERVER_MAX_DEPTH", "16"))
