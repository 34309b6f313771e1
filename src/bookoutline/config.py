"""Local configuration for bookoutline."""

from __future__ import annotations

import os


DEFAULT_MAX_DEPTH = 32
DEFAULT_MAX_NODE_DEPTH = 100
DEFAULT_FALLBACK_TITLE = "Untitled"
DEFAULT_TITLE_MAX_BYTES = 1024 * 1024
DEFAULT_LOG_LEVEL = "INFO"


def _env_flag(name: str, default: bool = False) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


# Nesting limit for `sections` lists; outlines are shallow but input may not be trusted.
BOOKOUTLINE_MAX_DEPTH = int(os.getenv("BOOKOUTLINE_MAX_DEPTH", str(DEFAULT_MAX_DEPTH)))
# Nesting limit for any YAML collection while converting to nodes.
BOOKOUTLINE_MAX_NODE_DEPTH = int(os.getenv("BOOKOUTLINE_MAX_NODE_DEPTH", str(DEFAULT_MAX_NODE_DEPTH)))
BOOKOUTLINE_DROP_EMPTY = _env_flag("BOOKOUTLINE_DROP_EMPTY")
BOOKOUTLINE_FALLBACK_TITLE = os.getenv("BOOKOUTLINE_FALLBACK_TITLE", DEFAULT_FALLBACK_TITLE)
BOOKOUTLINE_TITLE_MAX_BYTES = int(os.getenv("BOOKOUTLINE_TITLE_MAX_BYTES", str(DEFAULT_TITLE_MAX_BYTES)))
BOOKOUTLINE_LOG_LEVEL = os.getenv("BOOKOUTLINE_LOG_LEVEL", DEFAULT_LOG_LEVEL)
