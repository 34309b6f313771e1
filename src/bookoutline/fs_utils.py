"""Filesystem probing for bare chapter references."""

from __future__ import annotations

from pathlib import Path

from bookoutline.utils.logging_config import get_logger

logger = get_logger(__name__)


def resolve_candidate(candidate: Path, root: Path | None = None) -> Path:
    """Anchor a relative chapter path at the book ``root``, if one is set."""
    if root is None or candidate.is_absolute():
        return candidate
    return root / candidate


def path_exists(candidate: Path, root: Path | None = None) -> bool:
    """Check whether ``candidate`` names an existing file.

    Lookup failures (permission errors, embedded NUL bytes, over-long names)
    count as "does not exist".
    """
    target = resolve_candidate(candidate, root)
    try:
        return target.is_file()
    except (OSError, ValueError) as exc:
        logger.debug("Existence check failed for %s: %s", target, exc)
        return False


def never_exists(candidate: Path) -> bool:  # noqa: ARG001
    """Existence check that treats every bare reference as a title."""
    return False
