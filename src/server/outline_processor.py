"""Build an outline for an API request."""

from __future__ import annotations

from bookoutline.builder import BuilderOptions, build_outline_from_yaml
from bookoutline.exceptions import ParseError
from bookoutline.fs_utils import never_exists
from bookoutline.output_formatter import format_outline
from bookoutline.utils.logging_config import get_logger
from server.models import OutlineErrorResponse, OutlineResponse, OutlineSuccessResponse

logger = get_logger(__name__)


def process_outline(text: str, *, drop_empty: bool = False, max_depth: int) -> OutlineResponse:
    """Build the outline in ``text`` without touching the server's filesystem.

    Every bare string is read as a title, so requests cannot test for files.
    """
    options = BuilderOptions(drop_empty=drop_empty, max_depth=max_depth)
    try:
        result = build_outline_from_yaml(text, options, exists=never_exists)
    except ParseError as exc:
        logger.warning("Failed to parse outline", extra={"error": str(exc)})
        return OutlineErrorResponse(error=str(exc))

    formatted = format_outline(result.outline, result.issues)
    logger.info(
        "Outline request completed",
        extra={"issues": len(result.issues), "bytes": len(text)},
    )
    return OutlineSuccessResponse(
        outline=result.outline,
        tree=formatted.tree,
        summary=formatted.summary,
        issues=result.issues,
    )
