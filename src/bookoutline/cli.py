"""Command-line entry point: print the outline of a book."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from bookoutline.builder import BuilderOptions, build_outline_from_file
from bookoutline.config import BOOKOUTLINE_DROP_EMPTY, BOOKOUTLINE_MAX_DEPTH
from bookoutline.exceptions import BuildError, ParseError
from bookoutline.links import parse_summary
from bookoutline.output_formatter import format_issue, format_outline
from bookoutline.schemas import BuildResult
from bookoutline.utils.logging_config import configure_logging, get_logger

logger = get_logger(__name__)


_BUILD_FLAGS = (
    ("root", "--root"),
    ("drop_empty", "--drop-empty"),
    ("max_depth", "--max-depth"),
    ("strict", "--strict"),
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bookoutline",
        description="Build the table of contents of a book from its YAML outline.",
    )
    parser.add_argument("outline", type=Path, help="Outline file (YAML, or Markdown with --summary-md)")
    parser.add_argument("--root", type=Path, help="Directory chapter paths are relative to (default: outline's directory)")
    parser.add_argument("--json", action="store_true", help="Print the outline as JSON")
    parser.add_argument(
        "--drop-empty",
        action="store_true",
        default=None,
        help="Leave placeholder chapters out of the output (default: BOOKOUTLINE_DROP_EMPTY)",
    )
    parser.add_argument("--max-depth", type=int, help="Deepest sections nesting to read (default: BOOKOUTLINE_MAX_DEPTH)")
    parser.add_argument("--strict", action="store_true", default=None, help="Exit with an error if any issue was found")
    parser.add_argument("--summary-md", action="store_true", help="Read a Markdown summary of links instead of YAML")
    parser.add_argument("--log-level", default=None, help="Logging level (default: BOOKOUTLINE_LOG_LEVEL)")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.summary_md:
        conflicting = [flag for dest, flag in _BUILD_FLAGS if getattr(args, dest) is not None]
        if conflicting:
            parser.error(f"{', '.join(conflicting)} cannot be combined with --summary-md")
    configure_logging(args.log_level)

    try:
        result = _load(args)
    except ParseError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    except BuildError as exc:
        for issue in exc.issues:
            print(format_issue(issue), file=sys.stderr)
        print(f"error: {exc}", file=sys.stderr)
        return 1

    for issue in result.issues:
        print(format_issue(issue), file=sys.stderr)

    if args.json:
        print(json.dumps(result.model_dump(mode="json"), indent=2))
        return 0

    formatted = format_outline(result.outline, result.issues)
    print(formatted.tree)
    print()
    print(formatted.summary)
    return 0


def _load(args: argparse.Namespace) -> BuildResult:
    if args.summary_md:
        try:
            text = args.outline.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise ParseError(f"Cannot read summary file {args.outline}: {exc}") from exc
        return BuildResult(outline=parse_summary(text))

    options = BuilderOptions(
        root=args.root,
        drop_empty=BOOKOUTLINE_DROP_EMPTY if args.drop_empty is None else args.drop_empty,
        max_depth=BOOKOUTLINE_MAX_DEPTH if args.max_depth is None else args.max_depth,
        strict=bool(args.strict),
    )
    logger.debug("Building outline", extra={"outline": str(args.outline)})
    return build_outline_from_file(args.outline, options)
