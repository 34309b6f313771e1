"""bookoutline: build typed book outlines from YAML."""

from bookoutline.builder import (
    BuilderOptions,
    OutlineBuilder,
    build_outline_from_file,
    build_outline_from_yaml,
    chapter_from_link,
    chapter_from_path,
    chapter_from_title,
)
from bookoutline.classifier import ChapterShape, classify
from bookoutline.exceptions import (
    BookOutlineError,
    BuildError,
    ParseError,
    TitleResolutionError,
)
from bookoutline.links import parse_summary
from bookoutline.nodes import from_python, load_node
from bookoutline.schemas import BuildIssue, BuildResult, Chapter, Group, Outline

__all__ = [
    "BookOutlineError",
    "BuildError",
    "BuildIssue",
    "BuildResult",
    "BuilderOptions",
    "Chapter",
    "ChapterShape",
    "Group",
    "Outline",
    "OutlineBuilder",
    "ParseError",
    "TitleResolutionError",
    "build_outline_from_file",
    "build_outline_from_yaml",
    "chapter_from_link",
    "chapter_from_path",
    "chapter_from_title",
    "classify",
    "from_python",
    "load_node",
    "parse_summary",
]
