"""Custom exceptions for bookoutline."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from bookoutline.schemas.outline import BuildIssue


class BookOutlineError(Exception):
    """Base exception for bookoutline operations."""


class ParseError(BookOutlineError):
    """Error while turning outline text into a node tree."""


class TitleResolutionError(BookOutlineError):
    """A display title could not be read from a chapter file."""


class BuildError(BookOutlineError):
    """Strict build finished with recoverable issues."""

    def __init__(self, issues: list[BuildIssue]) -> None:
        self.issues = issues
        super().__init__(f"Outline build reported {len(issues)} issue(s)")
