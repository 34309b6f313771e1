"""Format outlines into a summary and an indented chapter tree."""

from __future__ import annotations

from typing import Iterable

from pydantic import BaseModel

from bookoutline.schemas import BuildIssue, Chapter, Outline

_EMPTY_MARKER = "<empty>"
_DRAFT_MARKER = "(draft)"


class FormattedOutline(BaseModel):
    """Rendered outline."""

    summary: str
    tree: str


def format_outline(outline: Outline, issues: Iterable[BuildIssue] = ()) -> FormattedOutline:
    """Create the summary and the chapter tree."""
    blocks: list[str] = []
    summary_lines: list[str] = []
    for group, chapters in outline.groups():
        tree = _create_chapter_tree(chapters)
        blocks.append(f"{group.value}:\n{tree}" if tree else f"{group.value}: (none)")
        summary_lines.append(f"{group.value.capitalize()}: {count_chapters(chapters)}")

    drafts = sum(count_drafts(chapters) for _, chapters in outline.groups())
    summary_lines.append(f"Drafts: {drafts}")

    issue_count = len(list(issues))
    if issue_count:
        summary_lines.append(f"Issues: {issue_count}")

    return FormattedOutline(summary="\n".join(summary_lines), tree="\n\n".join(blocks))


def count_chapters(chapters: Iterable[Chapter]) -> int:
    """Count total chapters in the tree."""
    total = 0
    for chapter in chapters:
        total += 1
        total += count_chapters(chapter.sections)
    return total


def count_drafts(chapters: Iterable[Chapter]) -> int:
    total = 0
    for chapter in chapters:
        if chapter.draft:
            total += 1
        total += count_drafts(chapter.sections)
    return total


def format_issue(issue: BuildIssue) -> str:
    return f"{issue.location}: {issue.kind.value}: {issue.message}"


def _create_chapter_tree(chapters: Iterable[Chapter], indent: int = 0) -> str:
    lines: list[str] = []
    for chapter in chapters:
        lines.append("    " * indent + _describe(chapter))
        if chapter.sections:
            lines.append(_create_chapter_tree(chapter.sections, indent + 1))
    return "\n".join(lines)


def _describe(chapter: Chapter) -> str:
    if chapter.is_empty:
        return _EMPTY_MARKER
    parts = [chapter.title or _EMPTY_MARKER]
    if chapter.path is not None:
        parts.append(f"[{chapter.path.as_posix()}]")
    if chapter.draft:
        parts.append(_DRAFT_MARKER)
    return " ".join(parts)
