"""Parse a Markdown summary (nested lists of links) into an outline."""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from bookoutline.builder import chapter_from_link
from bookoutline.schemas import Chapter, Group, Outline

_HEADING_RE = re.compile(r"^#{1,6}\s+(?P<title>.+?)\s*#*\s*$")
_ITEM_RE = re.compile(r"^(?P<indent>[ \t]*)(?:[-*+]|\d+[.)])\s+(?P<text>.+?)\s*$")
_LINK_RE = re.compile(r"^\[(?P<title>[^\]]*)\]\((?P<target>[^)]*)\)$")
_TAB_WIDTH = 4
_GROUP_NAMES = frozenset(group.value for group in Group)


@dataclass
class _Entry:
    indent: int
    title: str
    target: str | None
    children: list[_Entry] = field(default_factory=list)

    def to_chapter(self) -> Chapter:
        sections = tuple(child.to_chapter() for child in self.children)
        return chapter_from_link(self.title, self.target, sections)


def parse_summary(text: str) -> Outline:
    """Build an outline from Markdown list items.

    ``- [Title](file.md)`` items become chapters, plain ``- Title`` items and
    links with an empty target become drafts. Deeper indentation nests an item
    under the previous one. ``# Frontmatter``, ``# Mainmatter`` and
    ``# Backmatter`` headings pick the group for the items that follow; items
    before any such heading belong to the main matter.
    """
    roots: dict[Group, list[_Entry]] = {group: [] for group in Group}
    current = Group.MAINMATTER
    stack: list[_Entry] = []

    for line in text.splitlines():
        heading = _HEADING_RE.match(line)
        if heading:
            name = heading.group("title").strip().lower()
            if name in _GROUP_NAMES:
                current = Group(name)
                stack = []
            continue

        item = _ITEM_RE.match(line)
        if not item:
            continue

        indent = len(item.group("indent").expandtabs(_TAB_WIDTH))
        entry = _parse_item(item.group("text"), indent)

        while stack and stack[-1].indent >= indent:
            stack.pop()
        if stack:
            stack[-1].children.append(entry)
        else:
            roots[current].append(entry)
        stack.append(entry)

    return Outline(
        **{
            group.value: tuple(entry.to_chapter() for entry in entries)
            for group, entries in roots.items()
        }
    )


def _parse_item(text: str, indent: int) -> _Entry:
    link = _LINK_RE.match(text)
    if link:
        target = link.group("target").strip() or None
        return _Entry(indent=indent, title=link.group("title").strip(), target=target)
    return _Entry(indent=indent, title=text, target=None)
