"""Tests for the outline inspection script."""

from __future__ import annotations

import sys
from pathlib import Path

from bookoutline.classifier import ChapterShape
from bookoutline.nodes import load_node

SCRIPTS = Path(__file__).resolve().parents[1] / "scripts"
if str(SCRIPTS) not in sys.path:
    sys.path.insert(0, str(SCRIPTS))

from inspect_outline import collect_stats  # noqa: E402


def test_sections_list_is_not_a_chapter() -> None:
    _, shapes, _ = collect_stats(load_node("mainmatter: [{title: A, sections: [b.md]}]\n"))

    assert dict(shapes) == {ChapterShape.RECORD: 1, ChapterShape.TEXT: 1}


def test_nested_array_is_one_empty_slot() -> None:
    """The builder turns a list in a chapter slot into one placeholder."""
    _, shapes, _ = collect_stats(load_node("mainmatter: [[a.md, b.md], c.md]\n"))

    assert dict(shapes) == {ChapterShape.EMPTY: 1, ChapterShape.TEXT: 1}


def test_counts_kinds_and_keys() -> None:
    kinds, _, keys = collect_stats(load_node("backmatter: [{title: G, path: g.md}]\n"))

    assert kinds["MappingNode"] == 2
    assert kinds["StringNode"] == 2
    assert keys == {"backmatter": 1, "title": 1, "path": 1}
