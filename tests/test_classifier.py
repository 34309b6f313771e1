"""Tests for node classification."""

from __future__ import annotations

import pytest

from bookoutline.classifier import ChapterShape, classify
from bookoutline.schemas import (
    ArrayNode,
    BooleanNode,
    IntegerNode,
    InvalidNode,
    MappingNode,
    Node,
    NullNode,
    RealNode,
    StringNode,
)


@pytest.mark.parametrize(
    ("node", "shape"),
    [
        (StringNode("chapter1.md"), ChapterShape.TEXT),
        (StringNode(""), ChapterShape.TEXT),
        (MappingNode(), ChapterShape.RECORD),
        (MappingNode(pairs=((StringNode("title"), StringNode("T")),)), ChapterShape.RECORD),
        (ArrayNode(items=(StringNode("a.md"),)), ChapterShape.EMPTY),
        (IntegerNode(3), ChapterShape.EMPTY),
        (RealNode(0.5), ChapterShape.EMPTY),
        (BooleanNode(True), ChapterShape.EMPTY),
        (NullNode(), ChapterShape.EMPTY),
        (InvalidNode(raw="?"), ChapterShape.EMPTY),
    ],
)
def test_classify(node: Node, shape: ChapterShape) -> None:
    assert classify(node) is shape
