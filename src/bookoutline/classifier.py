"""Decide which chapter shape a generic node stands for."""

from __future__ import annotations

from enum import Enum

from bookoutline.schemas import MappingNode, Node, StringNode


class ChapterShape(str, Enum):
    """Chapter interpretations of a node."""

    TEXT = "text"  # bare file reference or bare title
    RECORD = "record"
    EMPTY = "empty"


def classify(node: Node) -> ChapterShape:
    """Return the chapter shape of ``node``. Never raises."""
    if isinstance(node, StringNode):
        return ChapterShape.TEXT
    if isinstance(node, MappingNode):
        return ChapterShape.RECORD
    # Arrays, numbers, booleans, null and invalid values.
    return ChapterShape.EMPTY
