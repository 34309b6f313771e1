"""Shared schemas for bookoutline."""

from bookoutline.schemas.chapter import Chapter
from bookoutline.schemas.node import (
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
from bookoutline.schemas.outline import BuildIssue, BuildResult, Group, IssueKind, Outline

__all__ = [
    "ArrayNode",
    "BooleanNode",
    "BuildIssue",
    "BuildResult",
    "Chapter",
    "Group",
    "IntegerNode",
    "InvalidNode",
    "IssueKind",
    "MappingNode",
    "Node",
    "NullNode",
    "Outline",
    "RealNode",
    "StringNode",
]
