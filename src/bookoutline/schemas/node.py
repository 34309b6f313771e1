"""Generic document tree produced by the outline parser.

Each variant is a frozen dataclass; ``Node`` is the closed union of all of
them. Consumers dispatch with ``isinstance`` and must treat any variant they
do not understand as "not meaningful here".
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class StringNode:
    value: str


@dataclass(frozen=True)
class IntegerNode:
    value: int


@dataclass(frozen=True)
class RealNode:
    value: float


@dataclass(frozen=True)
class BooleanNode:
    value: bool


@dataclass(frozen=True)
class NullNode:
    pass


@dataclass(frozen=True)
class InvalidNode:
    """A value the parser could not map onto any other variant."""

    raw: str = ""


@dataclass(frozen=True)
class ArrayNode:
    items: tuple[Node, ...] = ()


@dataclass(frozen=True)
class MappingNode:
    """Ordered key/value pairs. Keys may repeat; lookups see the last one."""

    pairs: tuple[tuple[Node, Node], ...] = ()

    def get(self, key: str) -> Node | None:
        """Return the value stored under the string key ``key``, if any."""
        found: Node | None = None
        for pair_key, value in self.pairs:
            if isinstance(pair_key, StringNode) and pair_key.value == key:
                found = value
        return found

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.get(key) is not None


Node = Union[
    StringNode,
    IntegerNode,
    RealNode,
    BooleanNode,
    NullNode,
    InvalidNode,
    ArrayNode,
    MappingNode,
]
