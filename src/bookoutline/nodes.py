"""Turn YAML outline text into the generic node tree."""

from __future__ import annotations

import re
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml
from yaml.constructor import ConstructorError, SafeConstructor

from bookoutline.config import BOOKOUTLINE_MAX_NODE_DEPTH
from bookoutline.exceptions import ParseError
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
from bookoutline.utils.logging_config import get_logger

logger = get_logger(__name__)

_TAG_PREFIX = "tag:yaml.org,2002:"
_constructor = SafeConstructor()


class CoreSchemaLoader(yaml.SafeLoader):
    """SafeLoader that resolves plain scalars with the YAML 1.2 core schema.

    ``yes``, ``on``, ``1:30`` and dates stay strings.
    """


CoreSchemaLoader.yaml_implicit_resolvers = {}
for _tag, _pattern, _first in (
    ("null", r"^(?:~|null|Null|NULL|)$", ["~", "n", "N", ""]),
    ("bool", r"^(?:true|True|TRUE|false|False|FALSE)$", list("tTfF")),
    ("int", r"^(?:[-+]?[0-9]+|0o[0-7]+|0x[0-9a-fA-F]+)$", list("-+0123456789")),
    (
        "float",
        r"^(?:[-+]?(?:\.[0-9]+|[0-9]+(?:\.[0-9]*)?)(?:[eE][-+]?[0-9]+)?"
        r"|[-+]?\.(?:inf|Inf|INF)|\.(?:nan|NaN|NAN))$",
        list("-+.0123456789"),
    ),
):
    CoreSchemaLoader.add_implicit_resolver(_TAG_PREFIX + _tag, re.compile(_pattern), _first)


def load_node(text: str, *, max_depth: int = BOOKOUTLINE_MAX_NODE_DEPTH) -> Node:
    """Parse a single YAML document into a node tree.

    Collections nested deeper than ``max_depth`` become invalid nodes.

    Raises:
        ParseError: If the text is not valid YAML, holds more than one
            document, or nests too deeply for the YAML composer.
    """
    try:
        composed = yaml.compose(text, Loader=CoreSchemaLoader)
    except yaml.YAMLError as exc:
        raise ParseError(f"Invalid outline YAML: {exc}") from exc
    except RecursionError as exc:
        raise ParseError("Invalid outline YAML: nesting too deep") from exc
    if composed is None:
        return NullNode()
    return from_yaml_node(composed, max_depth=max_depth)


def load_node_file(path: Path) -> Node:
    """Read and parse an outline file."""
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise ParseError(f"Cannot read outline file {path}: {exc}") from exc
    return load_node(text)


def from_yaml_node(node: yaml.Node, *, max_depth: int = BOOKOUTLINE_MAX_NODE_DEPTH) -> Node:
    """Convert a composed PyYAML node, keeping duplicate mapping keys."""
    return _convert(node, active=set(), depth=0, max_depth=max_depth)


def _convert(node: yaml.Node, *, active: set[int], depth: int, max_depth: int) -> Node:
    if isinstance(node, yaml.ScalarNode):
        return _convert_scalar(node)

    if depth > max_depth:
        return InvalidNode(raw="nesting too deep")
    # Anchors can make a collection contain itself.
    if id(node) in active:
        return InvalidNode(raw="recursive alias")

    def child(item: yaml.Node) -> Node:
        return _convert(item, active=active, depth=depth + 1, max_depth=max_depth)

    active.add(id(node))
    try:
        if isinstance(node, yaml.SequenceNode):
            return ArrayNode(items=tuple(child(item) for item in node.value))
        if isinstance(node, yaml.MappingNode):
            return MappingNode(pairs=tuple((child(key), child(value)) for key, value in node.value))
    finally:
        active.discard(id(node))
    return InvalidNode(raw=str(node.tag))


def _convert_scalar(node: yaml.ScalarNode) -> Node:
    tag = node.tag
    if not tag.startswith(_TAG_PREFIX):
        logger.debug("Unsupported YAML tag", extra={"tag": tag})
        return InvalidNode(raw=node.value)

    kind = tag[len(_TAG_PREFIX):]
    try:
        if kind == "bool":
            return BooleanNode(value=_constructor.construct_yaml_bool(node))
        if kind == "int":
            return IntegerNode(value=_parse_int(node.value))
        if kind == "float":
            return RealNode(value=_constructor.construct_yaml_float(node))
        if kind == "null":
            return NullNode()
    except (ConstructorError, KeyError, ValueError) as exc:
        logger.debug("Unreadable YAML scalar", extra={"tag": tag, "error": str(exc)})
        return InvalidNode(raw=node.value)
    # Strings, and standard tags with no variant of their own (timestamps, binary).
    return StringNode(value=node.value)


def _parse_int(value: str) -> int:
    if value.startswith("0o"):
        return int(value[2:], 8)
    if value.startswith("0x"):
        return int(value[2:], 16)
    return int(value, 10)


def from_python(value: Any) -> Node:
    """Convert already-loaded Python data (e.g. from ``yaml.safe_load``)."""
    if isinstance(value, str):
        return StringNode(value=value)
    if isinstance(value, bool):
        return BooleanNode(value=value)
    if isinstance(value, int):
        return IntegerNode(value=value)
    if isinstance(value, float):
        return RealNode(value=value)
    if value is None:
        return NullNode()
    if isinstance(value, Mapping):
        return MappingNode(
            pairs=tuple((from_python(key), from_python(item)) for key, item in value.items())
        )
    if isinstance(value, Sequence) and not isinstance(value, (bytes, bytearray)):
        return ArrayNode(items=tuple(from_python(item) for item in value))
    return InvalidNode(raw=repr(value))
