"""Tests for YAML to node conversion."""

from __future__ import annotations

from pathlib import Path

import pytest

from bookoutline.exceptions import ParseError
from bookoutline.nodes import from_python, load_node, load_node_file
from bookoutline.schemas import (
    ArrayNode,
    BooleanNode,
    IntegerNode,
    InvalidNode,
    MappingNode,
    NullNode,
    RealNode,
    StringNode,
)


class TestLoadNode:
    """Tests for load_node function."""

    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("hello", StringNode("hello")),
            ("'42'", StringNode("42")),
            ("42", IntegerNode(42)),
            ("0x1f", IntegerNode(31)),
            ("1.5", RealNode(1.5)),
            ("true", BooleanNode(True)),
            ("~", NullNode()),
            ("null", NullNode()),
        ],
    )
    def test_scalars(self, text: str, expected: object) -> None:
        """Scalars map onto their typed variants."""
        assert load_node(text) == expected

    @pytest.mark.parametrize("text", ["2024-01-01", "yes", "on", "1:30", "010_1"])
    def test_yaml_11_scalars_stay_strings(self, text: str) -> None:
        """Dates, yes/on and sexagesimals are titles, not typed values."""
        assert load_node(text) == StringNode(text)

    def test_standard_tags_without_variant_are_strings(self) -> None:
        assert load_node("!!timestamp 2024-01-01") == StringNode("2024-01-01")

    def test_local_tags_are_invalid(self) -> None:
        assert load_node("!chapter intro.md") == InvalidNode(raw="intro.md")

    def test_bad_explicit_int_is_invalid(self) -> None:
        assert load_node("!!int twelve") == InvalidNode(raw="twelve")

    def test_decimal_with_leading_zero(self) -> None:
        assert load_node("010") == IntegerNode(10)

    def test_empty_document_is_null(self) -> None:
        assert load_node("") == NullNode()

    def test_nested_structure(self) -> None:
        """Sequences and mappings keep their order."""
        node = load_node("mainmatter:\n- a.md\n- {title: B}\n")

        assert node == MappingNode(
            pairs=(
                (
                    StringNode("mainmatter"),
                    ArrayNode(
                        items=(
                            StringNode("a.md"),
                            MappingNode(pairs=((StringNode("title"), StringNode("B")),)),
                        )
                    ),
                ),
            )
        )

    def test_duplicate_keys_are_kept(self) -> None:
        """Repeated keys survive; lookups see the last one."""
        node = load_node("{title: A, title: B}")

        assert isinstance(node, MappingNode)
        assert len(node.pairs) == 2
        assert node.get("title") == StringNode("B")

    def test_recursive_alias_is_cut(self) -> None:
        """A collection that contains itself does not recurse forever."""
        node = load_node("&loop [1, *loop]")

        assert node == ArrayNode(items=(IntegerNode(1), InvalidNode(raw="recursive alias")))

    def test_rejects_invalid_yaml(self) -> None:
        with pytest.raises(ParseError, match="Invalid outline YAML"):
            load_node("mainmatter: [a.md")

    def test_rejects_multiple_documents(self) -> None:
        """Only a single document per outline is supported."""
        with pytest.raises(ParseError):
            load_node("mainmatter: [a.md]\n---\nbackmatter: [b.md]\n")

    def test_composer_recursion_is_a_parse_error(self) -> None:
        """Nesting beyond the YAML composer's reach fails cleanly."""
        text = "mainmatter: " + "[" * 5000 + "]" * 5000

        with pytest.raises(ParseError, match="nesting too deep"):
            load_node(text)

    def test_nesting_budget(self) -> None:
        """Collections below ``max_depth`` become invalid nodes."""
        node = load_node("[[[[x]]]]", max_depth=2)

        assert node == ArrayNode(
            items=(ArrayNode(items=(ArrayNode(items=(InvalidNode(raw="nesting too deep"),)),)),)
        )


class TestLoadNodeFile:
    """Tests for load_node_file function."""

    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "book.yml"
        path.write_text("frontmatter: []\n", encoding="utf-8")

        node = load_node_file(path)

        assert node == MappingNode(pairs=((StringNode("frontmatter"), ArrayNode()),))

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(ParseError, match="Cannot read outline file"):
            load_node_file(tmp_path / "missing.yml")


class TestFromPython:
    """Tests for from_python function."""

    def test_converts_loaded_data(self) -> None:
        node = from_python({"title": "T", "draft": True, "sections": ["a", 1, 2.5, None]})

        assert node == MappingNode(
            pairs=(
                (StringNode("title"), StringNode("T")),
                (StringNode("draft"), BooleanNode(True)),
                (
                    StringNode("sections"),
                    ArrayNode(items=(StringNode("a"), IntegerNode(1), RealNode(2.5), NullNode())),
                ),
            )
        )

    def test_bool_is_not_integer(self) -> None:
        assert from_python(False) == BooleanNode(False)

    def test_unknown_objects_are_invalid(self) -> None:
        assert isinstance(from_python(object()), InvalidNode)
        assert isinstance(from_python(b"bytes"), InvalidNode)
