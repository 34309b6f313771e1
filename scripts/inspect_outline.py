"""Inspect how an outline file's nodes are classified."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path

from bookoutline.classifier import classify
from bookoutline.nodes import load_node_file
from bookoutline.schemas import ArrayNode, Group, MappingNode, Node


def main() -> None:
    parser = argparse.ArgumentParser(description="Show node kinds and chapter shapes in an outline.")
    parser.add_argument("file", help="Outline YAML file")
    parser.add_argument("--keys", action="store_true", help="Also count record keys")
    args = parser.parse_args()

    root = load_node_file(Path(args.file))
    kinds, shapes, keys = collect_stats(root)

    print("Node kinds:")
    for name, count in kinds.most_common():
        print(f"{name}: {count}")

    print("\nChapter shapes:")
    for shape, count in shapes.most_common():
        print(f"{shape.value}: {count}")

    if args.keys:
        print("\nRecord keys:")
        for name, count in keys.most_common():
            print(f"{name}: {count}")


def collect_stats(root: Node) -> tuple[Counter, Counter, Counter]:
    """Count every node kind and record key, and the shape of every chapter slot.

    Chapter slots are the items of group lists and of record ``sections`` lists.
    """
    kinds: Counter = Counter()
    shapes: Counter = Counter()
    keys: Counter = Counter()

    def walk(node: Node) -> None:
        kinds[type(node).__name__] += 1
        if isinstance(node, ArrayNode):
            for item in node.items:
                walk(item)
        elif isinstance(node, MappingNode):
            for key, value in node.pairs:
                keys[getattr(key, "value", type(key).__name__)] += 1
                walk(value)

    def visit_chapters(items: tuple[Node, ...]) -> None:
        for item in items:
            shapes[classify(item)] += 1
            if isinstance(item, MappingNode):
                sections = item.get("sections")
                if isinstance(sections, ArrayNode):
                    visit_chapters(sections.items)

    walk(root)
    if isinstance(root, MappingNode):
        for group in Group:
            value = root.get(group.value)
            if isinstance(value, ArrayNode):
                visit_chapters(value.items)
    return kinds, shapes, keys


if __name__ == "__main__":
    main()
