"""Example driver: build a mixed tree and print every leaf.

Run with ``python -m value_core.quickstart``.
"""

from __future__ import annotations

import sys
from typing import IO

from .values import Value


def build() -> Value:
    doc = Value()
    doc["foo"] = "bar"
    doc["array"][0] = "foo"
    doc["array"][1] = "bar"
    doc["vector"].new_array([0.42, -0.42, 42])
    doc["object"]["foo"] = "bar"
    doc["map_object"] = {"key1": "value1", "key2": "value2"}
    doc["boolean"] = True
    doc["number"] = 24
    doc["null"].new_null()
    # Stored as a deep copy: later edits to doc do not reach doc["self"].
    doc["self"] = doc
    return doc


def _print_tree(node: Value, dest: IO[str], indent: str = "") -> None:
    """Print each child of an object/array; leaves go through str(Value)."""
    if node.is_object():
        children = node.object_items()
    else:
        children = enumerate(node.array_iter())
    for key, child in children:
        if child.is_object() or child.is_array():
            print(f"{indent}{key}: ", file=dest)
            _print_tree(child, dest, indent + "  ")
        else:
            print(f"{indent}{key}: {child}", file=dest)


def main(dest: IO[str] | None = None) -> None:
    _print_tree(build(), dest or sys.stdout)


if __name__ == "__main__":
    main()
