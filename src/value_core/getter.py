"""Path resolution for Value trees."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .errors import AccessError, ChildError
from .kinds import Kind

if TYPE_CHECKING:
    from .path import Path
    from .values import Value


def apply_step(node: Value, step: Value) -> Value:
    """Resolve a single path step on *node*.

    - string step on an object: child under that key
    - number step on an array: child at the truncated index
    - anything else: AccessError reported against *node*
    """
    if step.kind is Kind.STRING and node.kind is Kind.OBJECT:
        entries = node.object
        if step.string not in entries:
            raise ChildError(node, key=step.string)
        return entries[step.string]

    if step.kind is Kind.NUMBER and node.kind is Kind.ARRAY:
        index = int(step.number)
        items = node.array
        if not 0 <= index < len(items):
            raise ChildError(node, index=index)
        return items[index]

    raise AccessError(node, "wrong type of child")


def resolve_path(root: Value, path: Path) -> Value:
    """Walk *path* from *root*; raises at the first step that fails."""
    node = root
    for step in path:
        node = apply_step(node, step)
    return node
