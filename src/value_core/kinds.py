"""Variant tags for Value cells."""

from __future__ import annotations

from enum import Enum


class Kind(Enum):
    NULL = 0
    BOOLEAN = 1
    NUMBER = 2
    STRING = 3
    ARRAY = 4
    OBJECT = 5

    def __str__(self) -> str:
        return kind_name(self)


_NAMES: dict[Kind, str] = {
    Kind.NULL: "null",
    Kind.BOOLEAN: "boolean",
    Kind.NUMBER: "number",
    Kind.STRING: "string",
    Kind.ARRAY: "array",
    Kind.OBJECT: "object",
}


def kind_name(kind: Kind) -> str:
    """Return the short display name of *kind* (``"null"`` … ``"object"``)."""
    return _NAMES[kind]
