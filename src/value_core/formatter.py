"""One-line display of a Value on a text stream.

This is a log / debug rendering, not a serializer::

    null       → null
    boolean    → 0 or 1
    number     → 42, 0.42, -1e+100
    string     → the raw text
    array      → <array 0x7f…>
    object     → <object 0x7f…>
"""

from __future__ import annotations

import sys
from typing import IO, TYPE_CHECKING

from .kinds import Kind

if TYPE_CHECKING:
    from .values import Value


def format_number(number: float) -> str:
    if number.is_integer() and abs(number) < 1e16:
        return str(int(number))
    return repr(number)


def format_value(value: Value) -> str:
    kind = value.kind
    if kind is Kind.NULL:
        return "null"
    if kind is Kind.BOOLEAN:
        return str(int(value.boolean))
    if kind is Kind.NUMBER:
        return format_number(value.number)
    if kind is Kind.STRING:
        return value.string
    return f"<{kind} {id(value):#x}>"


def write_value(value: Value, dest: IO[str] | None = None) -> None:
    """Write the rendering of *value* to *dest* (stdout by default)."""
    (dest or sys.stdout).write(format_value(value))
