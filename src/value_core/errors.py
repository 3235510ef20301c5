"""Diagnostics raised by guarded Value operations.

Every diagnostic keeps a reference to the offending cell in ``value`` and
formats its message once, at construction::

    AccessError   cell holds the wrong kind ("is not a string (is number).")
    ChildError    array index out of range / object key missing
    MethodError   operation is not defined for the cell's kind
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .values import Value


class ValueCoreError(Exception):
    """Base class for all value_core diagnostics."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class AccessError(ValueCoreError):
    """Operation demands a kind the cell does not hold."""

    def __init__(self, value: Value, reason: str) -> None:
        super().__init__(f"{reason} (is {value.kind})." if reason else "")
        self.value = value


class ChildError(AccessError):
    """Array index out of range, or object key absent."""

    def __init__(
        self,
        value: Value,
        *,
        index: int | None = None,
        key: str | None = None,
    ) -> None:
        super().__init__(value, "")
        self.index = index
        self.key = key
        if key is not None:
            self.message = f"{key} has not a key."
        else:
            self.message = f"{index} has out of range."
        self.args = (self.message,)


class MethodError(AccessError):
    """Operation is not exposed by the cell's current kind."""

    def __init__(self, value: Value, method_name: str) -> None:
        super().__init__(value, "")
        self.method_name = method_name
        self.message = f"has not a method {method_name}."
        self.args = (self.message,)
