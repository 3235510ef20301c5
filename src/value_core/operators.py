"""Comparison and arithmetic operators of Value.

Comparisons are structural and never raise: a raw right operand is
wrapped in a Value first, and operands of different kinds are neither
equal nor ordered.  Arithmetic dispatches on the left operand, which must
be a boolean or a number; the result is always a new number Value.
"""

from __future__ import annotations

import operator
from collections.abc import Mapping
from numbers import Real
from typing import TYPE_CHECKING, Any, Callable

from .errors import AccessError, MethodError
from .kinds import Kind

if TYPE_CHECKING:
    from .values import Value

_COMPARABLE = (type(None), bool, Real, str, bytes, bytearray, list, tuple, Mapping)


def _coerce_other(other: Any) -> Value | None:
    from .values import Value

    if isinstance(other, Value):
        return other
    if isinstance(other, _COMPARABLE):
        return Value(other)
    return None


def _payload_key(value: Value) -> Any:
    if value.kind is Kind.OBJECT:
        return sorted(value.object.items())
    return value._data


def _operand(other: Any) -> int | float | None:
    """Right-hand numeric operand, or None when *other* is not numeric."""
    from .values import Value

    if isinstance(other, Value):
        if other.kind is Kind.BOOLEAN:
            return int(other._data)
        if other.kind is Kind.NUMBER:
            return other._data
        raise AccessError(other, "is not a number")
    if isinstance(other, bool):
        return int(other)
    if isinstance(other, Real):
        return other
    return None


def _truncating_mod(x: float, divisor: float) -> float:
    return x - int(x / divisor) * divisor


class OperatorMethods:
    __slots__ = ()

    # -- Comparison -----------------------------------------------------

    def _compare(self, other: Any, op: Callable[[Any, Any], bool], null_result: bool):
        rhs = _coerce_other(other)
        if rhs is None:
            return NotImplemented
        if self._kind is not rhs._kind:
            return False
        if self._kind is Kind.NULL:
            return null_result
        return op(_payload_key(self), _payload_key(rhs))

    def __eq__(self, other: Any):
        return self._compare(other, operator.eq, True)

    def __ne__(self, other: Any):
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    def __lt__(self, other: Any):
        return self._compare(other, operator.lt, False)

    def __le__(self, other: Any):
        return self._compare(other, operator.le, True)

    def __gt__(self, other: Any):
        return self._compare(other, operator.gt, False)

    def __ge__(self, other: Any):
        return self._compare(other, operator.ge, True)

    __hash__ = None

    # -- Arithmetic -----------------------------------------------------

    def _numeric(self, symbol: str) -> int | float:
        if self._kind is Kind.BOOLEAN:
            return int(self._data)
        if self._kind is Kind.NUMBER:
            return self._data
        raise MethodError(self, f"operator{symbol}")

    def _binary(self, symbol: str, other: Any, op: Callable[[Any, Any], Any]):
        lhs = self._numeric(symbol)
        rhs = _operand(other)
        if rhs is None:
            return NotImplemented
        return self.__class__(op(lhs, rhs))

    def _bitwise(self, symbol: str, other: Any, op: Callable[[int, int], int]):
        return self._binary(symbol, other, lambda x, y: op(int(x), int(y)))

    def __add__(self, other: Any):
        from .values import Value

        if isinstance(other, (str, bytes, bytearray)) or (
            isinstance(other, Value) and other.kind is Kind.STRING
        ):
            if self._kind is not Kind.STRING:
                raise MethodError(self, "operator+")
            result = self.__class__(self._data)
            result.append(other)
            return result
        if self._kind is Kind.STRING:
            raise MethodError(self, "operator+")
        return self._binary("+", other, operator.add)

    def __sub__(self, other: Any):
        return self._binary("-", other, operator.sub)

    def __mul__(self, other: Any):
        return self._binary("*", other, operator.mul)

    def __truediv__(self, other: Any):
        return self._binary("/", other, operator.truediv)

    def __mod__(self, other: Any):
        return self._binary("%", other, _truncating_mod)

    def __and__(self, other: Any):
        return self._bitwise("&", other, operator.and_)

    def __or__(self, other: Any):
        return self._bitwise("|", other, operator.or_)

    def __xor__(self, other: Any):
        return self._bitwise("^", other, operator.xor)

    def __invert__(self):
        return self.__class__(~int(self._numeric("~")))

    def __pos__(self):
        return self.__class__(+self._numeric("+"))

    def __neg__(self):
        return self.__class__(-self._numeric("-"))
