"""The Value cell: a dynamically-typed recursive container.

A Value holds exactly one of six kinds at a time (null, boolean, number,
string, array, object).  The kind lives in ``_kind`` and the payload of
that kind, and only that kind, in ``_data``::

    NULL     None
    BOOLEAN  bool
    NUMBER   float
    STRING   str
    ARRAY    list[Value]
    OBJECT   dict[str, Value]   (iterated in key order)

Children are owned by their parent and every assignment deep-copies.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Iterator
from numbers import Real
from typing import Any, Callable

from . import export
from .array import ArrayMethods
from .convert import coerce, copy_payload
from .errors import AccessError, ChildError, MethodError, ValueCoreError
from .formatter import format_value
from .getter import resolve_path
from .kinds import Kind, kind_name
from .mapping import ObjectMethods
from .operators import OperatorMethods
from .path import Path
from .text import TextMethods

logger = logging.getLogger(__name__)

MAX_SIZE = sys.maxsize


class Value(TextMethods, ArrayMethods, ObjectMethods, OperatorMethods):
    """Recursive variant cell.

    Usage::

        v = Value()
        v["foo"][3] = 42          # null → object, "foo" → array padded with nulls
        v.at(Path()["foo"][3])    # → Value(42.0)
        v["foo"].size()           # → 4
    """

    __slots__ = ("_kind", "_data")

    def __init__(self, source: Any = None) -> None:
        self._kind, self._data = coerce(source)

    # -- Kind -----------------------------------------------------------

    @property
    def kind(self) -> Kind:
        return self._kind

    def is_null(self) -> bool:
        return self._kind is Kind.NULL

    def is_boolean(self) -> bool:
        return self._kind is Kind.BOOLEAN

    def is_number(self) -> bool:
        return self._kind is Kind.NUMBER

    def is_string(self) -> bool:
        return self._kind is Kind.STRING

    def is_array(self) -> bool:
        return self._kind is Kind.ARRAY

    def is_object(self) -> bool:
        return self._kind is Kind.OBJECT

    # -- Transitions ----------------------------------------------------

    def _install(self, kind: Kind, payload: Any) -> None:
        if kind is not self._kind:
            logger.debug("cell %#x: %s -> %s", id(self), self._kind, kind)
        self._kind = kind
        self._data = payload

    def _guard(self, kind: Kind, reason: str) -> None:
        """Raise unless the cell is null or already of *kind*."""
        if self._kind is not Kind.NULL and self._kind is not kind:
            raise AccessError(self, reason)

    def _require(self, kind: Kind, reason: str) -> None:
        """Raise unless the cell is exactly of *kind*."""
        if self._kind is not kind:
            raise AccessError(self, reason)

    def _promote(self, kind: Kind, factory: Callable[[], Any], reason: str) -> Any:
        """Turn a null cell into an empty *kind* and return the live payload."""
        self._guard(kind, reason)
        if self._kind is Kind.NULL:
            self._install(kind, factory())
        return self._data

    def clear(self) -> None:
        """Drop the payload and return the cell to null."""
        self._install(Kind.NULL, None)

    def set(self, source: Any = None) -> Value:
        """Replace the cell with a deep copy of *source*, whatever its kind."""
        if source is self:
            return self
        kind, payload = coerce(source)
        self._install(kind, payload)
        return self

    def set_if_null(self, source: Any = None) -> Value:
        """Like :meth:`set`, but only a null cell accepts the copy."""
        if source is self:
            return self
        if self._kind is not Kind.NULL:
            raise AccessError(self, "is not null")
        kind, payload = coerce(source)
        self._install(kind, payload)
        return self

    def __ilshift__(self, source: Any) -> Value:
        return self.set_if_null(source)

    def swap(self, other: Value) -> None:
        self._kind, other._kind = other._kind, self._kind
        self._data, other._data = other._data, self._data

    def copy(self) -> Value:
        clone = self.__class__()
        clone._kind = self._kind
        clone._data = copy_payload(self)
        return clone

    def __copy__(self) -> Value:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> Value:
        return self.copy()

    # -- Installation ---------------------------------------------------

    def new_null(self) -> None:
        self._require(Kind.NULL, "is not a null")

    def new_boolean(self, value: Any = None) -> None:
        self._guard(Kind.BOOLEAN, "is not a boolean")
        if value is not None:
            self._install(Kind.BOOLEAN, bool(value))
        elif self._kind is Kind.NULL:
            self._install(Kind.BOOLEAN, False)

    def new_number(self, value: Any = None) -> None:
        self._guard(Kind.NUMBER, "is not a number")
        if value is not None:
            self._install(Kind.NUMBER, float(value))
        elif self._kind is Kind.NULL:
            self._install(Kind.NUMBER, 0.0)

    def new_string(self, value: Any = None) -> None:
        self._guard(Kind.STRING, "is not a string")
        text = "" if value is None else self._text_source(value)
        self._install(Kind.STRING, text)

    def new_array(self, value: Any = None) -> None:
        self._guard(Kind.ARRAY, "is not a array")
        items: list[Value] = []
        if value is not None:
            self._extend_items(items, value)
        self._install(Kind.ARRAY, items)

    def new_object(self, value: Any = None) -> None:
        self._guard(Kind.OBJECT, "is not a object")
        entries: dict[str, Value] = {}
        if value is not None:
            kind, payload = coerce(value)
            if kind is not Kind.OBJECT:
                raise TypeError(f"cannot seed an object from {kind_name(kind)}")
            entries = payload
        self._install(Kind.OBJECT, entries)

    # -- Leaves ---------------------------------------------------------

    def get_boolean(self) -> bool:
        """Return the boolean, turning a null cell into ``False`` first."""
        return self._promote(Kind.BOOLEAN, bool, "is not a boolean")

    @property
    def boolean(self) -> bool:
        self._require(Kind.BOOLEAN, "is not a boolean")
        return self._data

    def get_number(self) -> float:
        """Return the number, turning a null cell into ``0.0`` first."""
        return self._promote(Kind.NUMBER, float, "is not a number")

    @property
    def number(self) -> float:
        self._require(Kind.NUMBER, "is not a number")
        return self._data

    def get_string(self) -> str:
        return self._promote(Kind.STRING, str, "is not a string")

    @property
    def string(self) -> str:
        self._require(Kind.STRING, "is not a string")
        return self._data

    def get_array(self) -> list[Value]:
        """Live child list (a null cell becomes an empty array)."""
        return self._promote(Kind.ARRAY, list, "is not a array")

    @property
    def array(self) -> list[Value]:
        self._require(Kind.ARRAY, "is not a array")
        return self._data

    def get_object(self) -> dict[str, Value]:
        """Live child dict (a null cell becomes an empty object)."""
        return self._promote(Kind.OBJECT, dict, "is not a object")

    @property
    def object(self) -> dict[str, Value]:
        self._require(Kind.OBJECT, "is not a object")
        return self._data

    def cast(self, type_: Callable[[float], Any] = float) -> Any:
        """Convert the stored number with *type_* (``int``, ``float``, …)."""
        return type_(self.number)

    def __int__(self) -> int:
        return self.cast(int)

    def __float__(self) -> float:
        return self.cast(float)

    def __bool__(self) -> bool:
        if self._kind is Kind.NULL:
            return False
        return bool(self._data)

    # -- Cross-kind methods ---------------------------------------------

    def size(self) -> int:
        if self._kind in (Kind.STRING, Kind.ARRAY, Kind.OBJECT):
            return len(self._data)
        raise MethodError(self, "size")

    __len__ = size

    def empty(self) -> bool:
        if self._kind in (Kind.STRING, Kind.ARRAY, Kind.OBJECT):
            return not self._data
        raise MethodError(self, "empty")

    def max_size(self) -> int:
        if self._kind in (Kind.STRING, Kind.ARRAY, Kind.OBJECT):
            return MAX_SIZE
        raise MethodError(self, "max_size")

    def capacity(self) -> int:
        if self._kind in (Kind.STRING, Kind.ARRAY):
            return len(self._data)
        raise MethodError(self, "capacity")

    def reserve(self, n: int = 0) -> None:
        # Python containers grow on demand; only the kind is checked.
        if self._kind not in (Kind.STRING, Kind.ARRAY):
            raise MethodError(self, "reserve")

    def resize(self, n: int, fill: Any = None) -> None:
        """Grow or shrink a string or array to *n* elements."""
        if self._kind is Kind.STRING:
            self.string_resize(n, "\0" if fill is None else fill)
        elif self._kind is Kind.ARRAY:
            self.array_resize(n, fill)
        else:
            raise MethodError(self, "resize")

    # -- Subscripts -----------------------------------------------------

    def __getitem__(self, key: Any) -> Value:
        """Mutable child access: missing keys and slots are created as null."""
        name, index = _subscript(key)
        if name is not None:
            return self._child_at_key(name)
        return self._child_at_index(index)

    def __setitem__(self, key: Any, value: Any) -> None:
        name, index = _subscript(key)
        if name is not None:
            self._set_key(name, value)
        else:
            self._set_index(index, value)

    def __delitem__(self, key: Any) -> None:
        name, index = _subscript(key)
        if name is not None:
            if not self.object_erase(name):
                raise ChildError(self, key=name)
        else:
            self._read_index(index)
            del self._data[index]

    def at(self, key: Any) -> Value:
        """Checked read: never creates children.

        *key* is a str (object key), a number (array index) or a Path.
        """
        if isinstance(key, Path):
            return resolve_path(self, key)
        name, index = _subscript(key)
        if name is not None:
            return self._read_key(name)
        return self._read_index(index)

    def contains(self, key: Any, kind: Kind | None = None) -> bool:
        """Presence test for a key, an index or a Path, optionally of *kind*.

        Key and index lookups raise AccessError on a cell of the wrong kind;
        a Path lookup reports any navigation failure as ``False``.
        """
        if isinstance(key, Path):
            try:
                child = resolve_path(self, key)
            except ValueCoreError:
                return False
            return kind is None or child._kind is kind
        name, index = _subscript(key)
        if name is not None:
            entries = self._const_entries()
            if name not in entries:
                return False
            return kind is None or entries[name]._kind is kind
        items = self._const_items()
        if not 0 <= index < len(items):
            return False
        return kind is None or items[index]._kind is kind

    def __contains__(self, key: Any) -> bool:
        return self.contains(key)

    # -- Concatenation assignment ---------------------------------------

    def __iadd__(self, other: Any) -> Value:
        if isinstance(other, (str, bytes, bytearray)) or (
            isinstance(other, Value) and other._kind is Kind.STRING
        ):
            return self.append(other)
        if isinstance(other, (bool, Real)) or (
            isinstance(other, Value)
            and other._kind in (Kind.NULL, Kind.BOOLEAN, Kind.NUMBER)
        ):
            # numeric: fall back to ``self + other``
            return NotImplemented
        if self._kind is Kind.OBJECT:
            self._merge_entries(other)
            return self
        self._guard(Kind.ARRAY, "is not a array")
        if self._kind is Kind.NULL:
            items: list[Value] = []
            self._extend_items(items, other)
            self._install(Kind.ARRAY, items)
        else:
            self._extend_items(self._data, other)
        return self

    # -- Outward coercion -----------------------------------------------

    def __iter__(self) -> Iterator[Any]:
        """Characters of a string, children of an array, values of an object."""
        return export.iter_elements(self)

    def to_list(self, item: Callable | None = None) -> list:
        return export.to_list(self, item)

    def to_tuple(self, item: Callable | None = None) -> tuple:
        return export.to_tuple(self, item)

    def to_deque(self, item: Callable | None = None):
        return export.to_deque(self, item)

    def to_set(self, item: Callable | None = None) -> set:
        return export.to_set(self, item)

    def to_queue(self, item: Callable | None = None):
        return export.to_queue(self, item)

    def to_stack(self, item: Callable | None = None):
        return export.to_stack(self, item)

    def to_dict(self, item: Callable | None = None) -> dict:
        return export.to_dict(self, item)

    def to_python(self) -> Any:
        """Plain Python copy: None, bool, float, str, list and dict."""
        return export.to_python(self)

    # -- Display --------------------------------------------------------

    def __str__(self) -> str:
        return format_value(self)

    def __repr__(self) -> str:
        return f"Value({export.to_python(self)!r})"


def _subscript(key: Any) -> tuple[str | None, int | None]:
    """Split a subscript into ``(key, None)`` or ``(None, index)``.

    Numbers are truncated toward zero; string and number Values unwrap.
    """
    if isinstance(key, Value):
        if key._kind is Kind.STRING:
            return key._data, None
        if key._kind is Kind.NUMBER:
            return None, int(key._data)
        raise TypeError(f"a {key._kind} Value cannot be used as a subscript")
    if isinstance(key, str):
        return key, None
    if isinstance(key, bool) or not isinstance(key, Real):
        raise TypeError(f"Value subscripts must be str or numbers, not {type(key).__name__}")
    return None, int(key)

