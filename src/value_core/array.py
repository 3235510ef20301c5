"""Array surface of Value.

Writes through ``v[i]`` grow the array with null cells up to ``i``; reads
through ``v.at(i)`` never grow it and raise ChildError past the end.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from typing import TYPE_CHECKING, Any

from .convert import extend_indexed, is_string_keyed, iter_elements, place
from .errors import ChildError
from .kinds import Kind

if TYPE_CHECKING:
    from .values import Value

_NOT_AN_ARRAY = "is not a array"


class ArrayMethods:
    __slots__ = ()

    # -- Access ---------------------------------------------------------

    def _mutable_items(self) -> list[Value]:
        return self._promote(Kind.ARRAY, list, _NOT_AN_ARRAY)

    def _const_items(self) -> list[Value]:
        self._require(Kind.ARRAY, _NOT_AN_ARRAY)
        return self._data

    def _check_position(self, index: int, limit: int) -> None:
        if not 0 <= index <= limit:
            raise ChildError(self, index=index)

    def _child_at_index(self, index: int) -> Value:
        """Child at *index*, padding the array with null cells as needed."""
        from .values import Value

        self._guard(Kind.ARRAY, _NOT_AN_ARRAY)
        if index < 0:
            raise ChildError(self, index=index)
        items = self._mutable_items()
        if index >= len(items):
            place(items, index, Value())
        return items[index]

    def _set_index(self, index: int, value: Any) -> None:
        from .values import Value

        self._guard(Kind.ARRAY, _NOT_AN_ARRAY)
        if index < 0:
            raise ChildError(self, index=index)
        child = Value(value)
        place(self._mutable_items(), index, child)

    def _read_index(self, index: int) -> Value:
        items = self._const_items()
        if not 0 <= index < len(items):
            raise ChildError(self, index=index)
        return items[index]

    def _extend_items(self, items: list[Value], source: Any) -> None:
        """Append the elements of *source* to *items*.

        - array Value / sequence / queue / stack / set → each element
        - object Value / str-keyed mapping → values in key order
        - number-keyed mapping → placed at their key index

        *items* is left untouched when any element fails to convert.
        """
        from .values import Value

        if isinstance(source, Value):
            if source.kind is Kind.OBJECT:
                items.extend([child.copy() for _, child in source.object_items()])
                return
            items.extend([child.copy() for child in source.array])
            return
        if isinstance(source, Mapping):
            if is_string_keyed(source):
                items.extend([Value(source[key]) for key in sorted(source)])
            else:
                extend_indexed(items, source)
            return
        elements = iter_elements(source)
        if elements is None:
            raise TypeError(f"cannot extend an array with {type(source).__name__!r}")
        items.extend([Value(element) for element in elements])

    # -- Element access -------------------------------------------------

    def front(self) -> Value:
        return self._edge(0)

    def back(self) -> Value:
        return self._edge(-1)

    def _edge(self, index: int) -> Value:
        self._guard(Kind.ARRAY, _NOT_AN_ARRAY)
        if self._kind is Kind.NULL or not self._data:
            raise ChildError(self, index=0)
        return self._data[index]

    def array_iter(self) -> Iterator[Value]:
        return iter(self._mutable_items())

    def array_reversed(self) -> Iterator[Value]:
        return reversed(self._mutable_items())

    # -- Modifiers ------------------------------------------------------

    def push_back(self, value: Any) -> None:
        from .values import Value

        self._guard(Kind.ARRAY, _NOT_AN_ARRAY)
        child = Value(value)
        self._mutable_items().append(child)

    def pop_back(self) -> Value:
        """Remove and return the last element."""
        self._guard(Kind.ARRAY, _NOT_AN_ARRAY)
        if self._kind is Kind.NULL or not self._data:
            raise ChildError(self, index=0)
        return self._data.pop()

    def array_erase(self, first: int, last: int | None = None) -> int:
        """Erase ``[first]`` or ``[first, last)``; returns *first*."""
        self._guard(Kind.ARRAY, _NOT_AN_ARRAY)
        size = 0 if self._kind is Kind.NULL else len(self._data)
        if last is None:
            if not 0 <= first < size:
                raise ChildError(self, index=first)
            last = first + 1
        else:
            self._check_position(first, size)
            self._check_position(last, size)
        items = self._mutable_items()
        del items[first:last]
        return first

    def array_insert(self, position: int, value: Any, count: int = 1) -> int:
        """Insert *count* copies of *value* before *position*; returns *position*."""
        from .values import Value

        self._guard(Kind.ARRAY, _NOT_AN_ARRAY)
        size = 0 if self._kind is Kind.NULL else len(self._data)
        self._check_position(position, size)
        copies = [Value(value) for _ in range(count)]
        self._mutable_items()[position:position] = copies
        return position

    def array_insert_range(self, position: int, source: Iterable) -> int:
        self._guard(Kind.ARRAY, _NOT_AN_ARRAY)
        size = 0 if self._kind is Kind.NULL else len(self._data)
        self._check_position(position, size)
        incoming: list[Value] = []
        self._extend_items(incoming, source)
        self._mutable_items()[position:position] = incoming
        return position

    def assign(self, n: int, value: Any) -> None:
        """Replace the contents with *n* copies of *value*."""
        from .values import Value

        self._guard(Kind.ARRAY, _NOT_AN_ARRAY)
        copies = [Value(value) for _ in range(n)]
        self._mutable_items()[:] = copies

    def array_assign(self, source: Iterable) -> None:
        self._guard(Kind.ARRAY, _NOT_AN_ARRAY)
        incoming: list[Value] = []
        self._extend_items(incoming, source)
        self._mutable_items()[:] = incoming

    def array_resize(self, n: int, fill: Any = None) -> None:
        from .values import Value

        self._guard(Kind.ARRAY, _NOT_AN_ARRAY)
        padding = Value(fill)
        items = self._mutable_items()
        if n <= len(items):
            del items[n:]
        else:
            items.extend(padding.copy() for _ in range(n - len(items)))
