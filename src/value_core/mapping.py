"""Object surface of Value: a str-keyed mapping iterated in key order."""

from __future__ import annotations

from bisect import bisect_left, bisect_right
from collections.abc import Iterable, Iterator, Mapping
from typing import TYPE_CHECKING, Any

from .errors import ChildError
from .kinds import Kind

if TYPE_CHECKING:
    from .values import Value

_NOT_AN_OBJECT = "is not a object"


def _check_key(key: Any) -> str:
    if not isinstance(key, str):
        raise TypeError(f"object keys must be str, not {type(key).__name__}")
    return key


class ObjectMethods:
    __slots__ = ()

    # -- Access ---------------------------------------------------------

    def _mutable_entries(self) -> dict[str, Value]:
        return self._promote(Kind.OBJECT, dict, _NOT_AN_OBJECT)

    def _const_entries(self) -> dict[str, Value]:
        self._require(Kind.OBJECT, _NOT_AN_OBJECT)
        return self._data

    def _sorted_keys(self) -> list[str]:
        return sorted(self._mutable_entries())

    def _child_at_key(self, key: str) -> Value:
        """Child under *key*, inserting a null cell when it is missing."""
        from .values import Value

        entries = self._mutable_entries()
        if key not in entries:
            entries[key] = Value()
        return entries[key]

    def _set_key(self, key: str, value: Any) -> None:
        from .values import Value

        self._guard(Kind.OBJECT, _NOT_AN_OBJECT)
        child = Value(value)
        self._mutable_entries()[key] = child

    def _read_key(self, key: str) -> Value:
        entries = self._const_entries()
        if key not in entries:
            raise ChildError(self, key=key)
        return entries[key]

    def _merge_entries(self, source: Any) -> None:
        """Insert every entry of *source* whose key is not present yet."""
        from .values import Value

        if isinstance(source, Value):
            incoming = source.object
        elif isinstance(source, Mapping):
            incoming = source
        else:
            raise TypeError(f"cannot merge {type(source).__name__!r} into an object")
        entries = self._mutable_entries()
        additions = {
            _check_key(key): Value(item)
            for key, item in incoming.items()
            if key not in entries
        }
        entries.update(additions)

    # -- Iteration ------------------------------------------------------

    def object_items(self) -> Iterator[tuple[str, Value]]:
        entries = self._mutable_entries()
        return ((key, entries[key]) for key in sorted(entries))

    def object_reversed(self) -> Iterator[tuple[str, Value]]:
        entries = self._mutable_entries()
        return ((key, entries[key]) for key in sorted(entries, reverse=True))

    def keys(self) -> list[str]:
        return self._sorted_keys()

    def values(self) -> list[Value]:
        entries = self._mutable_entries()
        return [entries[key] for key in sorted(entries)]

    # -- Lookup ---------------------------------------------------------

    def object_find(self, key: str) -> tuple[str, Value] | None:
        entries = self._mutable_entries()
        if key in entries:
            return key, entries[key]
        return None

    def count(self, key: str) -> int:
        return int(key in self._mutable_entries())

    def lower_bound(self, key: str) -> str | None:
        """First key not less than *key*, or None."""
        keys = self._sorted_keys()
        i = bisect_left(keys, key)
        return keys[i] if i < len(keys) else None

    def upper_bound(self, key: str) -> str | None:
        """First key greater than *key*, or None."""
        keys = self._sorted_keys()
        i = bisect_right(keys, key)
        return keys[i] if i < len(keys) else None

    def equal_range(self, key: str) -> tuple[str | None, str | None]:
        return self.lower_bound(key), self.upper_bound(key)

    # -- Modifiers ------------------------------------------------------

    def object_insert(self, pair: tuple[str, Any]) -> tuple[Value, bool]:
        """Insert ``(key, value)`` unless *key* exists.

        Returns the child now stored under *key* and whether it was inserted.
        """
        from .values import Value

        key, item = pair
        _check_key(key)
        self._guard(Kind.OBJECT, _NOT_AN_OBJECT)
        entries = self._mutable_entries()
        if key in entries:
            return entries[key], False
        entries[key] = Value(item)
        return entries[key], True

    def object_insert_range(self, pairs: Iterable[tuple[str, Any]] | Mapping) -> None:
        """Insert every pair whose key is absent; all-or-nothing."""
        from .values import Value

        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        staged = [(_check_key(key), Value(item)) for key, item in pairs]
        self._guard(Kind.OBJECT, _NOT_AN_OBJECT)
        entries = self._mutable_entries()
        for key, child in staged:
            if key not in entries:
                entries[key] = child

    def object_erase(self, key: str, last: str | None = None) -> int:
        """Erase *key*, or every key in ``[key, last)``; returns the count removed."""
        entries = self._mutable_entries()
        if last is None:
            return 1 if entries.pop(key, None) is not None else 0
        doomed = [k for k in entries if key <= k < last]
        for k in doomed:
            del entries[k]
        return len(doomed)
