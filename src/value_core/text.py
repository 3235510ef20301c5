"""String surface of Value.

Every method is guarded on the cell's kind: mutating methods turn a null
cell into an empty string first, read-only methods require a string.
Positions follow ``str`` indexing; windows are ``(pos, n)`` pairs where
``n=None`` runs to the end.  A start position past the end raises
IndexError.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, MutableSequence
from typing import TYPE_CHECKING, Any

from .convert import TEXT_TYPES, decode_text
from .kinds import Kind

if TYPE_CHECKING:
    from .values import Value

NPOS = -1

_NOT_A_STRING = "is not a string"


def _window(text: str, pos: int, n: int | None) -> str:
    if pos < 0 or pos > len(text):
        raise IndexError(f"position {pos} is out of range for length {len(text)}")
    if n is None:
        return text[pos:]
    return text[pos:pos + n]


def _char(char: Any) -> str:
    if isinstance(char, int) and not isinstance(char, bool):
        return chr(char)
    if isinstance(char, str) and len(char) == 1:
        return char
    raise TypeError(f"expected a single character, got {char!r}")


class TextMethods:
    __slots__ = ()

    # -- Access ---------------------------------------------------------

    def _mutable_text(self) -> str:
        """Current text of a string cell, or "" for a null cell (not yet promoted)."""
        self._guard(Kind.STRING, _NOT_A_STRING)
        return "" if self._kind is Kind.NULL else self._data

    def _const_text(self) -> str:
        self._require(Kind.STRING, _NOT_A_STRING)
        return self._data

    def _text_source(self, source: Any, pos: int = 0, n: int | None = None) -> str:
        """Turn *source* into text and cut the ``(pos, n)`` window out of it.

        *source* is a str, bytes-like, a string Value or an iterable of
        characters.
        """
        from .values import Value

        if isinstance(source, Value):
            text = source.string
        elif isinstance(source, TEXT_TYPES):
            text = decode_text(source)
        elif isinstance(source, Iterable):
            text = "".join(_char(c) for c in source)
        else:
            raise TypeError(f"cannot use {type(source).__name__!r} as text")
        if pos == 0 and n is None:
            return text
        return _window(text, pos, n)

    def _store(self, text: str) -> Value:
        self._install(Kind.STRING, text)
        return self

    # -- Append / assign ------------------------------------------------

    def append(self, source: Any, pos: int = 0, n: int | None = None) -> Value:
        """Append *source* (or its ``(pos, n)`` window)."""
        extra = self._text_source(source, pos, n)
        return self._store(self._mutable_text() + extra)

    def append_fill(self, count: int, char: Any) -> Value:
        return self._store(self._mutable_text() + _char(char) * count)

    def string_assign(self, source: Any, pos: int = 0, n: int | None = None) -> Value:
        text = self._text_source(source, pos, n)
        self._mutable_text()
        return self._store(text)

    def string_assign_fill(self, count: int, char: Any) -> Value:
        fill = _char(char) * count
        self._mutable_text()
        return self._store(fill)

    def string_push_back(self, char: Any) -> None:
        self._store(self._mutable_text() + _char(char))

    def string_clear(self) -> None:
        self._mutable_text()
        self._store("")

    def string_resize(self, n: int, fill: Any = "\0") -> None:
        text = self._mutable_text()
        if n <= len(text):
            self._store(text[:n])
        else:
            self._store(text + _char(fill) * (n - len(text)))

    # -- Insert / erase / replace ---------------------------------------

    def string_insert(
        self, pos: int, source: Any, subpos: int = 0, n: int | None = None
    ) -> Value:
        extra = self._text_source(source, subpos, n)
        text = self._mutable_text()
        _window(text, pos, 0)
        return self._store(text[:pos] + extra + text[pos:])

    def string_insert_fill(self, pos: int, count: int, char: Any) -> Value:
        return self.string_insert(pos, _char(char) * count)

    def string_erase(self, pos: int = 0, n: int | None = None) -> Value:
        text = self._mutable_text()
        removed = _window(text, pos, n)
        return self._store(text[:pos] + text[pos + len(removed):])

    def replace(
        self,
        pos: int,
        n: int | None,
        source: Any,
        subpos: int = 0,
        subn: int | None = None,
    ) -> Value:
        """Replace the ``(pos, n)`` window with *source*'s ``(subpos, subn)``."""
        extra = self._text_source(source, subpos, subn)
        text = self._mutable_text()
        removed = _window(text, pos, n)
        return self._store(text[:pos] + extra + text[pos + len(removed):])

    def replace_fill(self, pos: int, n: int | None, count: int, char: Any) -> Value:
        return self.replace(pos, n, _char(char) * count)

    # -- Read-only ------------------------------------------------------

    def length(self) -> int:
        return len(self._const_text())

    def data(self) -> str:
        return self._const_text()

    c_str = data

    def substr(self, pos: int = 0, n: int | None = None) -> str:
        return _window(self._const_text(), pos, n)

    def string_copy(self, dest: MutableSequence, n: int, pos: int = 0) -> int:
        """Copy up to *n* characters starting at *pos* into *dest*.

        *dest* is a list (receives characters) or a bytearray (receives
        latin-1 bytes).  Returns the number of characters copied.  A chunk
        holding a character above U+00FF cannot go into a bytearray and
        raises ValueError before *dest* is written.
        """
        chunk = _window(self._const_text(), pos, n)
        if isinstance(dest, bytearray):
            wide = next((c for c in chunk if ord(c) > 0xFF), None)
            if wide is not None:
                raise ValueError(
                    f"character {wide!r} at position {pos + chunk.index(wide)} "
                    "does not fit in a latin-1 byte"
                )
            dest[: len(chunk)] = chunk.encode("latin-1")
        else:
            dest[: len(chunk)] = list(chunk)
        return len(chunk)

    def compare(self, source: Any, pos: int = 0, n: int | None = None) -> int:
        """Three-way compare of the ``(pos, n)`` window against *source*."""
        mine = _window(self._const_text(), pos, n)
        other = self._text_source(source)
        return (mine > other) - (mine < other)

    def string_iter(self) -> Iterator[str]:
        return iter(self._const_text())

    def string_reversed(self) -> Iterator[str]:
        return reversed(self._const_text())

    # -- Searching ------------------------------------------------------

    def find(self, source: Any, pos: int = 0, n: int | None = None) -> int:
        """Index of the first occurrence at or after *pos*, else NPOS.

        *n* limits how many leading characters of *source* are searched for.
        """
        needle = self._text_source(source)[:n]
        text = self._const_text()
        if pos > len(text):
            return NPOS
        return text.find(needle, pos)

    def rfind(self, source: Any, pos: int | None = None, n: int | None = None) -> int:
        """Index of the last occurrence starting at or before *pos*, else NPOS."""
        needle = self._text_source(source)[:n]
        text = self._const_text()
        if pos is None:
            return text.rfind(needle)
        return text.rfind(needle, 0, max(pos, 0) + len(needle))

    def find_first_of(self, source: Any, pos: int = 0, n: int | None = None) -> int:
        chars = set(self._text_source(source)[:n])
        return self._scan_forward(pos, lambda c: c in chars)

    def find_first_not_of(self, source: Any, pos: int = 0, n: int | None = None) -> int:
        chars = set(self._text_source(source)[:n])
        return self._scan_forward(pos, lambda c: c not in chars)

    def find_last_of(self, source: Any, pos: int | None = None, n: int | None = None) -> int:
        chars = set(self._text_source(source)[:n])
        return self._scan_backward(pos, lambda c: c in chars)

    def find_last_not_of(
        self, source: Any, pos: int | None = None, n: int | None = None
    ) -> int:
        chars = set(self._text_source(source)[:n])
        return self._scan_backward(pos, lambda c: c not in chars)

    def _scan_forward(self, pos: int, match) -> int:
        text = self._const_text()
        for i in range(max(pos, 0), len(text)):
            if match(text[i]):
                return i
        return NPOS

    def _scan_backward(self, pos: int | None, match) -> int:
        text = self._const_text()
        last = len(text) - 1 if pos is None else min(pos, len(text) - 1)
        for i in range(last, -1, -1):
            if match(text[i]):
                return i
        return NPOS
