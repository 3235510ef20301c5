"""Inward coercion: host Python objects → Value payloads.

Accepted shapes::

    None                      → null
    bool                      → boolean
    int / float               → number (stored as float)
    str / bytes / bytearray   → string (bytes decoded as latin-1)
    Value                     → deep copy
    str-keyed mapping         → object
    number-keyed mapping      → array, keys used as indices
    queue / stack / set / any other iterable → array
"""

from __future__ import annotations

import logging
import queue
from collections.abc import Iterable, Mapping
from numbers import Real
from typing import TYPE_CHECKING, Any

from .kinds import Kind

if TYPE_CHECKING:
    from .values import Value

logger = logging.getLogger(__name__)

TEXT_TYPES = (str, bytes, bytearray)


def coerce(source: Any) -> tuple[Kind, Any]:
    """Return ``(kind, payload)`` for *source*.

    Container payloads hold freshly built child Values, so the result never
    shares state with *source*.
    """
    from .values import Value

    if source is None:
        return Kind.NULL, None
    if isinstance(source, Value):
        return source.kind, copy_payload(source)
    if isinstance(source, bool):
        return Kind.BOOLEAN, source
    if isinstance(source, Real):
        return Kind.NUMBER, float(source)
    if isinstance(source, TEXT_TYPES):
        return Kind.STRING, decode_text(source)
    if isinstance(source, Mapping):
        if is_string_keyed(source):
            entries = {key: Value(item) for key, item in source.items()}
            logger.debug("coerced %s into object (%d keys)", type(source).__name__, len(entries))
            return Kind.OBJECT, entries
        items: list[Value] = []
        extend_indexed(items, source)
        logger.debug("coerced %s into array (%d items)", type(source).__name__, len(items))
        return Kind.ARRAY, items
    elements = iter_elements(source)
    if elements is None:
        raise TypeError(f"cannot convert {type(source).__name__!r} to a Value")
    items = [Value(item) for item in elements]
    logger.debug("coerced %s into array (%d items)", type(source).__name__, len(items))
    return Kind.ARRAY, items


def copy_payload(value: Value) -> Any:
    """Deep copy of *value*'s payload."""
    kind = value.kind
    if kind is Kind.ARRAY:
        return [child.copy() for child in value._data]
    if kind is Kind.OBJECT:
        return {key: child.copy() for key, child in value._data.items()}
    return value._data


def decode_text(source: str | bytes | bytearray) -> str:
    if isinstance(source, str):
        return source
    return bytes(source).decode("latin-1")


def is_string_keyed(mapping: Mapping) -> bool:
    """True when every key is a str (an empty mapping counts)."""
    return all(isinstance(key, str) for key in mapping)


def iter_elements(source: Any) -> Iterable | None:
    """Return the elements of a sequence-like *source* in order, or None.

    - LifoQueue: top of the stack first
    - PriorityQueue: lowest entry first
    - Queue: front first
    - set / frozenset: sorted order

    Queues are read under their own lock and are not drained.
    """
    if isinstance(source, (*TEXT_TYPES, Mapping)):
        return None
    if isinstance(source, queue.LifoQueue):
        with source.mutex:
            return list(reversed(source.queue))
    if isinstance(source, queue.PriorityQueue):
        with source.mutex:
            return sorted(source.queue)
    if isinstance(source, queue.Queue):
        with source.mutex:
            return list(source.queue)
    if isinstance(source, (set, frozenset)):
        return sorted(source)
    if isinstance(source, Iterable):
        return source
    return None


def extend_indexed(items: list[Value], mapping: Mapping) -> None:
    """Place every entry of a number-keyed *mapping* at its key's index.

    Keys are visited in ascending order and truncated toward zero; gaps are
    padded with null cells and a later key landing on a filled slot wins.
    Every key and entry is converted before *items* is touched.
    """
    from .values import Value

    staged: list[tuple[int, Value]] = []
    for key in sorted(mapping):
        if isinstance(key, str) or not isinstance(key, Real):
            raise TypeError(f"mapping key {key!r} is neither str nor a number")
        index = int(key)
        if index < 0:
            raise IndexError(f"negative index {index}")
        staged.append((index, Value(mapping[key])))
    for index, child in staged:
        place(items, index, child)


def place(items: list[Value], index: int, child: Value) -> None:
    """Set ``items[index]``, growing *items* with null cells when needed."""
    from .values import Value

    if index < 0:
        raise IndexError(f"negative index {index}")
    if index < len(items):
        items[index] = child
        return
    items.extend(Value() for _ in range(index - len(items)))
    items.append(child)
