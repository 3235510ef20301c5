"""Outward coercion: Value → host Python containers.

Elements come from the kind of the cell:

- string → its characters
- array  → its children
- object → its values, in key order
- null / boolean / number → MethodError

``to_dict`` keys objects by their own keys and strings / arrays by
position.  Every function takes an optional *item* callable applied to each
element; by default children are deep-copied so the result never shares
cells with the source.
"""

from __future__ import annotations

import queue
from collections import deque
from typing import TYPE_CHECKING, Any, Callable, Iterator

from .errors import MethodError
from .kinds import Kind

if TYPE_CHECKING:
    from .values import Value


def _default_item(element: Any) -> Any:
    if isinstance(element, str):
        return element
    return element.copy()


def iter_elements(value: Value, method: str = "__iter__") -> Iterator[Any]:
    """Live elements of *value* (characters or child cells).

    *method* names the caller in the MethodError raised for scalar kinds.
    """
    if value.kind is Kind.STRING:
        return iter(value.string)
    if value.kind is Kind.ARRAY:
        return iter(value.array)
    if value.kind is Kind.OBJECT:
        return iter(value.values())
    raise MethodError(value, method)


def _converted(value: Value, item: Callable | None, method: str) -> Iterator[Any]:
    convert = item or _default_item
    return (convert(element) for element in iter_elements(value, method))


def to_list(value: Value, item: Callable | None = None) -> list:
    return list(_converted(value, item, "to_list"))


def to_tuple(value: Value, item: Callable | None = None) -> tuple:
    return tuple(_converted(value, item, "to_tuple"))


def to_deque(value: Value, item: Callable | None = None) -> deque:
    return deque(_converted(value, item, "to_deque"))


def to_set(value: Value, item: Callable | None = None) -> set:
    """Set of elements; cells are unwrapped with ``to_python`` by default."""
    return set(_converted(value, item or _python_item, "to_set"))


def to_queue(value: Value, item: Callable | None = None) -> queue.Queue:
    """FIFO queue holding the elements front to back."""
    result: queue.Queue = queue.Queue()
    for element in _converted(value, item, "to_queue"):
        result.put(element)
    return result


def to_stack(value: Value, item: Callable | None = None) -> queue.LifoQueue:
    """LIFO queue with the last element on top."""
    result: queue.LifoQueue = queue.LifoQueue()
    for element in _converted(value, item, "to_stack"):
        result.put(element)
    return result


def to_dict(value: Value, item: Callable | None = None) -> dict:
    convert = item or _default_item
    if value.kind is Kind.OBJECT:
        return {key: convert(child) for key, child in value.object_items()}
    if value.kind in (Kind.STRING, Kind.ARRAY):
        return {i: convert(element) for i, element in enumerate(iter_elements(value))}
    raise MethodError(value, "to_dict")


def to_python(value: Value) -> Any:
    """Deep conversion to None / bool / float / str / list / dict."""
    if value.kind is Kind.ARRAY:
        return [to_python(child) for child in value.array]
    if value.kind is Kind.OBJECT:
        return {key: to_python(child) for key, child in value.object_items()}
    return value._data


def _python_item(element: Any) -> Any:
    if isinstance(element, str):
        return element
    return to_python(element)
