"""Path: a chain of keys and indices addressing a node in a Value tree."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterator

if TYPE_CHECKING:
    from .values import Value


class Path:
    """Ordered list of navigation steps.

    Usage::

        Path()["foo"][3]      # key "foo", then index 3
        Path("foo", 3)        # same path

    String steps select object keys, number steps select array slots
    (truncated toward zero).  Any other step never resolves.
    """

    __slots__ = ("_steps",)

    def __init__(self, *steps: Any) -> None:
        self._steps: list[Value] = []
        for step in steps:
            self._append(step)

    def __getitem__(self, step: Any) -> Path:
        """Append *step* and return the path, so subscripts chain."""
        self._append(step)
        return self

    def _append(self, step: Any) -> None:
        from .values import Value

        self._steps.append(Value(step))

    @property
    def steps(self) -> tuple[Value, ...]:
        return tuple(self._steps)

    def __iter__(self) -> Iterator[Value]:
        return iter(self._steps)

    def __len__(self) -> int:
        return len(self._steps)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path):
            return NotImplemented
        return self._steps == other._steps

    __hash__ = None

    def __repr__(self) -> str:
        inner = "".join(f"[{step.to_python()!r}]" for step in self._steps)
        return f"Path(){inner}"
