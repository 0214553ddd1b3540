"""Growable array with explicit capacity doubling and an out-of-memory flag."""

from __future__ import annotations

import sys
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")

_INITIAL_CAP = 8


class Array(Generic[T]):
    """Dynamic array whose capacity starts at 8 and doubles on demand.

    ``max_size`` bounds the number of elements the array may ever hold.
    When an ``add`` would need to grow past half of that bound, the
    element is not stored and :attr:`oom` becomes true until the next
    successful ``add`` or ``clear``.
    """

    def __init__(self, items: Iterable[T] = (), max_size: int = sys.maxsize) -> None:
        if max_size <= 0:
            raise ValueError("max_size must be positive")
        self._max = max_size
        self._elems: list[T] = []
        self._cap = 0
        self._oom = False
        for item in items:
            self.add(item)

    def add(self, item: T) -> None:
        """Append ``item``; on capacity exhaustion set :attr:`oom` instead."""
        if self._cap == len(self._elems):
            if self._cap > self._max // 2:
                self._oom = True
                return
            self._cap = _INITIAL_CAP if self._cap == 0 else self._cap * 2
        self._oom = False
        self._elems.append(item)

    def delete(self, index: int) -> None:
        """Remove the element at ``index``, keeping the order of the rest."""
        position = self._normalize(index)
        self._elems.pop(position)

    def delete_unordered(self, index: int) -> None:
        """Remove the element at ``index`` by moving the last element into its place."""
        index = self._normalize(index)
        last = self._elems.pop()
        if index < len(self._elems):
            self._elems[index] = last

    def delete_last(self) -> None:
        """Remove the last element."""
        if not self._elems:
            raise IndexError("delete_last from empty array")
        self._elems.pop()

    def last(self) -> T:
        """Return the last element."""
        if not self._elems:
            raise IndexError("last of empty array")
        return self._elems[-1]

    def sort(self, key: Optional[Callable[[T], Any]] = None) -> None:
        """Sort the elements in place."""
        self._elems.sort(key=key)

    def clear(self) -> None:
        """Remove all elements, keeping the current capacity."""
        self._elems.clear()
        self._oom = False

    @property
    def cap(self) -> int:
        """Current capacity."""
        return self._cap

    @property
    def oom(self) -> bool:
        """True if the last ``add`` failed for lack of capacity."""
        return self._oom

    def __len__(self) -> int:
        return len(self._elems)

    def __getitem__(self, index: int) -> T:
        return self._elems[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._elems)

    def __repr__(self) -> str:
        return f"Array({self._elems!r})"

    def _normalize(self, index: int) -> int:
        size = len(self._elems)
        if index < 0:
            index += size
        if not 0 <= index < size:
            raise IndexError("array index out of range")
        return index