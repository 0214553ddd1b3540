"""Binary min-heap keyed by integers, carrying arbitrary data."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Optional

_DEFAULT_MAX = sys.maxsize // 8


@dataclass(frozen=True)
class HeapItem:
    """A key and the data stored with it."""

    key: int
    data: Any = None


class Heap:
    """Min-heap; for max-heap behaviour, negate keys on the way in and out.

    Capacity starts at ``cap`` (or 4 on first growth) and doubles as needed.
    Growth beyond half of ``max_size`` raises :class:`MemoryError`.
    """

    def __init__(self, cap: int = 0, max_size: int = _DEFAULT_MAX) -> None:
        if cap < 0:
            raise ValueError("cap must not be negative")
        if cap > max_size:
            raise MemoryError("requested heap capacity exceeds max_size")
        self._max = max_size
        self._cap = cap
        self._elems: list[HeapItem] = []

    def add(self, key: int, data: Any = None) -> None:
        """Insert ``data`` with priority ``key``."""
        if len(self._elems) + 1 >= self._cap:
            if self._cap >= self._max // 2:
                raise MemoryError("heap capacity limit reached")
            self._cap = self._cap * 2 if self._cap != 0 else 4

        elems = self._elems
        elems.append(HeapItem(key, data))
        i = len(elems) - 1
        while i > 0:
            parent = (i - 1) // 2
            if not key < elems[parent].key:
                break
            elems[i] = elems[parent]
            i = parent
        elems[i] = HeapItem(key, data)

    def peek(self) -> Optional[HeapItem]:
        """Return the smallest item without removing it, or None if empty."""
        return self._elems[0] if self._elems else None

    def pop(self) -> Optional[HeapItem]:
        """Remove and return the smallest item, or None if empty."""
        elems = self._elems
        if not elems:
            return None

        top = elems[0]
        last = elems.pop()
        size = len(elems)
        if size == 0:
            return top

        i = 0
        child = 1
        while child < size:
            if child + 1 < size and elems[child].key > elems[child + 1].key:
                child += 1
            if last.key <= elems[child].key:
                break
            elems[i] = elems[child]
            i = child
            child = 2 * i + 1
        elems[i] = last
        return top

    def clear(self) -> None:
        """Remove all items, keeping the current capacity."""
        self._elems.clear()

    def __len__(self) -> int:
        return len(self._elems)

    def __repr__(self) -> str:
        return f"Heap(size={len(self._elems)})"