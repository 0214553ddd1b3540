"""Circular doubly linked list of caller-owned nodes.

A node belongs to at most one list. Adding a node that is already in a list
(this one or another) first removes it from there, so a node is never linked
twice. Iteration tolerates removal of nodes from the list while it runs.
"""

from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar

T = TypeVar("T")


class ListNode(Generic[T]):
    """A list entry carrying ``value``."""

    __slots__ = ("value", "_prev", "_next", "_owner")

    def __init__(self, value: Optional[T] = None) -> None:
        self.value = value
        self._prev: ListNode[T] = self
        self._next: ListNode[T] = self
        self._owner: Optional[LinkedList[T]] = None

    def __repr__(self) -> str:
        return f"ListNode({self.value!r})"


class LinkedList(Generic[T]):
    """Doubly linked list with O(1) insertion and removal of known nodes."""

    def __init__(self) -> None:
        self._root: ListNode[T] = ListNode()
        self._size = 0

    # -- internals ---------------------------------------------------------

    @staticmethod
    def _unlink(node: ListNode[T]) -> None:
        owner = node._owner
        if owner is None:
            return
        node._prev._next = node._next
        node._next._prev = node._prev
        node._prev = node
        node._next = node
        node._owner = None
        owner._size -= 1

    def _link(self, node: ListNode[T], prev: ListNode[T], nxt: ListNode[T]) -> None:
        node._prev = prev
        node._next = nxt
        prev._next = node
        nxt._prev = node
        node._owner = self
        self._size += 1

    def _check_member(self, node: ListNode[T], name: str) -> None:
        if node._owner is not self:
            raise ValueError(f"{name} is not in this list")

    def _walk(self, forward: bool) -> Iterator[ListNode[T]]:
        root = self._root
        node = root._next if forward else root._prev
        while node is not root:
            step = node._next if forward else node._prev
            yield node
            if node._owner is self:
                step = node._next if forward else node._prev
            elif step is not root and step._owner is not self:
                raise RuntimeError("list changed during iteration")
            node = step

    # -- queries -----------------------------------------------------------

    def is_empty(self) -> bool:
        """True if the list holds no nodes."""
        return self._size == 0

    def head(self) -> Optional[ListNode[T]]:
        """First node, or None if the list is empty."""
        return None if self._size == 0 else self._root._next

    def tail(self) -> Optional[ListNode[T]]:
        """Last node, or None if the list is empty."""
        return None if self._size == 0 else self._root._prev

    # -- insertion ---------------------------------------------------------

    def add_head(self, node: ListNode[T]) -> None:
        """Insert ``node`` at the front."""
        self._unlink(node)
        self._link(node, self._root, self._root._next)

    def add_tail(self, node: ListNode[T]) -> None:
        """Append ``node`` at the back."""
        self._unlink(node)
        self._link(node, self._root._prev, self._root)

    def add_after(self, prev: ListNode[T], node: ListNode[T]) -> None:
        """Insert ``node`` right after ``prev``, which must be in this list."""
        self._check_member(prev, "prev")
        if node is prev:
            raise ValueError("cannot insert a node next to itself")
        self._unlink(node)
        self._link(node, prev, prev._next)

    def add_before(self, next_node: ListNode[T], node: ListNode[T]) -> None:
        """Insert ``node`` right before ``next_node``, which must be in this list."""
        self._check_member(next_node, "next_node")
        if node is next_node:
            raise ValueError("cannot insert a node next to itself")
        self._unlink(node)
        self._link(node, next_node._prev, next_node)

    # -- removal -----------------------------------------------------------

    def pop_head(self) -> Optional[ListNode[T]]:
        """Remove and return the first node, or None if empty."""
        node = self.head()
        if node is not None:
            self._unlink(node)
        return node

    def pop_tail(self) -> Optional[ListNode[T]]:
        """Remove and return the last node, or None if empty."""
        node = self.tail()
        if node is not None:
            self._unlink(node)
        return node

    def remove(self, node: ListNode[T]) -> None:
        """Remove ``node``; raises ValueError if it is not in this list."""
        self._check_member(node, "node")
        self._unlink(node)

    def clear(self) -> None:
        """Remove every node."""
        for node in list(self._walk(True)):
            self._unlink(node)

    # -- protocols ---------------------------------------------------------

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[ListNode[T]]:
        return self._walk(True)

    def __reversed__(self) -> Iterator[ListNode[T]]:
        return self._walk(False)

    def __repr__(self) -> str:
        return f"LinkedList([{', '.join(repr(n.value) for n in self)}])"