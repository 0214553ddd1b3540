"""One-shot hand-off of a value from one thread to another."""

from __future__ import annotations

import threading
from typing import Any


class Cond:
    """Condition carrying a value.

    :meth:`signal` stores a value and wakes a waiter; :meth:`wait` blocks
    until a value has been signalled, then returns it and resets the state.
    A signal that arrives before the wait is not lost.
    """

    def __init__(self) -> None:
        self._cond = threading.Condition(threading.Lock())
        self._done = False
        self._data: Any = None

    def signal(self, data: Any = None) -> None:
        """Hand ``data`` to the thread that calls (or is in) :meth:`wait`."""
        with self._cond:
            self._data = data
            self._done = True
            self._cond.notify()

    def wait(self) -> Any:
        """Block until signalled and return the signalled value."""
        with self._cond:
            self._cond.wait_for(lambda: self._done)
            data = self._data
            self._data = None
            self._done = False
            return data