"""Small synchronisation helpers: an atomic cell and a recursive mutex."""

from __future__ import annotations

import threading
from typing import Generic, TypeVar

T = TypeVar("T")


class Atomic(Generic[T]):
    """A value that can be read and replaced safely from several threads."""

    def __init__(self, value: T = False) -> None:  # type: ignore[assignment]
        self._guard = threading.Lock()
        self._value = value

    def load(self) -> T:
        """Return the current value."""
        with self._guard:
            return self._value

    def store(self, value: T) -> None:
        """Replace the current value."""
        with self._guard:
            self._value = value

    def __repr__(self) -> str:
        return f"Atomic({self.load()!r})"


class Mutex:
    """A recursive mutex, usable as a context manager.

    The owning thread may lock it several times; it is released once
    ``unlock`` has been called as many times as ``lock``.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()

    def lock(self) -> None:
        """Block until the mutex is held by the calling thread."""
        self._lock.acquire()

    def unlock(self) -> None:
        """Release one level of ownership.

        Raises RuntimeError if the calling thread does not hold the mutex.
        """
        self._lock.release()

    def __enter__(self) -> Mutex:
        self.lock()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.unlock()