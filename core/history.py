"""Linear undo/redo history over immutable thumbnail artifacts."""

from __future__ import annotations

import threading
from typing import Generic, TypeVar

T = TypeVar("T")


class EditHistory(Generic[T]):
    """Undo/redo ledger for one thumbnail-editing session.

    ``append`` commits a new artifact after a successful generate/edit call.
    Appending while the cursor is behind the tail discards the redo branch
    first. ``undo``/``redo`` only move the cursor and are no-ops at the
    boundaries.

    Invariant: ``0 <= cursor < len(self)`` whenever the history is non-empty;
    ``cursor == -1`` when it is empty.

    Args:
        limit: Maximum number of entries kept. Oldest entries are evicted
            once exceeded. ``None`` or ``0`` means unbounded.
    """

    def __init__(self, limit: int | None = None):
        if limit is not None and limit < 0:
            raise ValueError("limit must be >= 0")
        self._items: list[T] = []
        self._cursor = -1
        self._limit = limit or None
        self._lock = threading.Lock()

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"EditHistory(len={len(self._items)}, cursor={self._cursor})"

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def items(self) -> tuple[T, ...]:
        return tuple(self._items)

    @property
    def can_undo(self) -> bool:
        return self._cursor > 0

    @property
    def can_redo(self) -> bool:
        return 0 <= self._cursor < len(self._items) - 1

    def current(self) -> T | None:
        """Artifact at the cursor, or None when nothing has been generated."""
        if not self._items:
            return None
        return self._items[self._cursor]

    def append(self, item: T) -> T:
        """Commit ``item`` as the new current entry."""
        with self._lock:
            del self._items[self._cursor + 1:]
            self._items.append(item)
            if self._limit is not None and len(self._items) > self._limit:
                del self._items[: len(self._items) - self._limit]
            self._cursor = len(self._items) - 1
        return item

    def undo(self) -> T | None:
        with self._lock:
            if self._cursor > 0:
                self._cursor -= 1
        return self.current()

    def redo(self) -> T | None:
        with self._lock:
            if self._cursor < len(self._items) - 1:
                self._cursor += 1
        return self.current()
