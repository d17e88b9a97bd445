"""A first-in, first-out queue."""

from __future__ import annotations

from collections import deque
from typing import Any, Iterator

from .comun import EmptyError


class Queue:
    """A FIFO queue of arbitrary items."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, item: Any) -> None:
        """Add an item at the back of the queue."""
        self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the item at the front."""
        if not self._items:
            raise EmptyError("queue is empty")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the item at the front without removing it."""
        if not self._items:
            raise EmptyError("queue is empty")
        return self._items[0]

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        """A dynamic queue never reports itself full."""
        return False

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the front of the queue to the back."""
        return iter(self._items)