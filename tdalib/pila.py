"""A last-in, first-out stack."""

from __future__ import annotations

from typing import Any, Iterator

from .comun import EmptyError


class Stack:
    """A LIFO stack of arbitrary items."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push(self, item: Any) -> None:
        """Put an item on top of the stack."""
        self._items.append(item)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if not self._items:
            raise EmptyError("stack is empty")
        return self._items.pop()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise EmptyError("stack is empty")
        return self._items[-1]

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        """A dynamic stack never reports itself full."""
        return False

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from the top of the stack to the bottom."""
        return reversed(self._items)