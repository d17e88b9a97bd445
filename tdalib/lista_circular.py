"""A circular singly linked list addressed through its last element."""

from __future__ import annotations

from typing import Any, Callable, Iterator

from .comun import Compare, EmptyError, NotFoundError, natural_compare


class CircularList:
    """A ring of items with cheap access to both the first and the last one."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def insert_sorted(self, item: Any, compare: Compare = natural_compare) -> None:
        """Insert ``item`` keeping ascending order.

        An item smaller than the first goes to the front; one not smaller
        than the last goes to the back; otherwise it goes before the first
        element that is not smaller than it.
        """
        if not self._items or compare(item, self._items[0]) < 0:
            self.push_front(item)
            return
        if compare(item, self._items[-1]) >= 0:
            self.push_back(item)
            return
        position = next(
            index
            for index, existing in enumerate(self._items)
            if compare(item, existing) <= 0
        )
        self._items.insert(position, item)

    def push_front(self, item: Any) -> None:
        """Insert ``item`` as the new first element."""
        self._items.insert(0, item)

    def push_back(self, item: Any) -> None:
        """Insert ``item`` as the new last element."""
        self._items.append(item)

    def remove(self, item: Any, compare: Compare = natural_compare) -> Any:
        """Remove and return the first element equal to ``item``."""
        if not self._items:
            raise EmptyError("list is empty")
        for index, existing in enumerate(self._items):
            if compare(item, existing) == 0:
                return self._items.pop(index)
        raise NotFoundError("element not found in list")

    def pop_front(self) -> Any:
        """Remove and return the first element."""
        if not self._items:
            raise EmptyError("list is empty")
        return self._items.pop(0)

    def pop_back(self) -> Any:
        """Remove and return the last element."""
        if not self._items:
            raise EmptyError("list is empty")
        return self._items.pop()

    def first(self) -> Any:
        if not self._items:
            raise EmptyError("list is empty")
        return self._items[0]

    def last(self) -> Any:
        if not self._items:
            raise EmptyError("list is empty")
        return self._items[-1]

    def clear(self) -> None:
        self._items.clear()

    def format(self, formatter: Callable[[Any], str] = str) -> str:
        """Render the elements from first to last separated by ``" | "``."""
        return " | ".join(formatter(element) for element in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate once around the ring, from the first element to the last."""
        return iter(self._items)