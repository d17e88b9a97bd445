"""A doubly linked list that remembers a current position."""

from __future__ import annotations

from typing import Any, Callable, Iterator, Optional

from .comun import Compare, EmptyError, NotFoundError, Order, natural_compare

OnDuplicate = Callable[[Any, Any], Any]


class DoublyLinkedList:
    """A sequence walkable both ways, with a cursor left on the last touched element."""

    def __init__(self) -> None:
        self._items: list[Any] = []
        self._current: Optional[int] = None

    def _locate(self, item: Any, compare: Compare) -> int:
        """Walk from the cursor towards where ``item`` belongs."""
        position = self._current if self._current is not None else 0
        last = len(self._items) - 1
        while position < last and compare(item, self._items[position]) > 0:
            position += 1
        while position > 0 and compare(item, self._items[position]) < 0:
            position -= 1
        return position

    def insert_sorted(
        self,
        item: Any,
        allow_duplicates: bool = False,
        compare: Compare = natural_compare,
        on_duplicate: Optional[OnDuplicate] = None,
    ) -> None:
        """Insert ``item`` keeping ascending order, starting the search at the cursor.

        An equal item is placed after the existing one when duplicates are
        allowed. Otherwise ``on_duplicate(existing, item)`` is called, its
        result replaces the existing element, and nothing is inserted.
        The cursor moves to the inserted element.
        """
        if not self._items:
            position = 0
        else:
            found = self._locate(item, compare)
            result = compare(item, self._items[found])
            if result < 0:
                position = found
            elif result > 0:
                position = found + 1
            else:
                if not allow_duplicates:
                    if on_duplicate is not None:
                        self._items[found] = on_duplicate(self._items[found], item)
                    return
                position = found + 1
        self._items.insert(position, item)
        self._current = position

    def push_front(self, item: Any) -> None:
        """Insert ``item`` at the front and move the cursor to it."""
        self._items.insert(0, item)
        self._current = 0

    def push_back(self, item: Any) -> None:
        """Insert ``item`` at the back and move the cursor to it."""
        self._items.append(item)
        self._current = len(self._items) - 1

    def _drop(self, position: int) -> Any:
        removed = self._items.pop(position)
        if not self._items:
            self._current = None
        elif position < len(self._items):
            self._current = position
        else:
            self._current = position - 1
        return removed

    def remove(self, item: Any, compare: Compare = natural_compare) -> Any:
        """Remove and return an element equal to ``item``, searching from the cursor.

        The cursor moves to the following element, or to the preceding one
        when the removed element was the last.
        """
        if not self._items:
            raise EmptyError("list is empty")
        found = self._locate(item, compare)
        if compare(item, self._items[found]) != 0:
            raise NotFoundError("element not found in list")
        return self._drop(found)

    def pop_front(self) -> Any:
        """Remove and return the first element; the cursor goes to the new first."""
        if not self._items:
            raise EmptyError("list is empty")
        return self._drop(0)

    def pop_back(self) -> Any:
        """Remove and return the last element; the cursor goes to the new last."""
        if not self._items:
            raise EmptyError("list is empty")
        return self._drop(len(self._items) - 1)

    def go_first(self) -> None:
        """Move the cursor to the first element."""
        if not self._items:
            raise EmptyError("list is empty")
        self._current = 0

    def go_last(self) -> None:
        """Move the cursor to the last element."""
        if not self._items:
            raise EmptyError("list is empty")
        self._current = len(self._items) - 1

    def current(self) -> Any:
        """Return the element under the cursor."""
        if self._current is None:
            raise EmptyError("list is empty")
        return self._items[self._current]

    def clear(self) -> None:
        self._items.clear()
        self._current = None

    def format(
        self,
        order: Order = Order.ASCENDING,
        formatter: Callable[[Any], str] = str,
    ) -> str:
        """Render the elements in the given direction separated by ``" | "``."""
        elements = iter(self) if order == Order.ASCENDING else reversed(self)
        return " | ".join(formatter(element) for element in elements)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __reversed__(self) -> Iterator[Any]:
        return reversed(self._items)