"""A singly linked list with ordered insertion and removal helpers."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Any, Callable, Iterator, Optional

from .comun import Compare, EmptyError, natural_compare

OnDuplicate = Callable[[Any, Any], Any]


class LinkedList:
    """An ordered sequence supporting front/back and sorted operations."""

    def __init__(self) -> None:
        self._items: list[Any] = []

    def push_front(self, item: Any) -> None:
        self._items.insert(0, item)

    def push_back(self, item: Any) -> None:
        self._items.append(item)

    def insert_sorted(
        self,
        item: Any,
        allow_duplicates: bool = False,
        compare: Compare = natural_compare,
        on_duplicate: Optional[OnDuplicate] = None,
    ) -> None:
        """Insert before the first element not less than ``item``.

        When an equal element is found, ``on_duplicate(existing, item)`` is
        called and its result replaces the existing element. Without
        ``allow_duplicates`` nothing is inserted in that case.
        """
        position = len(self._items)
        result = 1
        for index, existing in enumerate(self._items):
            result = compare(item, existing)
            if result <= 0:
                position = index
                break
        if position < len(self._items) and result == 0:
            if on_duplicate is not None:
                self._items[position] = on_duplicate(self._items[position], item)
            if not allow_duplicates:
                return
        self._items.insert(position, item)

    def pop_front(self) -> Any:
        if not self._items:
            raise EmptyError("list is empty")
        return self._items.pop(0)

    def pop_back(self) -> Any:
        if not self._items:
            raise EmptyError("list is empty")
        return self._items.pop()

    def remove_all(self, item: Any, compare: Compare = natural_compare) -> int:
        """Remove every element equal to ``item``; return how many went."""
        kept = [element for element in self._items if compare(element, item) != 0]
        removed = len(self._items) - len(kept)
        self._items = kept
        return removed

    def remove_sorted(self, item: Any, compare: Compare = natural_compare) -> int:
        """Remove elements equal to ``item`` up to the first greater one.

        Assumes the list is in ascending order; returns the number removed.
        """
        kept: list[Any] = []
        removed = 0
        stop = len(self._items)
        for index, element in enumerate(self._items):
            result = compare(element, item)
            if result > 0:
                stop = index
                break
            if result == 0:
                removed += 1
            else:
                kept.append(element)
        self._items = kept + self._items[stop:]
        return removed

    def sort(self, compare: Compare = natural_compare) -> None:
        """Sort the list in ascending order; an empty list is an error."""
        if not self._items:
            raise EmptyError("list is empty")
        self._items.sort(key=cmp_to_key(compare))

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

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        """A dynamic list never reports itself full."""
        return False

    def format(self, formatter: Callable[[Any], str] = str) -> str:
        """Render the elements separated by ``" | "``."""
        return " | ".join(formatter(element) for element in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)