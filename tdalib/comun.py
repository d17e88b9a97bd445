"""Shared definitions for the container types: ordering, errors and comparison."""

from __future__ import annotations

from enum import IntEnum
from typing import Any, Callable

Compare = Callable[[Any, Any], int]
"""A three-way comparison: negative, zero or positive."""


class Order(IntEnum):
    """Traversal direction for containers that can be walked both ways."""

    ASCENDING = 1
    DESCENDING = -1


class EmptyError(IndexError):
    """Raised when an element is requested from an empty container."""

    def __init__(self, message: str = "container is empty") -> None:
        super().__init__(message)


class NotFoundError(LookupError):
    """Raised when a searched element is not in the container."""

    def __init__(self, message: str = "element not found") -> None:
        super().__init__(message)


def natural_compare(a: Any, b: Any) -> int:
    """Compare two values with their own ordering, returning -1, 0 or 1."""
    return (a > b) - (a < b)