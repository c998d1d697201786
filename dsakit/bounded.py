"""Fixed-capacity array, stack and queue."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Generic, TypeVar

T = TypeVar("T")

__all__ = [
    "CapacityError",
    "EmptyError",
    "BoundedArray",
    "BoundedStack",
    "BoundedQueue",
]


class CapacityError(Exception):
    """Raised when a bounded container has no room for another item."""


class EmptyError(Exception):
    """Raised when an item is taken from an empty container."""


def _check_capacity(capacity: int) -> int:
    if capacity < 0:
        raise ValueError("capacity must not be negative")
    return capacity


class BoundedArray(Generic[T]):
    """A sequence that holds at most ``capacity`` items."""

    def __init__(self, values: Iterable[T] = (), capacity: int = 100) -> None:
        self._capacity = _check_capacity(capacity)
        items = list(values)
        if len(items) > capacity:
            raise CapacityError(
                f"{len(items)} items do not fit in capacity {capacity}"
            )
        self._items = items

    @property
    def capacity(self) -> int:
        """The largest number of items the array can hold."""
        return self._capacity

    def insert(self, index: int, value: T) -> None:
        """Insert ``value`` before position ``index`` (``0 <= index <= len``)."""
        if len(self._items) >= self._capacity:
            raise CapacityError("array is full, cannot insert element")
        if not 0 <= index <= len(self._items):
            raise IndexError(f"invalid index {index}")
        self._items.insert(index, value)

    def delete(self, index: int) -> T:
        """Remove and return the item at ``index`` (``0 <= index < len``)."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"invalid index {index}")
        return self._items.pop(index)

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __str__(self) -> str:
        return " ".join(str(value) for value in self._items)

    def __repr__(self) -> str:
        return f"BoundedArray({self._items!r}, capacity={self._capacity})"


class BoundedStack(Generic[T]):
    """A last-in, first-out stack of at most ``capacity`` items."""

    def __init__(self, capacity: int = 5) -> None:
        self._capacity = _check_capacity(capacity)
        self._items: list[T] = []

    @property
    def capacity(self) -> int:
        """The largest number of items the stack can hold."""
        return self._capacity

    def push(self, value: T) -> None:
        """Put ``value`` on top; raise ``CapacityError`` when full."""
        if len(self._items) >= self._capacity:
            raise CapacityError("stack overflow, cannot push element")
        self._items.append(value)

    def pop(self) -> T:
        """Remove and return the top item; raise ``EmptyError`` when empty."""
        if not self._items:
            raise EmptyError("stack underflow, cannot pop element")
        return self._items.pop()

    def __iter__(self) -> Iterator[T]:
        """Yield the items from bottom to top."""
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"BoundedStack({self._items!r}, capacity={self._capacity})"


class BoundedQueue(Generic[T]):
    """A linear first-in, first-out queue with ``capacity`` slots.

    Every enqueue uses up a slot for good: slots freed by ``dequeue`` are not
    reused, so at most ``capacity`` items can ever pass through the queue.
    """

    def __init__(self, capacity: int = 5) -> None:
        self._capacity = _check_capacity(capacity)
        self._slots: list[T] = []
        self._front = 0

    @property
    def capacity(self) -> int:
        """The number of slots the queue was created with."""
        return self._capacity

    def enqueue(self, value: T) -> None:
        """Append ``value`` at the rear; raise ``CapacityError`` when no slot is left."""
        if len(self._slots) >= self._capacity:
            raise CapacityError("queue overflow")
        self._slots.append(value)

    def dequeue(self) -> T:
        """Remove and return the front item; raise ``EmptyError`` when empty."""
        if self._front >= len(self._slots):
            raise EmptyError("queue underflow")
        value = self._slots[self._front]
        self._front += 1
        return value

    def __len__(self) -> int:
        return len(self._slots) - self._front

    def __repr__(self) -> str:
        waiting = self._slots[self._front:]
        return f"BoundedQueue({waiting!r}, capacity={self._capacity})"