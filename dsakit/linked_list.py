"""A singly linked list and list merging."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")

__all__ = ["LinkedList", "merge_lists"]


@dataclass
class _Node(Generic[T]):
    data: T
    next: _Node[T] | None = None


class LinkedList(Generic[T]):
    """A singly linked list that grows by appending at the tail."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._head: _Node[T] | None = None
        self._tail: _Node[T] | None = None
        self._size = 0
        for value in values:
            self.append(value)

    def append(self, value: T) -> None:
        """Add ``value`` at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def __iter__(self) -> Iterator[T]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __str__(self) -> str:
        return "".join(f"{value} -> " for value in self) + "NULL"

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, LinkedList):
            return NotImplemented
        return list(self) == list(other)


def merge_lists(first: Iterable[T], second: Iterable[T]) -> list[T]:
    """Return the items of ``first`` followed by those of ``second``."""
    return [*first, *second]