"""An unbalanced binary search tree of distinct values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

T = TypeVar("T")

__all__ = ["BinarySearchTree"]


@dataclass
class _Node(Generic[T]):
    data: T
    left: _Node[T] | None = None
    right: _Node[T] | None = None


class BinarySearchTree(Generic[T]):
    """A binary search tree; inserting a value already present does nothing."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._root: _Node[T] | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: T) -> None:
        """Insert ``value`` unless an equal value is already stored."""
        if self._root is None:
            self._root = _Node(value)
            self._size += 1
            return
        node = self._root
        while True:
            if value < node.data:
                if node.left is None:
                    node.left = _Node(value)
                    break
                node = node.left
            elif value > node.data:
                if node.right is None:
                    node.right = _Node(value)
                    break
                node = node.right
            else:
                return
        self._size += 1

    def _require_root(self) -> _Node[T]:
        if self._root is None:
            raise ValueError("tree is empty")
        return self._root

    def minimum(self) -> T:
        """Return the smallest value; raise ``ValueError`` if empty."""
        node = self._require_root()
        while node.left is not None:
            node = node.left
        return node.data

    def maximum(self) -> T:
        """Return the largest value; raise ``ValueError`` if empty."""
        node = self._require_root()
        while node.right is not None:
            node = node.right
        return node.data

    def __contains__(self, value: Any) -> bool:
        node = self._root
        while node is not None:
            if value < node.data:
                node = node.left
            elif value > node.data:
                node = node.right
            else:
                return True
        return False

    def __iter__(self) -> Iterator[T]:
        """Yield the values in ascending order."""
        stack: list[_Node[T]] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node.data
            node = node.right

    def __len__(self) -> int:
        return self._size