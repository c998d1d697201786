"""Searching a sequence and finding its extremes."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")

__all__ = ["linear_search", "binary_search", "find_min_max"]


def linear_search(values: Iterable[Any], target: Any) -> int | None:
    """Return the index of the first item equal to ``target``, or ``None``."""
    return next(
        (index for index, value in enumerate(values) if value == target),
        None,
    )


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in the ascending ``values``, or ``None``."""
    left, right = 0, len(values) - 1
    while left <= right:
        mid = left + (right - left) // 2
        if values[mid] == target:
            return mid
        if values[mid] < target:
            left = mid + 1
        else:
            right = mid - 1
    return None


def find_min_max(values: Iterable[T]) -> tuple[T, T]:
    """Return ``(minimum, maximum)`` of ``values`` in a single pass.

    Raises ``ValueError`` when ``values`` is empty.
    """
    iterator = iter(values)
    try:
        first = next(iterator)
    except StopIteration:
        raise ValueError("find_min_max() arg is an empty sequence") from None
    smallest = largest = first
    for value in iterator:
        if value < smallest:
            smallest = value
        if value > largest:
            largest = value
    return smallest, largest