"""Small integer functions."""

from __future__ import annotations

__all__ = ["factorial"]


def factorial(n: int) -> int:
    """Return ``n!``; any ``n`` of one or less gives 1."""
    result = 1
    for k in range(2, n + 1):
        result *= k
    return result