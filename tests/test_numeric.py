import math

import pytest

from dsakit.numeric import factorial


def test_worked_example():
    assert factorial(5) == 120


@pytest.mark.parametrize("n", range(0, 25))
def test_matches_math_factorial(n):
    assert factorial(n) == math.factorial(n)


@pytest.mark.parametrize("n", range(2, 15))
def test_recurrence(n):
    assert factorial(n) == n * factorial(n - 1)


@pytest.mark.parametrize("n", [-1, -5, 0, 1])
def test_small_and_negative_give_one(n):
    assert factorial(n) == factorial(1) == math.factorial(0)


def test_large_value_does_not_overflow():
    assert factorial(30) == math.factorial(30)