"""Summation and factorial helpers."""

from __future__ import annotations

from typing import Iterable


class FactorialError(ValueError):
    """Raised when factorial is requested for an unsupported argument."""


def sum_up(numbers: Iterable[int]) -> int:
    """Sum every element in a single pass, starting from zero."""
    total = 0
    for value in numbers:
        total += value
    return total


def sum_up_variadic(*numbers: int) -> int:
    """Variadic form of :func:`sum_up`."""
    return sum_up(numbers)


def factorial(n: int) -> int:
    """Compute ``n!`` recursively.

    Negative arguments raise :class:`FactorialError`. Arguments deeper than the
    interpreter recursion limit raise ``RecursionError``.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise FactorialError("Factorial argument must be an integer")
    if n < 0:
        raise FactorialError(f"Factorial is undefined for negative numbers: {n}")
    if n == 0:
        return 1
    return n * factorial(n - 1)
