"""Transform functions and the sequence transformer."""

from __future__ import annotations

from typing import Callable, Iterable

from core.domain.value_objects import NumericSequence

TransformFn = Callable[[int], int]


class TransformationError(ValueError):
    """Raised when a transform function cannot be built."""


def identity(number: int) -> int:
    return number


def double(number: int) -> int:
    return number * 2


def quadruple(number: int) -> int:
    return number * 4


def create_transformer(factor: int) -> TransformFn:
    """Return a transform that multiplies its argument by ``factor``.

    Every call yields an independent closure; the captured factor is never
    shared between transformers.
    """
    if isinstance(factor, bool) or not isinstance(factor, int):
        raise TransformationError("Transformer factor must be an integer")

    def transform(number: int) -> int:
        return number * factor

    transform.__name__ = f"multiply_by_{factor}"
    return transform


def _as_sequence(numbers: NumericSequence | Iterable[int]) -> NumericSequence:
    if isinstance(numbers, NumericSequence):
        return numbers
    return NumericSequence.from_iterable(numbers)


def transform_numbers(
    numbers: NumericSequence | Iterable[int],
    transform: TransformFn,
) -> NumericSequence:
    """Apply ``transform`` to every element, preserving order."""
    source = _as_sequence(numbers)
    return NumericSequence(tuple(transform(value) for value in source))


def double_numbers(numbers: NumericSequence | Iterable[int]) -> NumericSequence:
    """Return a new sequence with every element doubled."""
    return transform_numbers(numbers, double)
