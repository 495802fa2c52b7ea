"""Domain value objects for integer sequences."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple

import numpy as np
import pandas as pd


class NumericSequenceError(ValueError):
    """Raised when constructing a numeric sequence fails."""


def _coerce_element(value: object) -> int:
    if isinstance(value, (bool, np.bool_)):
        raise NumericSequenceError("sequence elements must be integers, not booleans")
    if isinstance(value, np.integer):
        return int(value)
    if not isinstance(value, int):
        raise NumericSequenceError(
            f"sequence elements must be integers, got {type(value).__name__}"
        )
    return value


@dataclass(frozen=True, slots=True)
class NumericSequence:
    """Immutable, ordered sequence of integers."""

    values: Tuple[int, ...]

    def __post_init__(self) -> None:
        if not isinstance(self.values, tuple):
            raise NumericSequenceError("values must be a tuple")
        object.__setattr__(
            self, 'values', tuple(_coerce_element(value) for value in self.values)
        )

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def __getitem__(self, index: int) -> int:
        return self.values[index]

    def __str__(self) -> str:
        return str(list(self.values))

    @classmethod
    def empty(cls) -> "NumericSequence":
        return cls(tuple())

    @classmethod
    def from_iterable(cls, values: Iterable[int]) -> "NumericSequence":
        """Build a sequence from any iterable of integers."""
        if isinstance(values, (str, bytes)):
            raise NumericSequenceError("values must be an iterable of integers")
        return cls(tuple(values))

    @classmethod
    def from_array(cls, array: np.ndarray) -> "NumericSequence":
        """Build a sequence from a one-dimensional integer array."""
        if not isinstance(array, np.ndarray):
            raise NumericSequenceError("array must be a numpy.ndarray")
        if array.ndim != 1:
            raise NumericSequenceError("array must be one-dimensional")
        if array.size and not np.issubdtype(array.dtype, np.integer):
            raise NumericSequenceError(f"array dtype must be integer, got {array.dtype}")
        return cls(tuple(int(value) for value in array.tolist()))

    def to_array(self) -> np.ndarray:
        """Return the sequence as an int64 numpy array."""
        return np.array(self.values, dtype=np.int64)

    def to_series(self, name: str | None = None) -> pd.Series:
        """Return the sequence as a pandas Series with a positional index."""
        return pd.Series(self.to_array(), name=name)
