"""Transformation port definition."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from core.domain.transformations import TransformFn
from core.domain.value_objects import NumericSequence


@dataclass(frozen=True)
class TransformationResult:
    """Output of applying a transform function to a sequence."""

    source: NumericSequence
    transformed: NumericSequence

    def __post_init__(self) -> None:
        if len(self.source) != len(self.transformed):
            raise ValueError("transformed sequence length must equal source length")


@runtime_checkable
class TransformationPort(Protocol):
    """Port abstraction for element-wise sequence transformation."""

    def transform(
        self,
        data: NumericSequence,
        fn: TransformFn,
    ) -> TransformationResult:
        ...
