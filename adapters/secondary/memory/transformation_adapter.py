"""In-memory transformation adapters."""

from __future__ import annotations

import logging

from core.domain.transformations import TransformFn, transform_numbers
from core.domain.value_objects import NumericSequence
from ports.transformation_port import TransformationPort, TransformationResult

logger = logging.getLogger(__name__)


class LoopTransformationAdapter(TransformationPort):
    """Adapter applying the transform with plain Python integers."""

    def transform(
        self,
        data: NumericSequence,
        fn: TransformFn,
    ) -> TransformationResult:
        transformed = transform_numbers(data, fn)
        logger.debug(
            "Applied %s to %d values",
            getattr(fn, "__name__", repr(fn)),
            len(data),
        )
        return TransformationResult(source=data, transformed=transformed)


class SeriesTransformationAdapter(TransformationPort):
    """Adapter mapping the transform over a pandas Series.

    Inputs travel as int64; values outside that range raise OverflowError
    when the series is built.
    """

    def transform(
        self,
        data: NumericSequence,
        fn: TransformFn,
    ) -> TransformationResult:
        if len(data) == 0:
            return TransformationResult(source=data, transformed=NumericSequence.empty())
        series = data.to_series()
        mapped = series.map(lambda value: fn(int(value)))
        transformed = NumericSequence.from_iterable(int(value) for value in mapped.tolist())
        logger.debug(
            "Mapped %s over series of %d values",
            getattr(fn, "__name__", repr(fn)),
            len(series),
        )
        return TransformationResult(source=data, transformed=transformed)
