"""Application service running the function-value scenarios.

Each scenario returns the lines it would print so callers decide where the
output goes.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Tuple

from core.domain.arithmetic import factorial, sum_up, sum_up_variadic
from core.domain.transformations import (
    create_transformer,
    double_numbers,
    quadruple,
)
from core.domain.value_objects import NumericSequence
from ports.transformation_port import TransformationPort

logger = logging.getLogger(__name__)

DEFAULT_NUMBERS = NumericSequence((1, 2, 3))


class ScenarioService:
    """Runs named scenarios against a transformation port."""

    def __init__(
        self,
        port: TransformationPort,
        numbers: NumericSequence = DEFAULT_NUMBERS,
    ) -> None:
        self._port = port
        self._numbers = numbers
        self._scenarios: Dict[str, Callable[[], List[str]]] = {
            "first_class": self.first_class,
            "anonymous": self.anonymous,
            "recursion": self.recursion,
            "variadic": self.variadic,
        }

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(self._scenarios)

    def first_class(self) -> List[str]:
        """Named functions passed around as values."""
        doubled = double_numbers(self._numbers)
        quadrupled = self._port.transform(self._numbers, quadruple).transformed
        return [
            f"{self._numbers} -> {doubled}",
            f"{self._numbers} -> {quadrupled}",
        ]

    def anonymous(self) -> List[str]:
        """Inline lambdas and closures from the transformer factory."""
        double = create_transformer(2)
        triple = create_transformer(3)
        results = [
            self._port.transform(self._numbers, lambda number: number * 2),
            self._port.transform(self._numbers, double),
            self._port.transform(self._numbers, triple),
        ]
        return [str(result.transformed) for result in results]

    def recursion(self) -> List[str]:
        return [f"{n}: {factorial(n)}" for n in (5, 9)]

    def variadic(self) -> List[str]:
        return [
            str(sum_up([1, 2, 2, 2])),
            str(sum_up_variadic(1, 2, 3, 4, 5, 6)),
            str(sum_up_variadic(2, 55, 66, 7, 8, 1, 1, 1, 25)),
        ]

    def run(self, name: str) -> List[str]:
        """Run a single scenario by name."""
        if name not in self._scenarios:
            raise KeyError(f"Unknown scenario: {name}")
        lines = self._scenarios[name]()
        logger.info("Scenario %s produced %d lines", name, len(lines), extra={"scenario": name})
        return lines

    def run_all(self) -> List[Tuple[str, List[str]]]:
        return [(name, self.run(name)) for name in self._scenarios]
