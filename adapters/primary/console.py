"""Console adapter printing every scenario's output to stdout."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

from pydantic import ValidationError

from adapters.secondary.memory.transformation_adapter import LoopTransformationAdapter
from config.observability import setup_logging
from config.settings import Settings, get_settings
from core.application.scenarios import ScenarioService

logger = logging.getLogger(__name__)


def main(stream: TextIO | None = None) -> int:
    try:
        settings = get_settings()
        config_error = None
    except ValidationError as exc:
        settings = Settings.model_construct()
        config_error = exc
    setup_logging(settings.log_level, settings.log_format)
    if config_error is not None:
        logger.warning(
            "Invalid logging settings, using defaults: %s",
            config_error.errors(include_url=False),
        )
    out = stream or sys.stdout

    service = ScenarioService(LoopTransformationAdapter())
    for name, lines in service.run_all():
        logger.debug("Printing %d lines for %s", len(lines), name)
        for line in lines:
            print(line, file=out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
