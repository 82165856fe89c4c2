from __future__ import annotations

import logging

import structlog

from universe.settings import get_settings


def setup_logger(level: str | None = None, *, json_output: bool | None = None):
    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    numeric_level = logging.getLevelName(level_name)
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO
    if json_output is None:
        json_output = settings.log_json

    logging.basicConfig(format="%(message)s", level=numeric_level)

    renderer = (
        structlog.processors.JSONRenderer()
        if json_output
        else structlog.dev.ConsoleRenderer(colors=False)
    )
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        logger_factory=structlog.stdlib.LoggerFactory(),
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
    )

    return structlog.get_logger()
