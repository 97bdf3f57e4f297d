from __future__ import annotations

import logging
from typing import Optional

import structlog


def configure_logging(level: str = "INFO", json_output: bool = False) -> None:
    """
    Set the log level for the package and choose how structured events render.

    Module loggers are plain `logging` loggers, so the root level governs
    them. Structured events from `get_logger` go through structlog and come out
    as readable console lines, or as one JSON object per line for log
    collectors. Khmer subjects and prompts stay unescaped in JSON output.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(level=numeric_level)
    logging.getLogger().setLevel(numeric_level)

    renderer = (
        structlog.processors.JSONRenderer(ensure_ascii=False)
        if json_output
        else structlog.dev.ConsoleRenderer()
    )
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(numeric_level),
        processors=[
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.stdlib.add_log_level,
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            renderer,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def get_logger(name: Optional[str] = None):
    """Structured logger for import events; honours `configure_logging`."""
    return structlog.get_logger(name)
