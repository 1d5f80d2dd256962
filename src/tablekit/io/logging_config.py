"""
Logging configuration for tablekit.

The engine logs at DEBUG through ``logging.getLogger(__name__)`` under the "tablekit"
namespace and installs no handlers on import. configure_logging() attaches one stream
handler to the "tablekit" logger, never to the root logger.

Formats
- "text": ``%(asctime)s - %(name)s - %(levelname)s - %(message)s``
- "json": python-json-logger records with ``timestamp``, ``logger``, ``level`` and
  ``message`` fields.

Usage:
    from tablekit.io import TableSettings, configure_logging

    configure_logging(TableSettings(log_level="DEBUG", log_format="json"))
"""

from __future__ import annotations

import logging
import sys
from typing import IO

from pythonjsonlogger.json import JsonFormatter

from .config import TableSettings

__all__ = [
    "LOGGER_NAME",
    "configure_logging",
]

LOGGER_NAME = "tablekit"

# Marks handlers installed here so repeat calls replace them instead of stacking.
_HANDLER_FLAG = "_tablekit_handler"


def _make_formatter(log_format: str) -> logging.Formatter:
    if log_format == "json":
        return JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    return logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def configure_logging(
    settings: TableSettings | None = None, stream: IO[str] | None = None
) -> logging.Logger:
    """
    Configure the "tablekit" logger from settings.

    Args:
        settings: Settings to apply; defaults to TableSettings.load().
        stream: Destination stream; defaults to sys.stderr.

    Returns:
        logging.Logger: The configured "tablekit" logger.
    """
    settings = settings or TableSettings.load()
    level = logging.getLevelName(settings.log_level)

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    for handler in logger.handlers[:]:
        if getattr(handler, _HANDLER_FLAG, False):
            logger.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setLevel(level)
    handler.setFormatter(_make_formatter(settings.log_format))
    setattr(handler, _HANDLER_FLAG, True)
    logger.addHandler(handler)
    return logger
