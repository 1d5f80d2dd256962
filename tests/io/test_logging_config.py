from __future__ import annotations

import io
import json
import logging

import pytest

from tablekit.core.serialize import serialize_deep
from tablekit.io.config import TableSettings
from tablekit.io.logging_config import LOGGER_NAME, configure_logging


@pytest.fixture(autouse=True)
def _restore_tablekit_logger():
    logger = logging.getLogger(LOGGER_NAME)
    handlers, level = logger.handlers[:], logger.level
    yield
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_text_logging_of_engine_debug_records() -> None:
    stream = io.StringIO()
    configure_logging(TableSettings(log_level="DEBUG"), stream=stream)

    kyle = {"name": "Kyle"}
    kyle["child"] = kyle
    serialize_deep(kyle)

    out = stream.getvalue()
    assert "tablekit.core.census - DEBUG - census: 1 tables, 1 ref-worthy" in out
    assert "tablekit.core.serialize" in out


def test_json_logging_records() -> None:
    stream = io.StringIO()
    configure_logging(TableSettings(log_level="DEBUG", log_format="json"), stream=stream)

    serialize_deep({"a": [1]})

    first = json.loads(stream.getvalue().splitlines()[0])
    assert first["logger"] == "tablekit.core.census"
    assert first["level"] == "DEBUG"
    assert first["message"] == "census: 2 tables, 0 ref-worthy"
    assert "timestamp" in first


def test_configure_logging_replaces_its_own_handler() -> None:
    logger = configure_logging(TableSettings())
    configure_logging(TableSettings(log_level="ERROR"))

    installed = [h for h in logger.handlers if getattr(h, "_tablekit_handler", False)]
    assert len(installed) == 1
    assert logger.level == logging.ERROR


def test_default_level_hides_debug_records() -> None:
    stream = io.StringIO()
    configure_logging(TableSettings(), stream=stream)

    serialize_deep({"a": 1})

    assert stream.getvalue() == ""
