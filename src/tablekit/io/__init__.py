"""
tablekit.io — Configuration and logging for tablekit.

## Responsibilities
- Load TableSettings from env, TOML, and defaults (env > TOML > defaults).
- Bind the engine entry points to a configured key ordering.
- Attach a text or JSON handler to the "tablekit" logger.

## Public API
- TableSettings — Validated settings (defaults sourced from tablekit.core.constants).
- configure_logging — Handler setup for the "tablekit" logger.
- TableConfigError — Unreadable explicit config file.

## Import DAG discipline
- Depends only on stdlib, pydantic, python-json-logger, and tablekit.core.*.

## Examples
```python
from tablekit.io import TableSettings, configure_logging

settings = TableSettings.load()
configure_logging(settings)
settings.serialize_deep({"b": [1, 2], "a": None})  # '{"a":nil,"b":{1,2}}'
```
"""

from __future__ import annotations

from .config import TableSettings
from .errors import TableConfigError
from .logging_config import configure_logging

__all__ = [
    "TableSettings",
    "TableConfigError",
    "configure_logging",
]
