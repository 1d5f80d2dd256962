"""
Custom exceptions for the tablekit.io module.

Purpose
- Provide configuration-layer error types, distinct from tablekit.core errors.

Source of truth and boundaries
- tablekit.core.errors.BadInput is raised by the engine for bad arguments.
- tablekit.io raises TableConfigError when an explicitly requested config file cannot be
  read or parsed. Loose values inside a readable file are ignored, not raised.
"""

from __future__ import annotations

from ..core.errors import TableError

__all__ = [
    "TableConfigError",
]


class TableConfigError(TableError):
    """
    Raised when an explicit configuration file is missing or is not valid TOML.

    Examples:
        - TableSettings.from_toml("missing.toml")
        - A tablekit.toml containing a syntax error
    """
