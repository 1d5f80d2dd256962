"""
Core exception types raised by table primitives, the census, and the serializers.

Provides typed exceptions for core-domain failures:
- TableError as the catch-all base for tablekit.core.
- BadInput for a non-container passed where a table is required, a non-callable passed
  where a serializer is required, or an unknown key ordering.

Notes:
    - This module uses only the Python standard library and has no side effects.
    - BadInput is raised at the call that detects the problem, never deferred into a
      traversal.
    - There is no error for cycles: reference cycles are an expected input for the
      census and the serializers.

Examples:
    Catch a bad serializer argument.

    >>> from tablekit.core.errors import BadInput
    >>> from tablekit.core.serialize import serialize
    >>> try:
    ...     serialize({"a": 1}, value_serializer="not callable")
    ... except BadInput as e:
    ...     msg = str(e)
    >>> "value_serializer" in msg
    True
"""

from __future__ import annotations

__all__ = [
    "TableError",
    "BadInput",
]


class TableError(Exception):
    """Base class for tablekit.core failures."""


class BadInput(TableError, TypeError):
    """Argument of the wrong shape (not a table, not callable, or unknown key order)."""
