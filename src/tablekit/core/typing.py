"""
Lightweight typing aliases used across the core engine.

Provides minimal aliases to improve readability and static checks. This module contains
no runtime logic and is zero-IO.

Notes:
    - Container is deliberately loose: any Mapping, list, or tuple is a table.
    - ValueSerializer receives the per-call CycleContext as its second argument; it is
      typed as Any here to avoid an import cycle with tablekit.core.serialize.

Examples:
    >>> from tablekit.core.typing import ValueSerializer
    >>> def upper(value, context) -> str:
    ...     return str(value).upper()
    >>> f: ValueSerializer = upper
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Mapping
from typing import Any, Union

__all__ = [
    "Key",
    "Container",
    "ValueSerializer",
]

Key = Hashable
Container = Union[Mapping[Any, Any], list[Any], tuple[Any, ...]]

# (value, cycle_context) -> canonical text for that value.
ValueSerializer = Callable[[Any, Any], str]
