"""
tablekit — cycle-safe canonical encoding and structural comparison of nested tables.

## Public API
- census, Census — occurrence counts per table identity.
- serialize, serialize_deep, default_serializer, CycleContext — canonical strings.
- is_subset, deep_equal, shallow_equal — structural comparison.
- canonical_key, hash_table — equality keys and SHA-256 digests.
- BadInput, TableError — error types.
- TableSettings, configure_logging — configuration and logging.

## Import DAG discipline
- tablekit.core depends only on the stdlib.
- tablekit.io depends on tablekit.core, pydantic, and python-json-logger.
"""

from __future__ import annotations

from .core.census import Census, census
from .core.compare import deep_equal, is_subset, shallow_equal
from .core.errors import BadInput, TableError
from .core.hashing import canonical_key, hash_table
from .core.serialize import CycleContext, default_serializer, serialize, serialize_deep
from .io.config import TableSettings
from .io.logging_config import configure_logging

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Census",
    "census",
    "CycleContext",
    "default_serializer",
    "serialize",
    "serialize_deep",
    "is_subset",
    "deep_equal",
    "shallow_equal",
    "canonical_key",
    "hash_table",
    "BadInput",
    "TableError",
    "TableSettings",
    "configure_logging",
]
