"""
Canonical keys and SHA-256 hashing helpers built on the deep serializer.

Provides a single canonical policy for turning any value into a string usable as an
equality or cache key, and a stable digest over that string. This module is zero-IO and
uses only the Python standard library.

Notes:
    - Canonical key:
        - tables go through serialize_deep (sorted keys, cycle-safe)
        - everything else goes through default_serializer
    - Hashing is performed over the UTF-8 encoded canonical string.
    - Opaque values (functions, arbitrary objects) embed their id() in the canonical
      string, so keys and hashes that contain them are only stable within one process.
"""

from __future__ import annotations

import hashlib
from typing import Any

from .constants import DEFAULT_KEY_ORDER
from .serialize import default_serializer, serialize_deep
from .tables import check_key_order, is_container, require_container
from .typing import Container

__all__ = [
    "canonical_key",
    "hash_table",
]


def canonical_key(value: Any, *, key_order: str = DEFAULT_KEY_ORDER) -> str:
    """
    Return the canonical string of *value*, suitable as an equality or cache key.

    Args:
        value (Any): Table or leaf value.
        key_order (str): Key ordering used for tables.

    Returns:
        str: serialize_deep(value) for tables, default_serializer(value) otherwise.

    Examples:
        >>> from tablekit.core.hashing import canonical_key
        >>> canonical_key({"b": [1, 2], "a": None})
        '{"a":nil,"b":{1,2}}'
        >>> canonical_key("x")
        '"x"'
    """
    if is_container(value):
        return serialize_deep(value, key_order=key_order)
    check_key_order(key_order)
    return default_serializer(value)


def _sha256_hexdigest(s: str) -> str:
    """Compute SHA-256 hex digest of a UTF-8 string."""
    h = hashlib.sha256()
    h.update(s.encode("utf-8"))
    return h.hexdigest()


def hash_table(root: Container, *, key_order: str = DEFAULT_KEY_ORDER) -> str:
    """
    Compute a stable hash for a table by hashing its deep canonical string.

    Args:
        root (Container): Table to hash.
        key_order (str): Key ordering used for every nested table.

    Returns:
        str: SHA-256 hex digest.

    Raises:
        BadInput: If *root* is not a table.

    Notes:
        Re-ordering keys in the table does not change the result.

    Examples:
        >>> from tablekit.core.hashing import hash_table
        >>> hash_table({"a": 1, "b": 2}) == hash_table({"b": 2, "a": 1})
        True
    """
    require_container(root)
    return _sha256_hexdigest(serialize_deep(root, key_order=key_order))
