"""
Table primitives shared by the census, the serializers, and the comparator.

A "table" is any Mapping, list, or tuple. Sequences are viewed as tables keyed by
1-based position, so ``["a", "b"]`` and ``{1: "a", 2: "b"}`` have the same keys, the same
canonical string, and compare deep-equal.

Responsibilities
- Decide what counts as a nested table (is_container) and the comparator's notion of a
  primitive type (kind_of).
- Shallow iteration (keys_of, iter_items, value_at) without ever mutating the table.
- A deterministic total order over mixed key types (sorted_keys) so canonical output
  never depends on dict insertion order.

Notes:
    - Zero-IO; stdlib only.
    - ``bool`` is never treated as an integer key or a number, even though Python would
      let ``True`` stand in for ``1``. An integral float such as ``2.0`` is the same
      position as ``2``, matching dict lookup and the canonical number text.

Examples:
    >>> from tablekit.core.tables import is_array, sorted_keys
    >>> is_array(["x", "y"])
    True
    >>> is_array({1: "x", 3: "y"})
    False
    >>> sorted_keys([3, "b", "a", 1])
    ['a', 'b', 1, 3]
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from numbers import Real
from typing import Any

from .constants import DEFAULT_KEY_ORDER, KEY_ORDERS
from .errors import BadInput
from .typing import Container, Key

__all__ = [
    "is_container",
    "require_container",
    "kind_of",
    "keys_of",
    "value_at",
    "has_key",
    "iter_items",
    "is_array",
    "check_key_order",
    "sorted_keys",
    "tied_runs",
]

SEQUENCE_TYPES: tuple[type, ...] = (list, tuple)


def is_container(value: Any) -> bool:
    """Return True if *value* is a table (a Mapping, list, or tuple)."""
    return isinstance(value, Mapping) or isinstance(value, SEQUENCE_TYPES)


def require_container(value: Any, name: str = "source") -> None:
    """
    Raise BadInput unless *value* is a table.

    Args:
        value (Any): Candidate table.
        name (str): Argument name used in the error message.

    Raises:
        BadInput: If value is not a Mapping, list, or tuple.
    """
    if not is_container(value):
        raise BadInput(f"{name} must be a table, got {type(value).__name__}")


def kind_of(value: Any) -> str:
    """
    Return the primitive kind used for structural comparison.

    Returns:
        str: One of "nil", "boolean", "number", "string", "table", or the type name of
        any other value (e.g. "function").
    """
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, Real):
        return "number"
    if isinstance(value, str):
        return "string"
    if is_container(value):
        return "table"
    return type(value).__name__


def _is_int_key(key: Any) -> bool:
    # 2.0 addresses the same slot as 2, as it does in a dict.
    if isinstance(key, float):
        return key.is_integer()
    return isinstance(key, int) and not isinstance(key, bool)


def keys_of(container: Container) -> list[Key]:
    """Return the keys of *container* in native (unspecified) order."""
    require_container(container)
    if isinstance(container, Mapping):
        return list(container.keys())
    return list(range(1, len(container) + 1))


def value_at(container: Container, key: Key) -> Any:
    """
    Return the value stored at *key*, or None when the table has no such key.

    Sequence positions are 1-based; a non-integer or out-of-range position is absent.
    """
    if isinstance(container, Mapping):
        return container.get(key)
    if _is_int_key(key) and 1 <= key <= len(container):
        return container[int(key) - 1]
    return None


def has_key(container: Container, key: Key) -> bool:
    """Return True if *container* stores a value at *key* (None values included)."""
    if isinstance(container, Mapping):
        return key in container
    return _is_int_key(key) and 1 <= key <= len(container)


def iter_items(container: Container) -> Iterable[tuple[Key, Any]]:
    """Iterate ``(key, value)`` pairs of *container* without copying nested tables."""
    if isinstance(container, Mapping):
        return container.items()
    return enumerate(container, start=1)


def is_array(container: Container) -> bool:
    """
    Return True if the keys of *container* are exactly the integers ``1..len(container)``.

    Lists and tuples are always array-shaped. An empty mapping is array-shaped. Integral
    float keys count as their integer positions.
    """
    if isinstance(container, SEQUENCE_TYPES):
        return True
    n = len(container)
    return all(_is_int_key(k) and 1 <= k <= n for k in container.keys())


def check_key_order(order: str) -> None:
    """Raise BadInput unless *order* is one of KEY_ORDERS."""
    if order not in KEY_ORDERS:
        raise BadInput(f"key_order must be one of {KEY_ORDERS}, got {order!r}")


def _rank_table(order: str) -> dict[str, int]:
    check_key_order(order)
    if order == "strings_first":
        return {"string": 0, "number": 1, "boolean": 2}
    return {"number": 0, "string": 1, "boolean": 2}


def _sort_key(key: Any, ranks: dict[str, int]) -> tuple[Any, ...]:
    kind = kind_of(key)
    rank = ranks.get(kind)
    if rank is None:
        return (3, type(key).__name__, repr(key))
    if kind == "number":
        # NaN is unordered; park it after every other number.
        if isinstance(key, float) and math.isnan(key):
            return (rank, 1, 0)
        return (rank, 0, key)
    return (rank, key)


def tied_runs(keys: list[Key], order: str = DEFAULT_KEY_ORDER) -> list[tuple[int, int]]:
    """
    Find runs of adjacent keys that the canonical order cannot tell apart.

    Args:
        keys (list[Key]): Keys already returned by sorted_keys with the same *order*.
        order (str): Key ordering the keys were sorted with.

    Returns:
        list[tuple[int, int]]: ``(start, stop)`` slices of length two or more. Only
        distinct NaN keys, or distinct keys of an unranked type with the same repr,
        produce runs; such keys keep their native order within the run.
    """
    ranks = _rank_table(order)
    runs: list[tuple[int, int]] = []
    start = 0
    for i in range(1, len(keys) + 1):
        if i < len(keys) and _sort_key(keys[i], ranks) == _sort_key(keys[start], ranks):
            continue
        if i - start > 1:
            runs.append((start, i))
        start = i
    return runs


def sorted_keys(keys: Iterable[Key], order: str = DEFAULT_KEY_ORDER) -> list[Key]:
    """
    Sort *keys* with a deterministic total order over mixed key types.

    Args:
        keys (Iterable[Key]): Keys of one table.
        order (str): "strings_first" (strings < numbers < booleans < others) or
            "numbers_first" (numbers < strings < booleans < others).

    Returns:
        list[Key]: Keys in canonical order. Keys of other types are ordered by
        ``(type name, repr)``.

    Raises:
        BadInput: If *order* is not a known key ordering.
    """
    ranks = _rank_table(order)
    return sorted(keys, key=lambda k: _sort_key(k, ranks))
