"""
Structural comparison of tables: subset, deep equality, and shallow equality.

Notes:
    - Values compare by kind first (see tablekit.core.tables.kind_of), so ``1`` never
      equals ``True`` and a list can stand in for a mapping keyed ``1..n``.
    - Nested tables that are the same object compare equal without being entered.
    - is_subset and deep_equal keep no visited set. Two distinct graphs that are
      mutually cyclic recurse until Python raises RecursionError; callers comparing
      untrusted cyclic data must bound the comparison themselves.

Examples:
    >>> from tablekit.core.compare import deep_equal, is_subset, shallow_equal
    >>> car = {"speed": 10, "wheels": 4, "lights": {"indicators": True, "head": False}}
    >>> is_subset({}, car), is_subset(car, {})
    (True, False)
    >>> is_subset({"speed": 10, "lights": {"indicators": True}}, car)
    True
    >>> deep_equal(car, {**car, "lights": dict(car["lights"])})
    True
    >>> shallow_equal(car, {**car, "lights": dict(car["lights"])})
    False
"""

from __future__ import annotations

from typing import Any

from .tables import has_key, is_container, iter_items, kind_of, value_at

__all__ = [
    "primitive_equal",
    "is_subset",
    "deep_equal",
    "shallow_equal",
]


def primitive_equal(left: Any, right: Any) -> bool:
    """
    Return True if two values are equal without looking inside tables.

    Tables are equal only when they are the same object; other values must share a kind
    and compare ``==``.
    """
    if left is right:
        return True
    if is_container(left) or is_container(right):
        return False
    return kind_of(left) == kind_of(right) and left == right


def is_subset(a: Any, b: Any) -> bool:
    """
    Return True if every key/value pair of *a* is matched in *b*, recursively.

    Args:
        a (Any): Candidate subset.
        b (Any): Candidate superset.

    Returns:
        bool: False if either side is not a table. Otherwise, every key of *a* must be
        present in *b* (a None value does not stand in for a missing key), and the
        value in *b* must have the same kind and be equal, or both values must be tables
        with ``is_subset`` holding between them.

    Notes:
        Not cycle-safe: see the module notes.
    """
    if not is_container(a) or not is_container(b):
        return False
    for key, a_value in iter_items(a):
        if not has_key(b, key):
            return False
        b_value = value_at(b, key)
        if kind_of(a_value) != kind_of(b_value):
            return False
        if primitive_equal(a_value, b_value):
            continue
        if not is_container(a_value) or not is_subset(a_value, b_value):
            return False
    return True


def deep_equal(a: Any, b: Any) -> bool:
    """Return True if *a* and *b* are each a structural subset of the other."""
    return is_subset(a, b) and is_subset(b, a)


def shallow_equal(left: Any, right: Any) -> bool:
    """
    Return True if *left* and *right* are equal one level deep.

    Values equal by primitive_equal match. Otherwise both must be tables with the same
    number of keys, and each value of *left* must be primitive_equal to the value at the
    same key of *right*; nested tables must be the same object. A key missing from
    *right* never matches, even against a None value.
    """
    if primitive_equal(left, right):
        return True
    if not is_container(left) or not is_container(right):
        return False
    if len(left) != len(right):
        return False
    return all(
        has_key(right, key) and primitive_equal(value, value_at(right, key))
        for key, value in iter_items(left)
    )
