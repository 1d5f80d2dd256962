"""Tests for `tablekit.core.tables` primitives."""

import math

import pytest

from tablekit.core.errors import BadInput
from tablekit.core.tables import (
    has_key,
    is_array,
    is_container,
    keys_of,
    kind_of,
    sorted_keys,
    tied_runs,
    value_at,
)


@pytest.mark.parametrize("value", [{}, {"a": 1}, [], [1, 2], (), (1,)])
def test_is_container_accepts_mappings_and_sequences(value) -> None:
    assert is_container(value) is True


@pytest.mark.parametrize("value", ["abc", b"abc", 1, None, {1, 2}, print])
def test_is_container_rejects_leaves(value) -> None:
    assert is_container(value) is False


@pytest.mark.parametrize(
    "value,kind",
    [
        (None, "nil"),
        (True, "boolean"),
        (0, "number"),
        (1.5, "number"),
        ("s", "string"),
        ({}, "table"),
        ([], "table"),
        (len, "builtin_function_or_method"),
    ],
)
def test_kind_of(value, kind: str) -> None:
    assert kind_of(value) == kind


def test_sequences_are_keyed_by_one_based_position() -> None:
    seq = ["a", "b", "c"]
    assert keys_of(seq) == [1, 2, 3]
    assert value_at(seq, 1) == "a"
    assert value_at(seq, 3) == "c"
    assert value_at(seq, 0) is None
    assert value_at(seq, 4) is None
    assert value_at(seq, "1") is None
    assert value_at(seq, True) is None
    assert value_at(seq, 2.0) == "b"
    assert value_at(seq, 2.5) is None
    assert has_key(seq, 3.0) is True


def test_has_key_distinguishes_missing_from_none() -> None:
    assert has_key({"a": None}, "a") is True
    assert has_key({"a": None}, "b") is False
    assert has_key([None], 1) is True
    assert has_key([None], 2) is False


def test_keys_of_rejects_non_tables() -> None:
    with pytest.raises(BadInput):
        keys_of("not a table")


@pytest.mark.parametrize(
    "table,expected",
    [
        ([], True),
        (("x",), True),
        ({}, True),
        ({1: "a", 2: "b"}, True),
        ({2: "b", 1: "a"}, True),
        ({1: "a", 3: "c"}, False),
        ({0: "a", 1: "b"}, False),
        ({1: "a", "b": 2}, False),
        ({True: "a"}, False),
        ({1.0: "a", 2.0: "b"}, True),
        ({1.5: "a"}, False),
    ],
)
def test_is_array(table, expected: bool) -> None:
    assert is_array(table) is expected


def test_sorted_keys_strings_first_by_default() -> None:
    assert sorted_keys([3, "b", 1, "a", 2.5]) == ["a", "b", 1, 2.5, 3]


def test_sorted_keys_numbers_first() -> None:
    assert sorted_keys([3, "b", 1, "a"], order="numbers_first") == [1, 3, "a", "b"]


def test_sorted_keys_is_total_over_mixed_types() -> None:
    keys = [(2, 1), False, "z", 10, (1, 2), True, -1]
    first = sorted_keys(keys)
    assert first == ["z", -1, 10, False, True, (1, 2), (2, 1)]
    assert sorted_keys(list(reversed(keys))) == first


def test_sorted_keys_places_nan_after_numbers() -> None:
    nan = float("nan")
    out = sorted_keys([nan, 2, 1])
    assert out[:2] == [1, 2]
    assert math.isnan(out[2])


def test_sorted_keys_rejects_unknown_order() -> None:
    with pytest.raises(BadInput, match="key_order"):
        sorted_keys(["a"], order="random")


def test_tied_runs_finds_distinct_nan_keys() -> None:
    first, second = float("nan"), float("nan")
    keys = sorted_keys([first, "a", 1, second])
    assert keys[:2] == ["a", 1]
    assert tied_runs(keys) == [(2, 4)]


def test_tied_runs_empty_for_ordinary_keys() -> None:
    assert tied_runs(sorted_keys(["a", "b", 1, 2, True])) == []
    assert tied_runs([]) == []
