"""Tests for `tablekit.core.census` occurrence counting."""

import pytest

from tablekit.core.census import Census, census
from tablekit.core.errors import BadInput


def test_census_counts_single_edges() -> None:
    pie = ["stilton", "beef"]
    plate = {"veg": "potato", "pie": pie}

    c = census(plate)

    assert c[plate] == 1
    assert c[pie] == 1
    assert len(c) == 2
    assert c.ref_worthy() == {}


def test_census_root_is_always_present() -> None:
    root: dict = {}
    c = census(root)
    assert root in c
    assert c[root] == 1
    assert c.root is root


def test_census_self_cycle_terminates() -> None:
    kyle = {"name": "Kyle"}
    kyle["child"] = kyle

    c = census(kyle)

    assert c[kyle] == 2
    assert len(c) == 1
    assert c.ref_worthy() == {id(kyle): 2}


def test_census_mutual_cycle() -> None:
    a: dict = {}
    b: dict = {"a": a}
    a["b"] = b

    c = census(a)

    assert c[a] == 2
    assert c[b] == 1


def test_census_shared_acyclic_reference() -> None:
    shared = [1, 2]
    root = {"x": shared, "y": shared, "z": [shared]}

    c = census(root)

    assert c[root] == 1
    assert c[shared] == 3
    assert c[root["z"]] == 1


def test_census_tracks_identity_not_contents() -> None:
    left = {"k": 1}
    right = {"k": 1}
    c = census([left, right])
    assert c[left] == 1
    assert c[right] == 1
    assert len(c) == 3


def test_census_lookup_of_unreached_table() -> None:
    c = census({"a": 1})
    stranger: dict = {}
    assert stranger not in c
    assert c.count(stranger) == 0
    with pytest.raises(KeyError):
        c[stranger]


def test_census_iterates_tables() -> None:
    inner = (1, 2)
    root = [inner, {"t": inner}]
    c = census(root)
    tables = list(c)
    assert tables[0] is root
    assert any(t is inner for t in tables)
    assert isinstance(c, Census)


def test_census_handles_deep_nesting_without_recursion() -> None:
    root: list = []
    node = root
    for _ in range(5000):
        child: list = []
        node.append(child)
        node = child

    c = census(root)

    assert len(c) == 5001


@pytest.mark.parametrize("bad", [None, 1, "table", {1, 2}])
def test_census_rejects_non_tables(bad) -> None:
    with pytest.raises(BadInput):
        census(bad)
