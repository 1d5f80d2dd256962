"""
Occurrence census of the tables reachable from a root.

Walks a table graph once and counts, per distinct table, how many parent edges reference
it. A table reached again is counted but never re-entered, so the walk terminates on
self-referential and mutually referential input.

Notes:
    - Identity is ``id()``: two tables with equal contents are distinct entries.
    - The census holds a reference to every table it counted, so ids stay valid for the
      lifetime of the Census object.
    - The walk uses an explicit stack; deep graphs do not consume Python call frames.
    - Counts do not depend on traversal order: the root scores 1 plus its incoming
      edges, every other table scores its incoming edges.

Examples:
    >>> from tablekit.core.census import census
    >>> plate = {"veg": "potato", "pie": ["stilton", "beef"]}
    >>> c = census(plate)
    >>> c[plate], c[plate["pie"]]
    (1, 1)
    >>> kyle = {"name": "Kyle"}
    >>> kyle["child"] = kyle
    >>> census(kyle)[kyle]
    2
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from typing import Any

from .tables import is_container, iter_items, require_container
from .typing import Container

__all__ = [
    "Census",
    "census",
]

logger = logging.getLogger(__name__)


class Census(Mapping):
    """
    Read-only mapping from table (by identity) to occurrence count.

    Attributes:
        root (Container): The table the census was taken from.

    Notes:
        Lookups take the table object itself; ``census[t]`` raises KeyError for a table
        that was not reached, while ``census.count(t)`` returns 0.
    """

    def __init__(self, root: Container, counts: dict[int, int], nodes: dict[int, Any]):
        self.root = root
        self._counts = counts
        self._nodes = nodes

    def __getitem__(self, container: Any) -> int:
        try:
            return self._counts[id(container)]
        except KeyError:
            raise KeyError(container) from None

    def __contains__(self, container: object) -> bool:
        return id(container) in self._counts

    def __iter__(self) -> Iterator[Any]:
        return iter(self._nodes.values())

    def __len__(self) -> int:
        return len(self._counts)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Census):
            return NotImplemented
        return self._counts == other._counts

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Census(tables={len(self)}, ref_worthy={len(self.ref_worthy())})"

    def count(self, container: Any) -> int:
        """Return the occurrence count of *container*, or 0 if it was not reached."""
        return self._counts.get(id(container), 0)

    def ref_worthy(self) -> dict[int, int]:
        """Return ``{id: count}`` for tables reached through two or more edges."""
        return {ident: n for ident, n in self._counts.items() if n > 1}


def census(root: Container) -> Census:
    """
    Count the tables reachable from *root*.

    Args:
        root (Container): Table to start from.

    Returns:
        Census: Every reachable table mapped to the number of edges found pointing at
        it. The root always starts at 1.

    Raises:
        BadInput: If *root* is not a table.
    """
    require_container(root)
    counts: dict[int, int] = {id(root): 1}
    nodes: dict[int, Any] = {id(root): root}
    stack: list[Any] = [root]
    while stack:
        current = stack.pop()
        for _key, value in iter_items(current):
            if not is_container(value):
                continue
            ident = id(value)
            if ident in counts:
                counts[ident] += 1
            else:
                counts[ident] = 1
                nodes[ident] = value
                stack.append(value)
    result = Census(root, counts, nodes)
    logger.debug("census: %d tables, %d ref-worthy", len(counts), len(result.ref_worthy()))
    return result
