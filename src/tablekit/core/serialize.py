"""
Canonical, deterministic, cycle-safe string encoding of tables.

Two entry points share one traversal:
- ``serialize`` encodes the root table and hands every value (nested tables included) to
  a value serializer, which by default renders nested tables as opaque tags.
- ``serialize_deep`` pushes every nested table onto the same work stack, so the whole
  graph is encoded without native recursion.

Encoding
- A table is ``{item,item,...}`` with keys in canonical order (see
  tablekit.core.tables.sorted_keys). Array-shaped tables emit values only; other tables
  emit ``key:value``.
- Tables reached through two or more edges (per the census) are "ref-worthy". The first
  emission of a ref-worthy table is prefixed ``<N>``; every later emission in the same
  call is replaced by ``&N``. Indices start at 0 and follow emission order.

Notes:
    - Output is stable across calls for an unmodified graph and a fixed key order.
    - Output is injective with respect to graph shape provided the value and key
      serializers are themselves injective and cycle-safe.
    - The CycleContext is created per top-level call and passed explicitly to every
      serializer; nothing is cached between calls.
    - Serialization is one-way; there is no parser for this format.
    - Distinct keys the key order cannot separate (several NaN keys) are emitted sorted
      by their item text.

Examples:
    >>> from tablekit.core.serialize import serialize, serialize_deep
    >>> serialize([1, 2, 3])
    '{1,2,3}'
    >>> serialize({"a": 1, "b": True, 3: "hi"})
    '{"a":1,"b":true,3:"hi"}'
    >>> kyle = {"name": "Kyle"}
    >>> kyle["child"] = kyle
    >>> serialize_deep(kyle)
    '<0>{"child":&0,"name":"Kyle"}'
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from numbers import Real
from typing import Any

from .census import Census, census
from .constants import (
    BACKREF,
    DEFAULT_KEY_ORDER,
    FALSE,
    ITEM_SEPARATOR,
    KEY_SEPARATOR,
    NIL,
    REF_CLOSE,
    REF_OPEN,
    TABLE_CLOSE,
    TABLE_OPEN,
    TRUE,
)
from .errors import BadInput
from .tables import (
    check_key_order,
    is_array,
    is_container,
    keys_of,
    require_container,
    sorted_keys,
    tied_runs,
    value_at,
)
from .typing import Container, ValueSerializer

__all__ = [
    "CycleContext",
    "default_serializer",
    "serialize",
    "serialize_deep",
]

logger = logging.getLogger(__name__)


@dataclass
class CycleContext:
    """
    Per-call cycle bookkeeping for one serialization.

    Attributes:
        refs (dict[int, int]): Census counts of ref-worthy tables, keyed by ``id()``.
        indices (dict[int, int]): Reference index already assigned to a table.
        next_index (int): Index handed to the next ref-worthy table emitted.
        key_order (str): Key ordering in force for this call.
        occurrences (Census | None): The census the refs came from; keeps ids alive.
    """

    refs: dict[int, int]
    indices: dict[int, int] = field(default_factory=dict)
    next_index: int = 0
    key_order: str = DEFAULT_KEY_ORDER
    occurrences: Census | None = None

    @classmethod
    def for_root(cls, root: Container, key_order: str = DEFAULT_KEY_ORDER) -> CycleContext:
        """Take a census of *root* and keep only the tables counted more than once."""
        counts = census(root)
        return cls(refs=counts.ref_worthy(), key_order=key_order, occurrences=counts)

    def is_ref_worthy(self, container: Any) -> bool:
        return id(container) in self.refs

    def index_of(self, container: Any) -> int | None:
        return self.indices.get(id(container))

    def assign(self, container: Any) -> int:
        """Assign the next reference index to *container* and return it."""
        index = self.next_index
        self.indices[id(container)] = index
        self.next_index += 1
        return index


def default_serializer(value: Any, context: CycleContext | None = None) -> str:
    """
    Shallow canonical text for a single value.

    Args:
        value (Any): Value to render.
        context (CycleContext | None): Ignored; accepted so the function fits the
            ``(value, context) -> str`` serializer signature.

    Returns:
        str: ``nil`` for None, ``true``/``false`` for booleans, the numeral for numbers
        (integral floats in integer form, other floats as ``repr``), a double-quoted
        string with ``\\`` and ``"`` escaped for strings, and an opaque
        ``<typename: 0x...>`` tag for anything else (tables included).

    Notes:
        The opaque tag is only unique while the object is alive and is never cycle-safe
        on its own; use serialize_deep to encode nested tables.
    """
    if value is None:
        return NIL
    if isinstance(value, bool):
        return TRUE if value else FALSE
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        # 1.0 == 1 structurally, so both render as "1".
        return str(int(value)) if value.is_integer() else repr(value)
    if isinstance(value, Real):
        return str(value)
    if isinstance(value, str):
        return '"' + value.replace("\\", "\\\\").replace('"', '\\"') + '"'
    return f"{REF_OPEN}{type(value).__name__}: {hex(id(value))}{REF_CLOSE}"


@dataclass
class _Frame:
    """A table being encoded: its keys in canonical order and the items emitted so far."""

    container: Container
    prefix: str
    keys: list[Any]
    array_shaped: bool
    items: list[str] = field(default_factory=list)

    @property
    def done(self) -> bool:
        return len(self.items) == len(self.keys)

    def next_key(self) -> Any:
        return self.keys[len(self.items)]

    def close(self, key_order: str) -> str:
        items = self.items
        # Keys the order cannot separate (distinct NaNs) are settled by their item text.
        for start, stop in tied_runs(self.keys, key_order):
            items[start:stop] = sorted(items[start:stop])
        return self.prefix + TABLE_OPEN + ITEM_SEPARATOR.join(items) + TABLE_CLOSE


def _enter(container: Container, context: CycleContext) -> _Frame | str:
    """Open a frame for *container*, or return its backreference if already emitted."""
    prefix = ""
    if context.is_ref_worthy(container):
        index = context.index_of(container)
        if index is not None:
            return f"{BACKREF}{index}"
        prefix = f"{REF_OPEN}{context.assign(container)}{REF_CLOSE}"
    return _Frame(
        container=container,
        prefix=prefix,
        keys=sorted_keys(keys_of(container), context.key_order),
        array_shaped=is_array(container),
    )


def _emit(
    frame: _Frame, text: str, key_serializer: ValueSerializer, context: CycleContext
) -> None:
    if not frame.array_shaped:
        text = key_serializer(frame.next_key(), context) + KEY_SEPARATOR + text
    frame.items.append(text)


def _visit(
    root: Container,
    value_serializer: ValueSerializer,
    key_serializer: ValueSerializer,
    context: CycleContext,
    *,
    deep: bool,
) -> str:
    """
    Encode *root* with an explicit stack of frames.

    With ``deep`` set, nested tables are opened as new frames instead of being passed to
    *value_serializer*, so nesting depth is bounded by memory rather than the recursion
    limit. Frames are opened in pre-order, which fixes the ``<N>`` numbering.
    """
    entered = _enter(root, context)
    assert isinstance(entered, _Frame)
    stack = [entered]
    while True:
        frame = stack[-1]
        if frame.done:
            text = frame.close(context.key_order)
            stack.pop()
            if not stack:
                return text
            _emit(stack[-1], text, key_serializer, context)
            continue
        value = value_at(frame.container, frame.next_key())
        if deep and is_container(value):
            entered = _enter(value, context)
            if isinstance(entered, _Frame):
                stack.append(entered)
                continue
            text = entered
        else:
            text = value_serializer(value, context)
        _emit(frame, text, key_serializer, context)


def _check_callable(fn: Any, name: str) -> None:
    if not callable(fn):
        raise BadInput(f"{name} must be callable if defined, got {type(fn).__name__}")


def serialize(
    root: Container,
    value_serializer: ValueSerializer | None = None,
    key_serializer: ValueSerializer | None = None,
    *,
    key_order: str = DEFAULT_KEY_ORDER,
) -> str:
    """
    Encode *root* with sorted keys, tagging tables that appear more than once.

    Args:
        root (Container): Table to encode.
        value_serializer (ValueSerializer | None): ``(value, context) -> str`` for every
            value of the root. Defaults to default_serializer.
        key_serializer (ValueSerializer | None): ``(key, context) -> str`` for the keys
            of non-array tables. Defaults to default_serializer.
        key_order (str): "strings_first" or "numbers_first".

    Returns:
        str: Canonical string.

    Raises:
        BadInput: If *root* is not a table, a serializer is not callable, or *key_order*
            is unknown.
    """
    value_serializer = default_serializer if value_serializer is None else value_serializer
    key_serializer = default_serializer if key_serializer is None else key_serializer
    _check_callable(value_serializer, "value_serializer")
    _check_callable(key_serializer, "key_serializer")
    require_container(root)
    check_key_order(key_order)

    context = CycleContext.for_root(root, key_order)
    out = _visit(root, value_serializer, key_serializer, context, deep=False)
    if context.next_index:
        logger.debug("serialize: %d shared or cyclic tables tagged", context.next_index)
    return out


def serialize_deep(
    root: Container,
    serializer: ValueSerializer | None = None,
    key_serializer: ValueSerializer | None = None,
    *,
    key_order: str = DEFAULT_KEY_ORDER,
) -> str:
    """
    Like serialize, but nested tables are encoded in the same call, at any depth.

    Args:
        root (Container): Table to encode.
        serializer (ValueSerializer | None): ``(value, context) -> str`` for non-table
            values. Defaults to default_serializer.
        key_serializer (ValueSerializer | None): As in serialize.
        key_order (str): As in serialize.

    Returns:
        str: Canonical string of the whole graph; shared and cyclic tables are emitted
        once and referenced with ``&N`` afterwards.

    Examples:
        >>> serialize_deep({"a": {"b": "table"}})
        '{"a":{"b":"table"}}'
    """
    serializer = default_serializer if serializer is None else serializer
    key_serializer = default_serializer if key_serializer is None else key_serializer
    _check_callable(serializer, "serializer")
    _check_callable(key_serializer, "key_serializer")
    require_container(root)
    check_key_order(key_order)

    context = CycleContext.for_root(root, key_order)
    out = _visit(root, serializer, key_serializer, context, deep=True)
    if context.next_index:
        logger.debug("serialize: %d shared or cyclic tables tagged", context.next_index)
    return out
