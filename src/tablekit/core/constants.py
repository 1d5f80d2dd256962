"""
Canonical string tokens and ordering defaults.

Defines the literal tokens emitted by tablekit.core.serialize and the key ordering
defaults consumed by tablekit.core.tables and tablekit.io.config. This module is zero-IO
and uses only the Python standard library.

Notes:
    - Changing any token changes every canonical string and every hash derived from it.
    - tablekit.io.config sources its key_order default from DEFAULT_KEY_ORDER.
"""

from __future__ import annotations

__all__ = [
    "NIL",
    "TRUE",
    "FALSE",
    "TABLE_OPEN",
    "TABLE_CLOSE",
    "ITEM_SEPARATOR",
    "KEY_SEPARATOR",
    "BACKREF",
    "REF_OPEN",
    "REF_CLOSE",
    "KEY_ORDERS",
    "DEFAULT_KEY_ORDER",
]

NIL: str = "nil"
TRUE: str = "true"
FALSE: str = "false"

TABLE_OPEN: str = "{"
TABLE_CLOSE: str = "}"
ITEM_SEPARATOR: str = ","
KEY_SEPARATOR: str = ":"

# "&N" replaces a table already emitted in the same call; "<N>" tags its first emission.
BACKREF: str = "&"
REF_OPEN: str = "<"
REF_CLOSE: str = ">"

KEY_ORDERS: tuple[str, ...] = ("strings_first", "numbers_first")
DEFAULT_KEY_ORDER: str = "strings_first"
