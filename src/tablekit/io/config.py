"""
Configuration for tablekit.

Defines TableSettings, a frozen pydantic model carrying the key ordering used for
canonical strings and the logging preferences consumed by tablekit.io.logging_config.
Defaults are sourced from tablekit.core.constants (the single source of truth).

Source of truth
- tablekit.core.constants.DEFAULT_KEY_ORDER, KEY_ORDERS

Import DAG discipline
- Depends only on stdlib, pydantic, and tablekit.core.

Notes
- Precedence for TableSettings.load(): env > TOML > defaults.
- Two processes that must agree on canonical strings or hashes must agree on key_order.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ..core.constants import DEFAULT_KEY_ORDER
from ..core.hashing import canonical_key, hash_table
from ..core.serialize import serialize, serialize_deep
from ..core.typing import Container, ValueSerializer
from .errors import TableConfigError

__all__ = [
    "TableSettings",
]

KeyOrder = Literal["strings_first", "numbers_first"]
LogFormat = Literal["text", "json"]

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

# Keys recognised in a loose mapping (TOML table or env-derived dict).
_FIELDS = ("key_order", "log_level", "log_format")


class TableSettings(BaseModel):
    """
    Runtime settings for tablekit.

    Attributes:
        key_order (Literal["strings_first","numbers_first"]): Ordering of mixed key types
            in canonical strings (default from tablekit.core.constants).
        log_level (str): Level for the "tablekit" logger (DEBUG, INFO, WARNING, ERROR,
            CRITICAL); case-insensitive on input.
        log_format (Literal["text","json"]): Plain text lines or JSON records.

    Raises:
        pydantic.ValidationError: If a field is given an unsupported value.

    Examples:
        >>> from tablekit.io import TableSettings
        >>> TableSettings(key_order="numbers_first").serialize({"a": 1, 2: "b"})
        '{2:"b","a":1}'
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    key_order: KeyOrder = DEFAULT_KEY_ORDER  # type: ignore[assignment]
    log_level: str = "WARNING"
    log_format: LogFormat = "text"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, v: Any) -> str:
        if not isinstance(v, str) or v.strip().upper() not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {LOG_LEVELS}, got {v!r}")
        return v.strip().upper()

    @field_validator("key_order", "log_format", mode="before")
    @classmethod
    def _normalize_choice(cls, v: Any) -> Any:
        return v.strip().lower() if isinstance(v, str) else v

    # Engine entry points bound to this key ordering.

    def serialize(
        self,
        root: Container,
        value_serializer: ValueSerializer | None = None,
        key_serializer: ValueSerializer | None = None,
    ) -> str:
        """tablekit.core.serialize.serialize with this key_order."""
        return serialize(root, value_serializer, key_serializer, key_order=self.key_order)

    def serialize_deep(
        self,
        root: Container,
        serializer: ValueSerializer | None = None,
        key_serializer: ValueSerializer | None = None,
    ) -> str:
        """tablekit.core.serialize.serialize_deep with this key_order."""
        return serialize_deep(root, serializer, key_serializer, key_order=self.key_order)

    def canonical_key(self, value: Any) -> str:
        return canonical_key(value, key_order=self.key_order)

    def hash_table(self, root: Container) -> str:
        return hash_table(root, key_order=self.key_order)

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _apply_mapping(cls, base: TableSettings, cfg: dict[str, Any] | None) -> TableSettings:
        """Apply a loose config mapping onto *base*, skipping unknown or invalid values."""
        if not isinstance(cfg, dict):
            return base

        s = base
        for name in _FIELDS:
            if name not in cfg:
                continue
            try:
                s = cls.model_validate({**s.model_dump(), name: cfg[name]})
            except ValidationError:
                pass
        return s

    @classmethod
    def from_env(
        cls, base: TableSettings | None = None, prefix: str = "TABLEKIT_"
    ) -> TableSettings:
        """
        Build TableSettings from environment variables. Precedence is env > base (if
        provided) > defaults.

        Recognized variables:
            - TABLEKIT_KEY_ORDER ("strings_first" | "numbers_first")
            - TABLEKIT_LOG_LEVEL (DEBUG | INFO | WARNING | ERROR | CRITICAL)
            - TABLEKIT_LOG_FORMAT ("text" | "json")
        """
        s = base or cls()
        mapping: dict[str, Any] = {}
        for name in _FIELDS:
            v = os.getenv(prefix + name.upper())
            if v:
                mapping[name] = v
        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> TableSettings:
        """
        Build TableSettings from a TOML file.

        Search order when `path` is None:
            1) ./tablekit.toml (with either a top-level [tables] table or direct keys)
            2) ./pyproject.toml under [tool.tablekit]

        Returns defaults if no file is found during the search.

        Raises:
            TableConfigError: If an explicit `path` does not exist or is not valid TOML.
        """
        s = cls()

        def _load_toml(p: Path) -> dict[str, Any]:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError) as exc:
                raise TableConfigError(f"cannot read tablekit config {p}: {exc}") from exc

        if path is not None:
            p = Path(path)
            if not p.exists():
                raise TableConfigError(f"tablekit config not found: {p}")
            cand = [p]
        else:
            cand = [Path.cwd() / "tablekit.toml", Path.cwd() / "pyproject.toml"]

        cfg: dict[str, Any] | None = None
        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                cfg = tool.get("tablekit") if isinstance(tool, dict) else None
            elif isinstance(data.get("tables"), dict):
                cfg = data["tables"]
            else:
                cfg = data
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> TableSettings:
        """
        Load TableSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults (tablekit.toml,
                pyproject.toml).

        Returns:
            TableSettings
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s
