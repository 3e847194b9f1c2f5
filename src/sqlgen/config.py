"""
Configuration loading for sqlgen.

Loads YAML/JSON config files and returns typed config objects.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

import yaml

from .dialects import registry
from .types import Dialect


@dataclass(frozen=True)
class SqlGenConfig:
    """Loaded sqlgen configuration."""

    raw: Dict[str, Any]
    dialect: Dialect = Dialect.POSTGRES

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> SqlGenConfig:
        dialect = registry.resolve(d.get("dialect") or Dialect.POSTGRES)
        return cls(raw=d, dialect=dialect)

    def apply(self) -> None:
        """Make the configured dialect the process-wide one."""
        registry.use(self.dialect)


def load_config(path: str) -> SqlGenConfig:
    """
    Load a sqlgen configuration from a YAML or JSON file.

    The file must contain a mapping. A missing or empty 'dialect' key
    falls back to postgres; an unknown one raises InvalidDialect.
    """
    p = Path(path)
    text = p.read_text(encoding="utf-8")
    obj = yaml.safe_load(text)
    if not isinstance(obj, dict):
        raise ValueError(f"Config file must be a YAML/JSON object, got {type(obj).__name__}")
    return SqlGenConfig.from_dict(obj)
