from __future__ import annotations

import logging
from typing import Dict, Union

from ..errors import InvalidDialect
from ..types import Dialect
from .base import SQLDialect

logger = logging.getLogger(__name__)

_REGISTRY: Dict[Dialect, SQLDialect] = {}
_active: Dialect = Dialect.POSTGRES


def resolve(dialect: Union[Dialect, str]) -> Dialect:
    """Normalize a dialect name to the closed ``Dialect`` set."""
    if isinstance(dialect, Dialect):
        return dialect
    if isinstance(dialect, str):
        try:
            return Dialect(dialect.strip().lower())
        except ValueError:
            pass
    raise InvalidDialect(
        f"Unknown dialect {dialect!r}",
        details={"dialect": repr(dialect), "available": [d.value for d in Dialect]},
        remediation="Use one of: " + ", ".join(d.value for d in Dialect),
    )


def register(dialect: SQLDialect) -> None:
    name = getattr(dialect, "name", None)
    if not name or not isinstance(name, str):
        raise ValueError("Dialect must define a non-empty .name")
    _REGISTRY[resolve(name)] = dialect


def get(name: Union[Dialect, str]) -> SQLDialect:
    k = resolve(name)
    if k not in _REGISTRY:
        available = ", ".join(sorted(d.value for d in _REGISTRY))
        raise InvalidDialect(
            f"Dialect '{k.value}' is not registered. Available: {available}",
            details={"dialect": k.value},
        )
    return _REGISTRY[k]


def available() -> Dict[Dialect, SQLDialect]:
    return dict(_REGISTRY)


def use(dialect: Union[Dialect, str]) -> None:
    """Set the process-wide dialect picked up by queries built afterwards."""
    global _active
    resolved = resolve(dialect)
    if resolved is not _active:
        logger.info("Switching active SQL dialect from %s to %s", _active.value, resolved.value)
    _active = resolved


def current() -> Dialect:
    return _active
