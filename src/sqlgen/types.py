from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Mapping, Sequence, Union


class Dialect(str, Enum):
    POSTGRES = "postgres"
    MYSQL = "mysql"
    MSSQL = "mssql"

    def __str__(self) -> str:
        return self.value


class StatementKind(str, Enum):
    SELECT = "SELECT"
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


@dataclass(frozen=True)
class ColumnEquals:
    """Predicate comparing each column of a mapping against a bound value."""
    columns: Dict[str, Any]
    operator: str = "="


@dataclass(frozen=True)
class Raw:
    """Predicate text inlined verbatim; contributes no values."""
    text: str


Predicate = Union[ColumnEquals, Raw]
PredicateLike = Union[Predicate, Mapping[str, Any], str]
FieldsLike = Union[str, Sequence[str]]


@dataclass(frozen=True)
class RenderResult:
    sql: str
    params: List[Any]
    metadata: Dict[str, Any] = field(default_factory=dict)  # e.g. {"dialect": "...", "paramstyle": "numeric"}
