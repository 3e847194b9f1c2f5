# src/sqlgen/query.py
"""
Fluent statement builder.

A ``Query`` records clause state as chain methods are called and assembles
``text``/``values`` on read, always in the same clause order:

    SELECT ... FROM ... JOIN ... WHERE ... GROUP BY ... HAVING ... ORDER BY ... LIMIT
    INSERT INTO ... VALUES ... RETURNING
    UPDATE ... SET ... WHERE ... RETURNING
    DELETE FROM ... WHERE ... RETURNING

Placeholders are numbered during assembly, so their order in ``text`` always
matches the order of ``values`` no matter the order the chain methods ran.

INSERT and UPDATE inline their values as quoted literals (and still report
them in ``values``); SELECT and DELETE bind through placeholders.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from . import clauses
from .dialects import registry
from .dialects.base import SQLDialect
from .errors import UnsupportedOperation
from .types import (
    ColumnEquals,
    Dialect,
    FieldsLike,
    Predicate,
    PredicateLike,
    RenderResult,
    StatementKind,
)

logger = logging.getLogger(__name__)


class Query:
    def __init__(
        self,
        kind: StatementKind,
        table: str,
        *,
        fields: Optional[List[str]] = None,
        assignments: Optional[Dict[str, Any]] = None,
        dialect: Union[Dialect, str, None] = None,
    ) -> None:
        self.kind = StatementKind(kind)
        self.table = table
        self.dialect: Dialect = registry.current() if dialect is None else registry.resolve(dialect)
        self._syntax: SQLDialect = registry.get(self.dialect)

        self._fields: List[str] = list(fields or [])
        self._assignments: Dict[str, Any] = dict(assignments or {})
        self._joins: List[str] = []
        self._where: List[Tuple[str, Predicate]] = []
        self._group_by: List[str] = []
        self._having: List[Tuple[str, Predicate]] = []
        self._order_by: List[str] = []
        self._limit: Optional[str] = None
        self._returning: List[str] = []

    # -------------------------------------------------------------------------
    # Chain methods
    # -------------------------------------------------------------------------

    def join(self, table: str, on: Mapping[str, str]) -> Query:
        self._require(StatementKind.SELECT, op="join")
        self._joins.append(clauses.render_join(table, clauses.normalize_mapping(on, clause="join")))
        return self

    def where(self, predicate: PredicateLike) -> Query:
        if self.kind is StatementKind.INSERT:
            self._unsupported("where")
        self._where.append(("AND", clauses.as_predicate(predicate)))
        return self

    def and_(self, predicate: PredicateLike) -> Query:
        return self._extend_where("AND", predicate)

    def or_(self, predicate: PredicateLike) -> Query:
        return self._extend_where("OR", predicate)

    def groupby(self, fields: FieldsLike) -> Query:
        self._require(StatementKind.SELECT, op="groupby")
        self._group_by.extend(clauses.normalize_fields(fields, clause="GROUP BY"))
        return self

    def having(self, predicate: Mapping[str, Any], operator: str = "=") -> Query:
        self._require(StatementKind.SELECT, op="having")
        columns = clauses.normalize_mapping(predicate, clause="HAVING")
        self._having.append(("AND", ColumnEquals(columns, clauses.check_operator(operator))))
        return self

    def orderby(self, fields: FieldsLike) -> Query:
        self._require(StatementKind.SELECT, op="orderby")
        self._order_by.extend(clauses.normalize_fields(fields, clause="ORDER BY"))
        return self

    def limit(self, count: int, offset: Optional[int] = None) -> Query:
        self._require(StatementKind.SELECT, op="limit")
        self._limit = clauses.render_limit(self._syntax, count, offset)
        return self

    def returning(self, fields: FieldsLike) -> Query:
        if self.kind is StatementKind.SELECT:
            self._unsupported("returning")
        self._returning = clauses.normalize_fields(fields, clause="RETURNING")
        return self

    # -------------------------------------------------------------------------
    # Output
    # -------------------------------------------------------------------------

    @property
    def text(self) -> str:
        return self._assemble()[0]

    @property
    def values(self) -> List[Any]:
        return self._assemble()[1]

    def render(self) -> RenderResult:
        text, values = self._assemble()
        meta = {
            "dialect": self.dialect.value,
            "paramstyle": self._syntax.paramstyle,
            "kind": self.kind.value,
        }
        return RenderResult(sql=text, params=values, metadata=meta)

    def to_dict(self) -> Dict[str, Any]:
        text, values = self._assemble()
        return {"text": text, "values": values, "dialect": self.dialect.value}

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"Query(kind={self.kind.value}, table={self.table!r}, dialect={self.dialect.value})"

    # -------------------------------------------------------------------------
    # Internals
    # -------------------------------------------------------------------------

    def _assemble(self) -> Tuple[str, List[Any]]:
        binder = clauses.Binder(self._syntax, inline=self.kind is StatementKind.UPDATE)
        parts: List[str] = []

        if self.kind is StatementKind.SELECT:
            parts.append(clauses.render_select(self.table, self._fields))
            parts.extend(self._joins)
        elif self.kind is StatementKind.INSERT:
            parts.append(clauses.render_insert(self.table, self._assignments, binder))
        elif self.kind is StatementKind.UPDATE:
            parts.append(clauses.render_update(self.table, self._assignments, binder))
        else:
            parts.append(clauses.render_delete(self.table))

        if self._where:
            parts.append(clauses.render_where(self._where, binder))
        if self._group_by:
            parts.append(clauses.render_group_by(self._group_by))
        if self._having:
            parts.append(clauses.render_having(self._having, binder))
        if self._order_by:
            parts.append(clauses.render_order_by(self._order_by))
        if self._limit:
            parts.append(self._limit)
        if self._returning:
            parts.append(clauses.render_returning(self._returning))

        text = " ".join(parts)
        logger.debug("Rendered %s (%s): %s [%d values]", self.kind.value, self.dialect.value, text, len(binder.values))
        return text, binder.values

    def _extend_where(self, connector: str, predicate: PredicateLike) -> Query:
        if not self._where:
            raise UnsupportedOperation(
                f".{connector.lower()}_() requires a preceding .where()",
                details={"kind": self.kind.value, "connector": connector},
                remediation="Start the condition with .where() and chain .and_()/.or_() after it.",
            )
        self._where.append((connector, clauses.as_predicate(predicate)))
        return self

    def _require(self, kind: StatementKind, *, op: str) -> None:
        if self.kind is not kind:
            self._unsupported(op)

    def _unsupported(self, op: str) -> None:
        raise UnsupportedOperation(
            f".{op}() is not available on {self.kind.value} statements",
            details={"kind": self.kind.value, "operation": op},
        )


# =============================================================================
# Factories
# =============================================================================

def select(table: str, fields: FieldsLike, *, dialect: Union[Dialect, str, None] = None) -> Query:
    return Query(
        StatementKind.SELECT,
        table,
        fields=clauses.normalize_fields(fields, clause="SELECT"),
        dialect=dialect,
    )


def insert(table: str, fields: Mapping[str, Any], *, dialect: Union[Dialect, str, None] = None) -> Query:
    return Query(
        StatementKind.INSERT,
        table,
        assignments=clauses.normalize_mapping(fields, clause="INSERT"),
        dialect=dialect,
    )


def update(table: str, fields: Mapping[str, Any], *, dialect: Union[Dialect, str, None] = None) -> Query:
    return Query(
        StatementKind.UPDATE,
        table,
        assignments=clauses.normalize_mapping(fields, clause="UPDATE"),
        dialect=dialect,
    )


def deletes(table: str, *, dialect: Union[Dialect, str, None] = None) -> Query:
    return Query(StatementKind.DELETE, table, dialect=dialect)
