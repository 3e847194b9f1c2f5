# src/sqlgen/clauses.py
"""
Clause builders for sqlgen statements.

Each function turns semantic inputs (field lists, predicate mappings, join
specs, paging numbers) into a rendered SQL fragment. Values a fragment
contributes are pushed through a ``Binder`` in the same left-to-right order
their tokens appear in the fragment.

Two value styles exist:
- placeholders: the binder returns a dialect token ($1, ?, @p1)
- inline literals: the binder returns the quoted value itself ('2')
Either way the value is recorded, so ``values`` always lines up with ``text``.
"""

from __future__ import annotations

import collections.abc
import numbers
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from .dialects.base import SQLDialect
from .errors import InvalidArgument
from .types import ColumnEquals, FieldsLike, Predicate, PredicateLike, Raw

COMPARISON_OPERATORS = ("=", "<>", "!=", "<", "<=", ">", ">=", "LIKE")


class Binder:
    """Collects bound values for one rendering pass."""

    def __init__(self, dialect: SQLDialect, *, inline: bool = False) -> None:
        self.dialect = dialect
        self.inline = inline
        self.values: List[Any] = []

    def bind(self, value: Any) -> str:
        self.values.append(value)
        if self.inline:
            return quote_literal(value)
        return self.dialect.placeholder(len(self.values))

    def literal(self, value: Any) -> str:
        self.values.append(value)
        return quote_literal(value)


# =============================================================================
# Input normalization
# =============================================================================

def normalize_fields(fields: FieldsLike, *, clause: str = "field list") -> List[str]:
    if isinstance(fields, str):
        out = [fields]
    elif isinstance(fields, collections.abc.Sequence):
        out = list(fields)
    else:
        # sets and other unordered iterables would scramble column order
        raise InvalidArgument(
            f"{clause} must be a string or a sequence of strings, got {type(fields).__name__}",
            details={"clause": clause, "type": type(fields).__name__},
        )
    if not out:
        raise InvalidArgument(f"{clause} must not be empty", details={"clause": clause})
    for f in out:
        if not isinstance(f, str) or not f.strip():
            raise InvalidArgument(
                f"{clause} entries must be non-empty strings, got {f!r}",
                details={"clause": clause, "entry": repr(f)},
            )
    return out


def normalize_mapping(mapping: Mapping[str, Any], *, clause: str) -> Dict[str, Any]:
    if not isinstance(mapping, Mapping):
        raise InvalidArgument(
            f"{clause} expects a mapping of column to value, got {type(mapping).__name__}",
            details={"clause": clause, "type": type(mapping).__name__},
        )
    if not mapping:
        raise InvalidArgument(f"{clause} mapping must not be empty", details={"clause": clause})
    return dict(mapping)


def as_predicate(predicate: PredicateLike, *, operator: str = "=") -> Predicate:
    """Resolve a caller-supplied predicate into the ColumnEquals/Raw variant."""
    if isinstance(predicate, ColumnEquals):
        return ColumnEquals(
            normalize_mapping(predicate.columns, clause="predicate"),
            check_operator(predicate.operator),
        )
    if isinstance(predicate, Raw):
        predicate = predicate.text
    if isinstance(predicate, str):
        if not predicate.strip():
            raise InvalidArgument("Raw predicate must not be empty")
        return Raw(predicate)
    if isinstance(predicate, Mapping):
        return ColumnEquals(normalize_mapping(predicate, clause="predicate"), check_operator(operator))
    raise InvalidArgument(
        f"Predicate must be a mapping or a string, got {type(predicate).__name__}",
        details={"type": type(predicate).__name__},
    )


def check_operator(operator: str) -> str:
    op = operator.strip().upper() if isinstance(operator, str) else operator
    if op not in COMPARISON_OPERATORS:
        raise InvalidArgument(
            f"Unsupported comparison operator {operator!r}",
            details={"operator": repr(operator), "allowed": list(COMPARISON_OPERATORS)},
        )
    return op


def paging_literal(name: str, value: Any) -> int:
    # bool is an Integral subclass but never a row count
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidArgument(
            f"LIMIT {name} must be an integer, got {value!r}",
            details={"argument": name, "value": repr(value)},
            remediation="Pass row counts as int; they are inlined into the SQL text.",
        )
    if value < 0:
        raise InvalidArgument(
            f"LIMIT {name} must be >= 0, got {value}",
            details={"argument": name, "value": int(value)},
        )
    return int(value)


def quote_literal(value: Any) -> str:
    if value is None:
        return "NULL"
    if isinstance(value, bool):
        return "'true'" if value else "'false'"
    return "'" + str(value).replace("'", "''") + "'"


# =============================================================================
# Fragments
# =============================================================================

def render_predicate(predicate: Predicate, binder: Binder) -> str:
    if isinstance(predicate, Raw):
        return predicate.text
    parts = [f"{col} {predicate.operator} {binder.bind(val)}" for col, val in predicate.columns.items()]
    if len(parts) == 1:
        return parts[0]
    return "(" + " AND ".join(parts) + ")"


def render_conditions(conditions: Sequence[Tuple[str, Predicate]], binder: Binder) -> str:
    """Join (connector, predicate) pairs; the first connector is ignored."""
    out = ""
    for i, (connector, predicate) in enumerate(conditions):
        rendered = render_predicate(predicate, binder)
        out = rendered if i == 0 else f"{out} {connector} {rendered}"
    return out


def render_select(table: str, fields: Sequence[str]) -> str:
    return f"SELECT {', '.join(fields)} FROM {table}"


def render_join(table: str, on: Mapping[str, str]) -> str:
    conditions = " AND ".join(f"{left} = {right}" for left, right in on.items())
    return f"INNER JOIN {table} ON {conditions}"


def render_where(conditions: Sequence[Tuple[str, Predicate]], binder: Binder) -> str:
    return "WHERE " + render_conditions(conditions, binder)


def render_group_by(fields: Sequence[str]) -> str:
    return "GROUP BY " + ", ".join(fields)


def render_having(conditions: Sequence[Tuple[str, Predicate]], binder: Binder) -> str:
    return "HAVING " + render_conditions(conditions, binder)


def render_order_by(fields: Sequence[str]) -> str:
    return "ORDER BY " + ", ".join(fields)


def render_insert(table: str, assignments: Mapping[str, Any], binder: Binder) -> str:
    columns = ", ".join(assignments)
    literals = ",".join(binder.literal(v) for v in assignments.values())
    return f"INSERT INTO {table} ({columns}) VALUES ({literals})"


def render_update(table: str, assignments: Mapping[str, Any], binder: Binder) -> str:
    sets = ", ".join(f"{col}={binder.literal(v)}" for col, v in assignments.items())
    return f"UPDATE {table} SET {sets}"


def render_delete(table: str) -> str:
    return f"DELETE FROM {table}"


def render_returning(fields: Sequence[str]) -> str:
    return "RETURNING " + ", ".join(fields)


def render_limit(dialect: SQLDialect, count: Any, offset: Optional[Any] = None) -> str:
    n = paging_literal("count", count)
    off = None if offset is None else paging_literal("offset", offset)
    return dialect.render_limit(n, off)
