from __future__ import annotations

from typing import TYPE_CHECKING, Any, Mapping, Union

from . import query as _query
from .dialects import registry
from .types import Dialect, FieldsLike

if TYPE_CHECKING:
    from .config import SqlGenConfig


class Session:
    """
    Query factories bound to one dialect.

    Unlike the module-level factories, a session never consults the
    process-wide dialect after construction, so sessions for different
    databases can be used side by side.
    """

    def __init__(self, dialect: Union[Dialect, str, None] = None) -> None:
        self.dialect: Dialect = registry.current() if dialect is None else registry.resolve(dialect)

    @classmethod
    def from_config(cls, config: SqlGenConfig) -> Session:
        return cls(config.dialect)

    def select(self, table: str, fields: FieldsLike) -> _query.Query:
        return _query.select(table, fields, dialect=self.dialect)

    def insert(self, table: str, fields: Mapping[str, Any]) -> _query.Query:
        return _query.insert(table, fields, dialect=self.dialect)

    def update(self, table: str, fields: Mapping[str, Any]) -> _query.Query:
        return _query.update(table, fields, dialect=self.dialect)

    def deletes(self, table: str) -> _query.Query:
        return _query.deletes(table, dialect=self.dialect)

    def __repr__(self) -> str:
        return f"Session(dialect={self.dialect.value})"
