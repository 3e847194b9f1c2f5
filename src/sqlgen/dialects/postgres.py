from __future__ import annotations

from typing import Optional

from .registry import register


class PostgresDialect:
    name = "postgres"
    paramstyle = "numeric"  # $1, $2, ...

    def placeholder(self, index: int) -> str:
        return f"${index}"

    def render_limit(self, count: int, offset: Optional[int] = None) -> str:
        if offset is None:
            return f"LIMIT {count}"
        return f"LIMIT {count} OFFSET {offset}"


register(PostgresDialect())
