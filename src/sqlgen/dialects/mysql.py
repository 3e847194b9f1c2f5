from __future__ import annotations

from typing import Optional

from .registry import register


class MySQLDialect:
    name = "mysql"
    paramstyle = "qmark"

    def placeholder(self, index: int) -> str:
        # positional, the driver binds by order
        return "?"

    def render_limit(self, count: int, offset: Optional[int] = None) -> str:
        if offset is None:
            return f"LIMIT {count}"
        # MySQL takes the offset first
        return f"LIMIT {offset}, {count}"


register(MySQLDialect())
