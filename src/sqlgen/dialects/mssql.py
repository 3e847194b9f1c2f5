from __future__ import annotations

from typing import Optional

from ..errors import UnsupportedOperation
from .registry import register


class MSSQLDialect:
    name = "mssql"
    paramstyle = "named"  # @p1, @p2, ...

    def placeholder(self, index: int) -> str:
        return f"@p{index}"

    def render_limit(self, count: int, offset: Optional[int] = None) -> str:
        raise UnsupportedOperation(
            "LIMIT/OFFSET paging is not supported for the mssql dialect",
            details={"dialect": self.name, "count": count, "offset": offset},
            remediation="Page the result set in the caller or switch to postgres/mysql.",
        )


register(MSSQLDialect())
