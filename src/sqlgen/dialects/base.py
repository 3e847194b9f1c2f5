from __future__ import annotations

from typing import Optional, Protocol


class SQLDialect(Protocol):
    name: str
    paramstyle: str  # "numeric" | "qmark" | "named"

    def placeholder(self, index: int) -> str: ...
    def render_limit(self, count: int, offset: Optional[int] = None) -> str: ...
