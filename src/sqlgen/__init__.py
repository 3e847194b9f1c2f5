"""
sqlgen: dialect-aware SQL string generation.

    import sqlgen

    sqlgen.use("postgres")
    q = sqlgen.select("users", ["id", "name"]).where({"id": 2})
    q.text    # "SELECT id, name FROM users WHERE id = $1"
    q.values  # [2]

Statements are only built, never executed; hand ``text`` and ``values``
to the database driver.
"""

from .config import SqlGenConfig, load_config
from .dialects import current, use
from .errors import (
    InvalidArgument,
    InvalidDialect,
    SqlGenException,
    SqlGenProblem,
    UnsupportedOperation,
    problem_to_dict,
)
from .query import Query, deletes, insert, select, update
from .session import Session
from .types import ColumnEquals, Dialect, Raw, RenderResult, StatementKind

__version__ = "0.1.0"

__all__ = [
    "ColumnEquals",
    "Dialect",
    "InvalidArgument",
    "InvalidDialect",
    "Query",
    "Raw",
    "RenderResult",
    "Session",
    "SqlGenConfig",
    "SqlGenException",
    "SqlGenProblem",
    "StatementKind",
    "UnsupportedOperation",
    "current",
    "deletes",
    "insert",
    "load_config",
    "problem_to_dict",
    "select",
    "update",
    "use",
]
