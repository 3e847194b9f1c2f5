"""Dialect-specific syntax: placeholders and paging."""

from .base import SQLDialect
from .registry import available, current, get, register, resolve, use
from . import mssql, mysql, postgres  # noqa: F401  (registers the built-in dialects)

__all__ = [
    "SQLDialect",
    "available",
    "current",
    "get",
    "register",
    "resolve",
    "use",
]
