from __future__ import annotations

from dataclasses import dataclass, asdict, field
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class SqlGenProblem:
    code: str                 # stable machine code, e.g. "SQLGEN_INVALID_ARGUMENT"
    category: str             # "config" | "argument" | "dialect"
    message: str              # short human message
    details: Dict[str, Any] = field(default_factory=dict)
    remediation: Optional[str] = None  # actionable next step


class SqlGenException(Exception):
    """Base error for every failure raised while building a statement."""

    code = "SQLGEN_ERROR"
    category = "internal"

    def __init__(
        self,
        message: str,
        *,
        details: Optional[Dict[str, Any]] = None,
        remediation: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.problem = SqlGenProblem(
            code=self.code,
            category=self.category,
            message=message,
            details=dict(details or {}),
            remediation=remediation,
        )


class InvalidDialect(SqlGenException, ValueError):
    code = "SQLGEN_INVALID_DIALECT"
    category = "config"


class InvalidArgument(SqlGenException, ValueError):
    code = "SQLGEN_INVALID_ARGUMENT"
    category = "argument"


class UnsupportedOperation(SqlGenException, NotImplementedError):
    code = "SQLGEN_UNSUPPORTED_OPERATION"
    category = "dialect"


def problem_to_dict(p: SqlGenProblem) -> Dict[str, Any]:
    d = asdict(p)
    if d.get("remediation") is None:
        d.pop("remediation", None)
    return d
