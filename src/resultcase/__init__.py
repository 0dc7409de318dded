"""resultcase - a two-variant Result type built on a single fold primitive.

A Result is either a Success holding a value (possibly None) or a Failure
holding a non-None error. Every combinator is derived from fold(), and
misuse (a missing function, a None where one is not allowed) raises
ContractViolation immediately instead of producing a half-built Result.

Example:
    >>> from resultcase import success, failure
    >>>
    >>> def parse(s: str):
    ...     return success(int(s)) if s.isdigit() else failure(f"not a number: {s}")
    >>>
    >>> (
    ...     parse("10")
    ...     .map(lambda x: x * 2)
    ...     .require(lambda x: x > 100, lambda x: "too small")
    ...     .error_or_none()
    ... )
    'too small'
    >>> parse("x").recover(len).get_or_none()
    15
"""

from .errors import ContractCode, ContractViolation, Violation
from .log import configure_logging, get_logger
from .result import (
    Failure,
    Result,
    Success,
    attempt,
    failure,
    sequence,
    success,
    traverse,
)
from .settings import LoggingSettings, ResultcaseSettings, clear_settings_cache, get_settings
from .types import REJECTED, Rejected

__all__ = [
    # Core types
    "Result", "Success", "Failure", "Rejected", "REJECTED",
    # Constructors
    "success", "failure", "attempt",
    # Collection ops
    "sequence", "traverse",
    # Contract errors
    "ContractCode", "ContractViolation", "Violation",
    # Configuration
    "ResultcaseSettings", "LoggingSettings", "get_settings", "clear_settings_cache",
    "configure_logging", "get_logger",
]
