"""Usage-contract errors for Result combinators.

Domain failures travel as Failure payloads. Programmer errors (an absent
function argument, a None where one is not allowed) are raised immediately
as ContractViolation and never wrapped into a Result.
"""

from __future__ import annotations

import logging
from enum import StrEnum
from typing import TYPE_CHECKING, Self, TypeVar

from pydantic import BaseModel

from .log import get_logger
from .settings import get_settings

if TYPE_CHECKING:
    from collections.abc import Callable

T = TypeVar("T")

logger = get_logger("contract")


class ContractCode(StrEnum):
    """Kinds of usage-contract violation."""
    NULL_ARGUMENT = "NULL_ARGUMENT"
    NOT_CALLABLE = "NOT_CALLABLE"
    NULL_ERROR = "NULL_ERROR"
    NULL_RESULT = "NULL_RESULT"
    NOT_A_RESULT = "NOT_A_RESULT"
    NOT_AN_EXCEPTION = "NOT_AN_EXCEPTION"


_MESSAGES: dict[ContractCode, str] = {
    ContractCode.NULL_ARGUMENT: "must not be None",
    ContractCode.NOT_CALLABLE: "must be callable",
    ContractCode.NULL_ERROR: "must not be None",
    ContractCode.NULL_RESULT: "returned None",
    ContractCode.NOT_A_RESULT: "must return a Result",
    ContractCode.NOT_AN_EXCEPTION: "must return an exception instance",
}


class Violation(BaseModel):
    """Structured description of a single contract violation."""

    model_config = {"frozen": True}

    operation: str
    parameter: str
    code: ContractCode
    detail: str | None = None

    def render(self) -> str:
        """Format as a one-line message naming the call site."""
        msg = f"{self.operation}(): {self.parameter} {_MESSAGES[self.code]}"
        return f"{msg} ({self.detail})" if self.detail else msg

    __str__ = render


class ContractViolation(ValueError, TypeError):
    """Raised when a Result operation is called in breach of its contract."""

    __slots__ = ("violation",)

    def __init__(self, violation: Violation) -> None:
        self.violation = violation
        super().__init__(violation.render())

    @classmethod
    def create(
        cls,
        operation: str,
        parameter: str,
        code: ContractCode,
        *,
        detail: str | None = None,
    ) -> Self:
        """Factory method for construction."""
        return cls(Violation(operation=operation, parameter=parameter, code=code, detail=detail))

    @property
    def code(self) -> ContractCode:
        return self.violation.code


def violate(operation: str, parameter: str, code: ContractCode, *, detail: str | None = None) -> ContractViolation:
    """Build a ContractViolation and log it. The caller raises."""
    exc = ContractViolation.create(operation, parameter, code, detail=detail)
    cfg = get_settings().logging
    if cfg.log_violations:
        logger.log(_level_number(cfg.violation_level), "contract violation: %s", exc.violation.render())
    return exc


def require_callable(fn: object, operation: str, parameter: str) -> None:
    """Reject None and non-callables passed where a function is expected."""
    if fn is None:
        raise violate(operation, parameter, ContractCode.NULL_ARGUMENT)
    if not callable(fn):
        raise violate(operation, parameter, ContractCode.NOT_CALLABLE, detail=type(fn).__name__)


def require_present(value: T | None, operation: str, parameter: str, code: ContractCode = ContractCode.NULL_RESULT) -> T:
    """Return value unchanged, raising if it is None."""
    if value is None:
        raise violate(operation, parameter, code)
    return value


def checked(fn: Callable[[T], object], operation: str, parameter: str) -> Callable[[T], object]:
    """Wrap fn so that a None return raises instead of propagating."""
    require_callable(fn, operation, parameter)

    def call(arg: T) -> object:
        return require_present(fn(arg), operation, parameter)

    return call


def _level_number(name: str) -> int:
    return logging.getLevelNamesMapping().get(name.upper(), logging.DEBUG)
