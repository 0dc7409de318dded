"""Result type: exactly one synchronous outcome, success or failure.

Every operation is derived from a single primitive, fold(), which is the
only place that looks at which variant it holds:
- Queries: is_success, is_failure, get_or_none, error_or_none
- Extraction: get_or_default, get_or_else, get_or_call, get_or_raise
- Functor/Bifunctor: map, map_failure, map_both
- Monad: flat_map, flat_map_failure, flat_map_both
- Validation: require, fail_if, fail
- Recovery: recover, recover_if
- Inspection: on_success, on_failure, on_either

Contract notes:
- Function arguments are validated eagerly, whichever branch runs
- A Success may hold None, a Failure never does
- No-op branches hand back the same instance, not a copy
"""

from __future__ import annotations

from typing import (
    TYPE_CHECKING,
    Callable,
    Generic,
    ParamSpec,
    TypeVar,
    final,
    overload,
)

from .errors import ContractCode, checked, require_callable, require_present, violate
from .types import REJECTED, Rejected

if TYPE_CHECKING:
    from collections.abc import Iterable

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped success type
X = TypeVar("X")  # Mapped error type
R = TypeVar("R")  # Fold answer
P = ParamSpec("P")

_VARIANTS = ("Success", "Failure")


def _identity(x: T) -> T:
    return x


def _const(value: R) -> Callable[[object], R]:
    return lambda _: value


def _ignore(_: object) -> None:
    return None


def _reject(_: object) -> Rejected:
    return REJECTED


def _chained(fn: Callable[[T], object], operation: str, parameter: str) -> Callable[[T], Result]:
    """Wrap a flat-map mapper so it must answer with a Result."""
    require_callable(fn, operation, parameter)

    def call(arg: T) -> Result:
        out = require_present(fn(arg), operation, parameter)
        if not isinstance(out, Result):
            raise violate(operation, parameter, ContractCode.NOT_A_RESULT, detail=type(out).__name__)
        return out

    return call


def _tap(action: Callable[[T], object], result: Result[U, X]) -> Callable[[T], Result[U, X]]:
    def run(payload: T) -> Result[U, X]:
        action(payload)
        return result

    return run


class Result(Generic[T, E]):
    """Discriminated union representing success or failure.

    Closed to its two variants, Success and Failure; obtain instances with
    success() and failure(). Instances are immutable and compare by
    (state, payload).

    Examples:
        >>> success(10).map(lambda x: x * 2).require(lambda x: x > 15).get_or_default(-1)
        20
        >>> failure("e").recover(len).get_or_none()
        1
        >>> r = success(5)
        >>> r.require(lambda x: x > 0) is r
        True

    Pattern matching:
        >>> match success(3):
        ...     case Success(value):
        ...         print(value)
        ...     case Failure(error):
        ...         print(error)
        3
    """

    __slots__ = ()

    def __init_subclass__(cls, **kwargs: object) -> None:
        super().__init_subclass__(**kwargs)
        if cls.__module__ != __name__ or cls.__qualname__ not in _VARIANTS:
            raise TypeError(f"Result is closed to {' and '.join(_VARIANTS)}; cannot define {cls.__qualname__}")

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # ─── Primitive ─────────────────────────────────────────────────────

    def fold(self, on_success: Callable[[T], R], on_failure: Callable[[E], R]) -> R:
        """Apply on_success to the value or on_failure to the error.

        Exactly one function runs. Both are checked before either runs, so a
        missing function for the branch not taken is still rejected.

        Raises:
            ContractViolation: If either function is None or not callable
        """
        require_callable(on_success, "fold", "on_success")
        require_callable(on_failure, "fold", "on_failure")
        match self:
            case Success(value):
                return on_success(value)
            case Failure(error):
                return on_failure(error)
        raise AssertionError(f"unknown Result variant: {type(self).__name__}")

    # ─── State Queries ─────────────────────────────────────────────────

    def is_success(self) -> bool:
        return self.fold(_const(True), _const(False))

    def is_failure(self) -> bool:
        return self.fold(_const(False), _const(True))

    def error_or_none(self) -> E | None:
        """Error if failure, None if success."""
        return self.fold(_const(None), _identity)

    def get_or_none(self) -> T | None:
        """Value if success (possibly None), None if failure."""
        return self.get_or_default(None)

    # ─── Extraction ────────────────────────────────────────────────────

    def get_or_else(self, on_failure: Callable[[E], T]) -> T:
        """Value if success, else on_failure(error)."""
        require_callable(on_failure, "get_or_else", "on_failure")
        return self.fold(_identity, on_failure)

    def get_or_call(self, supplier: Callable[[], T]) -> T:
        """Value if success, else supplier()."""
        require_callable(supplier, "get_or_call", "supplier")
        return self.get_or_else(lambda _: supplier())

    def get_or_default(self, default: T) -> T:
        """Value if success, else default (which may be None)."""
        return self.get_or_call(lambda: default)

    def get_or_raise(self, on_failure: Callable[[E], BaseException]) -> T:
        """Value if success, else raise the exception built by on_failure(error).

        Raises:
            ContractViolation: If on_failure is missing, or returns None or a
                non-exception on the failure path
        """
        require_callable(on_failure, "get_or_raise", "on_failure")

        def throw(error: E) -> T:
            exc = require_present(on_failure(error), "get_or_raise", "on_failure")
            if not isinstance(exc, BaseException):
                raise violate("get_or_raise", "on_failure", ContractCode.NOT_AN_EXCEPTION, detail=type(exc).__name__)
            raise exc

        return self.fold(_identity, throw)

    # ─── Monad Operations ──────────────────────────────────────────────

    def flat_map_both(
        self,
        on_success: Callable[[T], Result[U, X]],
        on_failure: Callable[[E], Result[U, X]],
    ) -> Result[U, X]:
        """fold() that must answer with a Result. Signature: Result[T,E] → (T→Result[U,X], E→Result[U,X]) → Result[U,X]

        Raises:
            ContractViolation: If a mapper is missing, or the one that runs
                returns None or a non-Result
        """
        return self.fold(
            _chained(on_success, "flat_map_both", "on_success"),
            _chained(on_failure, "flat_map_both", "on_failure"),
        )

    def flat_map(self, fn: Callable[[T], Result[U, E]]) -> Result[U, E]:
        """Monadic bind (>>=). Chain a step that can fail.

        Example:
            >>> success("42").flat_map(lambda s: success(int(s))).flat_map(
            ...     lambda n: success(n * 2) if n > 0 else failure("neg"))
            Success(84)
        """
        require_callable(fn, "flat_map", "fn")
        return self.flat_map_both(fn, failure)

    def flat_map_failure(self, fn: Callable[[E], Result[T, X]]) -> Result[T, X]:
        """On failure, continue with fn(error). On success, pass the value through."""
        require_callable(fn, "flat_map_failure", "fn")
        return self.flat_map_both(success, fn)

    # ─── Functor / Bifunctor Operations ────────────────────────────────

    def map_both(self, on_success: Callable[[T], U], on_failure: Callable[[E], X]) -> Result[U, X]:
        """Transform whichever payload is present, keeping the state.

        on_success may return None; on_failure may not.
        """
        require_callable(on_success, "map_both", "on_success")
        error_of = checked(on_failure, "map_both", "on_failure")
        return self.flat_map_both(
            lambda value: success(on_success(value)),
            lambda error: failure(error_of(error)),
        )

    def map(self, fn: Callable[[T], U]) -> Result[U, E]:
        """Apply fn to the value. Signature: Result[T,E] → (T→U) → Result[U,E]"""
        require_callable(fn, "map", "fn")
        return self.map_both(fn, _identity)

    def map_failure(self, fn: Callable[[E], X]) -> Result[T, X]:
        """Apply fn to the error. Signature: Result[T,E] → (E→X) → Result[T,X]"""
        require_callable(fn, "map_failure", "fn")
        return self.map_both(_identity, fn)

    # ─── Validation ────────────────────────────────────────────────────

    @overload
    def require(self, predicate: Callable[[T], object]) -> Result[T, E | Rejected]: ...

    @overload
    def require(self, predicate: Callable[[T], object], on_reject: Callable[[T], E]) -> Result[T, E]: ...

    def require(self, predicate: Callable[[T], object], on_reject: Callable[[T], object] = _reject) -> Result:
        """Keep a success only while predicate(value) holds.

        A passing success and any failure are returned as the same instance.
        A rejected success becomes failure(on_reject(value)), or
        failure(REJECTED) when on_reject is omitted.
        """
        require_callable(predicate, "require", "predicate")
        reject = checked(on_reject, "require", "on_reject")
        return self.flat_map_both(
            lambda value: self if predicate(value) else failure(reject(value)),
            _const(self),
        )

    @overload
    def fail_if(self, predicate: Callable[[T], object]) -> Result[T, E | Rejected]: ...

    @overload
    def fail_if(self, predicate: Callable[[T], object], on_reject: Callable[[T], E]) -> Result[T, E]: ...

    def fail_if(self, predicate: Callable[[T], object], on_reject: Callable[[T], object] = _reject) -> Result:
        """require() with the predicate negated."""
        require_callable(predicate, "fail_if", "predicate")
        require_callable(on_reject, "fail_if", "on_reject")
        return self.require(lambda value: not predicate(value), on_reject)

    @overload
    def fail(self) -> Result[T, E | Rejected]: ...

    @overload
    def fail(self, on_reject: Callable[[T], E]) -> Result[T, E]: ...

    def fail(self, on_reject: Callable[[T], object] = _reject) -> Result:
        """Turn any success into failure(on_reject(value)); failures pass through."""
        require_callable(on_reject, "fail", "on_reject")
        return self.fail_if(_const(True), on_reject)

    # ─── Recovery ──────────────────────────────────────────────────────

    def recover_if(self, predicate: Callable[[E], object], on_failure: Callable[[E], T]) -> Result[T, E]:
        """Turn a failure whose error satisfies predicate into success(on_failure(error)).

        Successes and unmatched failures are returned as the same instance.
        """
        require_callable(predicate, "recover_if", "predicate")
        require_callable(on_failure, "recover_if", "on_failure")
        return self.flat_map_both(
            _const(self),
            lambda error: success(on_failure(error)) if predicate(error) else self,
        )

    def recover(self, on_failure: Callable[[E], T]) -> Result[T, E]:
        """Turn any failure into success(on_failure(error))."""
        require_callable(on_failure, "recover", "on_failure")
        return self.recover_if(_const(True), on_failure)

    # ─── Inspection ────────────────────────────────────────────────────

    def on_either(self, success_action: Callable[[T], object], failure_action: Callable[[E], object]) -> Result[T, E]:
        """Call the matching action for side effects, return self."""
        require_callable(success_action, "on_either", "success_action")
        require_callable(failure_action, "on_either", "failure_action")
        return self.flat_map_both(_tap(success_action, self), _tap(failure_action, self))

    def on_success(self, action: Callable[[T], object]) -> Result[T, E]:
        """Call action with the value for side effects, return self."""
        require_callable(action, "on_success", "action")
        return self.on_either(action, _ignore)

    def on_failure(self, action: Callable[[E], object]) -> Result[T, E]:
        """Call action with the error for side effects, return self."""
        require_callable(action, "on_failure", "action")
        return self.on_either(_ignore, action)

    # ─── Dunder Methods ────────────────────────────────────────────────

    def __str__(self) -> str:
        return self.fold(lambda value: f"Success({value})", lambda error: f"Failure({error})")

    def __repr__(self) -> str:
        return self.fold(lambda value: f"Success({value!r})", lambda error: f"Failure({error!r})")

    def __hash__(self) -> int:
        return self.fold(hash, hash)

    def __eq__(self, other: object) -> bool:
        if self is other:
            return True
        if not isinstance(other, Result):
            return NotImplemented
        return self.fold(
            lambda value: other.fold(lambda v: bool(value == v), _const(False)),
            lambda error: other.fold(_const(False), lambda e: bool(error == e)),
        )

    def __reduce__(self) -> tuple[Callable[[object], Result], tuple[object]]:
        return self.fold(lambda value: (success, (value,)), lambda error: (failure, (error,)))


@final
class Success(Result[T, E]):
    """Success variant; holds a value that may be None. Build with success()."""

    __slots__ = ("_value",)
    __match_args__ = ("value",)

    def __init__(self, value: T) -> None:
        object.__setattr__(self, "_value", value)

    @property
    def value(self) -> T:
        return self._value


@final
class Failure(Result[T, E]):
    """Failure variant; holds a non-None error. Build with failure()."""

    __slots__ = ("_error",)
    __match_args__ = ("error",)

    def __init__(self, error: E) -> None:
        object.__setattr__(self, "_error", require_present(error, "failure", "error", ContractCode.NULL_ERROR))

    @property
    def error(self) -> E:
        return self._error


# ═══════════════════════════════════════════════════════════════════════════════
# Constructors
# ═══════════════════════════════════════════════════════════════════════════════


def success(value: T) -> Result[T, E]:
    """Construct a success. value may be None."""
    return Success(value)


def failure(error: E) -> Result[T, E]:
    """Construct a failure.

    Raises:
        ContractViolation: If error is None
    """
    return Failure(error)


def attempt(fn: Callable[P, T], /, *args: P.args, **kwargs: P.kwargs) -> Result[T, Exception]:
    """Call fn, turning its return value into a success and a raised Exception into a failure.

    This is the one place exceptions become data; combinators never catch.

    Example:
        >>> attempt(int, "42")
        Success(42)
        >>> attempt(int, "x").is_failure()
        True
    """
    require_callable(fn, "attempt", "fn")
    try:
        value = fn(*args, **kwargs)
    except Exception as e:
        return failure(e)
    return success(value)


# ═══════════════════════════════════════════════════════════════════════════════
# Collection Operations
# ═══════════════════════════════════════════════════════════════════════════════


def sequence(results: Iterable[Result[T, E]]) -> Result[list[T], E]:
    """Iterable[Result[T,E]] → Result[list[T], E]. Fail-fast on first failure."""
    values: list[T] = []
    for r in results:
        if r.is_failure():
            return failure(r.error_or_none())  # type: ignore[arg-type]
        values.append(r.get_or_none())  # type: ignore[arg-type]
    return success(values)


def traverse(items: Iterable[T], fn: Callable[[T], Result[U, E]]) -> Result[list[U], E]:
    """Map fn over items and sequence the results. Stops calling fn after the first failure."""
    step = _chained(fn, "traverse", "fn")
    return sequence(step(item) for item in items)
