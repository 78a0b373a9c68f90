"""Result type for railway-oriented error handling.

A closed two-variant union: `Success` carries a payload, `Failure` carries an
opaque error. Values are immutable frozen dataclasses.

The central operation is `transform`, which accepts a step function returning
any of four shapes and always yields an awaitable Result:

    T -> U                      map
    T -> Result[U, F]           flat_map (flattened, never nested)
    T -> Awaitable[U]           async map
    T -> Awaitable[Result[U,F]] async flat_map

A Failure input is returned as-is without calling the step. An exception
raised by the step (or while awaiting it) becomes a Failure carrying the
exception, so `transform` never raises.

Example:
    >>> import asyncio
    >>> asyncio.run(success(5).transform(lambda x: x * 2))
    Success(data=10)
    >>> asyncio.run(success(5).transform(lambda x: failure("too big")))
    Failure(error='too big')
"""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, ClassVar, Generic, Literal, NoReturn, TypeVar

from ..foundation.config import get_settings
from ..observability import get_logger

T = TypeVar("T")  # Success type
E = TypeVar("E")  # Error type
U = TypeVar("U")  # Mapped success type
F = TypeVar("F")  # Error type introduced by a step

_log = get_logger("railcase.result")


class Result(Generic[T, E]):
    """Discriminated union of Success and Failure.

    Only the two subclasses below are ever instantiated. The `success` tag
    is a class attribute, so the tag and the payload can never disagree.

    Examples:
        >>> success(42).unwrap()
        42
        >>> failure("boom").unwrap_or(0)
        0
        >>> failure("boom").match(success=str, failure=lambda e: f"failed: {e}")
        'failed: boom'
    """

    __slots__ = ()

    success: ClassVar[bool]

    # ─── Type Checking ───────────────────────────────────────────────

    def is_success(self) -> bool:
        return self.success

    def is_failure(self) -> bool:
        return not self.success

    # ─── Transformation ──────────────────────────────────────────────

    def transform(self, fn: Callable[[T], Any]) -> Awaitable[Result[Any, Any]]:
        """Method form of `transform(result, fn)`."""
        return transform(self, fn)

    def transform_async(self, fn: Callable[[T], Awaitable[Any]]) -> Awaitable[Result[Any, Any]]:
        """Method form of `transform_async(result, fn)`."""
        return transform_async(self, fn)

    # ─── Value Extraction ────────────────────────────────────────────

    def unwrap(self) -> T:
        """Extract the success payload. Raises RuntimeError on Failure."""
        if isinstance(self, Success):
            return self.data
        _raise_from_payload("Called unwrap() on Failure", self)

    def unwrap_err(self) -> E:
        """Extract the failure payload. Raises RuntimeError on Success."""
        if isinstance(self, Failure):
            return self.error
        raise RuntimeError(f"Called unwrap_err() on Success: {self.data!r}")  # type: ignore[attr-defined]

    def unwrap_or(self, default: T) -> T:
        return self.data if isinstance(self, Success) else default

    def unwrap_or_else(self, f: Callable[[E], T]) -> T:
        """Extract the success payload or compute one from the error."""
        return self.data if isinstance(self, Success) else f(self.error)  # type: ignore[attr-defined]

    def expect(self, msg: str) -> T:
        """Extract the success payload, raising RuntimeError(msg) on Failure."""
        if isinstance(self, Success):
            return self.data
        _raise_from_payload(msg, self)

    def match(self, *, success: Callable[[T], U], failure: Callable[[E], U]) -> U:
        """Exhaustive case analysis over both variants."""
        if isinstance(self, Success):
            return success(self.data)
        return failure(self.error)  # type: ignore[attr-defined]

    def __bool__(self) -> bool:
        return self.success


@dataclass(frozen=True, slots=True)
class Success(Result[T, Any]):
    """Success variant. Holds exactly one payload."""

    data: T

    success: ClassVar[Literal[True]] = True


@dataclass(frozen=True, slots=True)
class Failure(Result[Any, E]):
    """Failure variant. The payload is carried, never inspected."""

    error: E

    success: ClassVar[Literal[False]] = False


# ═════════════════════════════════════════════════════════════════════════════
# Constructor Functions
# ═════════════════════════════════════════════════════════════════════════════


def success(value: T) -> Success[T]:
    """Construct the success variant."""
    return Success(value)


def failure(error: E) -> Failure[E]:
    """Construct the failure variant."""
    return Failure(error)


# ═════════════════════════════════════════════════════════════════════════════
# Transformation
# ═════════════════════════════════════════════════════════════════════════════


async def transform(result: Result[T, E], fn: Callable[[T], Any]) -> Result[Any, Any]:
    """Apply fn to a success payload, absorbing every return shape and exception.

    - Failure: returned unchanged; fn is not called.
    - fn returns an awaitable: it is awaited once.
    - the resolved value is a Result: returned as-is (flattened).
    - any other value: wrapped in Success.
    - fn raises (synchronously or while awaited): Failure(exception).

    Type signature: Result[T, E] -> (T -> U | Result[U, F] | Awaitable[U | Result[U, F]]) -> Awaitable[Result[U, E | F]]
    """
    if not isinstance(result, Success):
        log_skipped("transform", fn)
        return result
    try:
        value = fn(result.data)
        if inspect.isawaitable(value):
            value = await value
    except Exception as exc:
        return absorb(exc, fn)
    return value if isinstance(value, Result) else Success(value)


async def transform_async(result: Result[T, E], fn: Callable[[T], Awaitable[Any]]) -> Result[Any, Any]:
    """Alias of transform() for awaitable-returning steps."""
    return await transform(result, fn)


# ═════════════════════════════════════════════════════════════════════════════
# Helpers
# ═════════════════════════════════════════════════════════════════════════════


def absorb(exc: Exception, step: object) -> Failure[Exception]:
    """Convert an exception raised by a user step into a Failure carrying it verbatim."""
    if _log.is_enabled_for(logging.DEBUG) and get_settings().chain.log_absorbed:
        _log.debug("exception absorbed", step=describe(step), error_type=type(exc).__name__, error=str(exc))
    return Failure(exc)


def log_skipped(op: str, step: object) -> None:
    """Record a step skipped because the running value is already a Failure."""
    if _log.is_enabled_for(logging.DEBUG) and get_settings().chain.log_short_circuit:
        _log.debug("step skipped", op=op, step=describe(step))


def describe(step: object) -> str:
    if isinstance(step, str):
        return step
    return getattr(step, "__qualname__", None) or repr(step)


def _raise_from_payload(msg: str, result: Result[Any, Any]) -> NoReturn:
    error = result.error  # type: ignore[attr-defined]
    if isinstance(error, BaseException):
        raise RuntimeError(f"{msg}: {error!r}") from error
    raise RuntimeError(f"{msg}: {error!r}")
