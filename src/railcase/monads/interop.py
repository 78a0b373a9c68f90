"""Bridges between awaitables and Results.

Provides:
- from_awaitable: Awaitable[T] -> Result[T, Exception] (never raises)
- to_awaitable: Result[T, E] -> T (raises on Failure)
- map_pending / map_pending_async: transform a Result that is still pending

These are the only places where a Failure turns back into a raised exception.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, TypeVar

from ..errors import ResultRejected
from .result import Result, Success, absorb, transform, transform_async

T = TypeVar("T")
E = TypeVar("E")


async def from_awaitable(awaitable: Awaitable[T]) -> Result[T, Exception]:
    """Await and wrap the outcome: Success(value), or Failure(exception) if awaiting raises.

    The resolved value is wrapped as-is, even when it is itself a Result.

    Example:
        >>> async def fetch() -> int:
        ...     return 42
        >>> asyncio.run(from_awaitable(fetch()))
        Success(data=42)
    """
    try:
        value = await awaitable
    except Exception as exc:
        return absorb(exc, awaitable)
    return Success(value)


async def to_awaitable(result: Result[T, E]) -> T:
    """Resolve to the success payload or raise on Failure.

    Raises:
        Exception: The failure payload itself, when it is an exception
        ResultRejected: For any other failure payload (available as `.error`)
    """
    if isinstance(result, Success):
        return result.data
    error = result.error  # type: ignore[attr-defined]
    if isinstance(error, BaseException):
        raise error
    raise ResultRejected(error)


async def map_pending(pending: Awaitable[Result[T, E]], fn: Callable[[T], Any]) -> Result[Any, Any]:
    """Await a pending Result, then transform() it with fn."""
    return await transform(await pending, fn)


async def map_pending_async(pending: Awaitable[Result[T, E]], fn: Callable[[T], Awaitable[Any]]) -> Result[Any, Any]:
    """Await a pending Result, then transform_async() it with fn."""
    return await transform_async(await pending, fn)
