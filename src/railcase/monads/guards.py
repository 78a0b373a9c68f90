"""Type-narrowing predicates for Result values."""

from __future__ import annotations

from typing import Any, TypeGuard, TypeVar

from .result import Failure, Result, Success

T = TypeVar("T")
E = TypeVar("E")


def is_success(result: Result[T, E]) -> TypeGuard[Success[T]]:
    """True for Success. Narrows `result` so `.data` is accessible."""
    return isinstance(result, Success)


def is_failure(result: Result[T, E]) -> TypeGuard[Failure[E]]:
    """True for Failure. Narrows `result` so `.error` is accessible."""
    return isinstance(result, Failure)


def is_result(value: Any) -> TypeGuard[Result[Any, Any]]:
    """True when value is either variant."""
    return isinstance(value, Result)
