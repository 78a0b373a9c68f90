"""Validation outcomes as Results.

`from_validation` maps any `{success, data, error}`-shaped outcome (a mapping
or an object with those attributes) onto a Result. `safe_parse` and
`validate` do the same for pydantic validation.

Example:
    >>> from pydantic import BaseModel
    >>> class User(BaseModel):
    ...     name: str
    >>> validate(User, {"name": "ada"})
    Success(data=User(name='ada'))
    >>> validate(User, {}).is_failure()
    True
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, TypeAdapter, ValidationError

from ..errors import ValidationFailed
from .result import Failure, Result, Success

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class ValidationOutcome(Generic[T]):
    """Outcome of a validation that did not raise."""

    success: bool
    data: T | None = None
    error: Any = None


def from_validation(outcome: Mapping[str, Any] | object, default_error: Any = None) -> Result[Any, Any]:
    """Convert a validation outcome into a Result.

    Success with a payload becomes Success(data). Everything else, including a
    success whose data is missing or None, becomes a Failure carrying the
    outcome's error, or `default_error` when the outcome has none. Without a
    `default_error`, a ValidationFailed with the configured default message
    is used.
    """
    succeeded, data, error = (_field(outcome, name) for name in ("success", "data", "error"))
    if succeeded and data is not None:
        return Success(data)
    if error is not None:
        return Failure(error)
    return Failure(default_error if default_error is not None else ValidationFailed.default())


def safe_parse(schema: type[BaseModel] | TypeAdapter[T] | Any, value: object, *, strict: bool | None = None) -> ValidationOutcome[Any]:
    """Validate with pydantic without raising.

    Args:
        schema: A BaseModel subclass, a TypeAdapter, or any type TypeAdapter accepts
        value: Raw input
        strict: Forwarded to pydantic

    Returns:
        ValidationOutcome with the validated data, or the ValidationError as error
    """
    try:
        if isinstance(schema, type) and issubclass(schema, BaseModel):
            data = schema.model_validate(value, strict=strict)
        else:
            adapter = schema if isinstance(schema, TypeAdapter) else TypeAdapter(schema)
            data = adapter.validate_python(value, strict=strict)
    except ValidationError as exc:
        return ValidationOutcome(False, error=exc)
    return ValidationOutcome(True, data=data)


def validate(
    schema: type[BaseModel] | TypeAdapter[T] | Any,
    value: object,
    *,
    strict: bool | None = None,
    default_error: Any = None,
) -> Result[Any, Any]:
    """Validate with pydantic and return Success(validated) or Failure(ValidationError)."""
    return from_validation(safe_parse(schema, value, strict=strict), default_error)


def _field(outcome: Mapping[str, Any] | object, name: str) -> Any:
    if isinstance(outcome, Mapping):
        return outcome.get(name)
    return getattr(outcome, name, None)
