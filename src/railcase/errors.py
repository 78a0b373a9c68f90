"""Exceptions raised at the edges of the Result model.

Failure payloads are opaque, caller-supplied values and railcase never wraps
them. These exceptions exist only for the two places where a failure has to
leave the Result model as a raised exception, and for the default payload of
the validation adapter.
"""

from __future__ import annotations

from typing import Self


class ResultRejected(Exception):
    """Raised when a Failure whose payload is not an exception is rejected.

    `to_awaitable()` re-raises exception payloads as they are. Any other
    payload (a string, a dict, an error model) is carried in `error`.

    Example:
        >>> try:
        ...     raise ResultRejected("not found")
        ... except ResultRejected as exc:
        ...     exc.error
        'not found'
    """

    __slots__ = ("error",)

    def __init__(self, error: object) -> None:
        self.error = error
        super().__init__(f"Result rejected with failure: {error!r}")


class ValidationFailed(ValueError):
    """Default failure payload for validation outcomes that carry no error."""

    __slots__ = ("details",)

    def __init__(self, message: str = "Validation failed", *, details: object = None) -> None:
        self.details = details
        super().__init__(message)

    @property
    def message(self) -> str:
        return str(self)

    @classmethod
    def default(cls) -> Self:
        """Create with the configured default message."""
        from .foundation.config import get_settings

        return cls(get_settings().validation.default_message)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationFailed):
            return NotImplemented
        return self.message == other.message and self.details == other.details

    def __hash__(self) -> int:
        return hash((type(self), self.message))
