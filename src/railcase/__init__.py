"""railcase - Railway-oriented Result values and async chains.

A Result is either a Success carrying data or a Failure carrying an opaque
error. `transform` applies a step to a Success whatever the step returns
(a value, a Result, or an awaitable of either) and turns exceptions into
Failures. `begin` starts a chain whose steps are skipped once a Failure
appears.

Quick Start:
    >>> import asyncio
    >>> from railcase import begin, failure, success
    >>>
    >>> async def load_user(user_id: int):
    ...     return success({"id": user_id, "age": 17})
    >>>
    >>> outcome = asyncio.run(
    ...     begin(7)
    ...     .chain_async(load_user)
    ...     .ensure(lambda u: u["age"] >= 18, "underage")
    ...     .map(lambda u: u["id"])
    ...     .run()
    ... )
    >>> outcome
    Failure(error='underage')

Validation:
    >>> from railcase import validate
    >>> validate(int, "12")
    Success(data=12)

Configuration (environment, RAILCASE_ prefix):
    >>> from railcase import get_settings
    >>> get_settings().validation.default_message
    'Validation failed'
"""

from .errors import ResultRejected, ValidationFailed
from .foundation.config import RailcaseSettings, clear_settings_cache, get_settings
from .monads import (
    Failure,
    Result,
    ResultChain,
    Success,
    ValidationOutcome,
    begin,
    failure,
    from_awaitable,
    from_validation,
    is_failure,
    is_result,
    is_success,
    map_pending,
    map_pending_async,
    safe_parse,
    success,
    to_awaitable,
    transform,
    transform_async,
    validate,
)
from .observability import configure_from_settings, configure_logging, get_logger, log_context

__version__ = "0.1.0"

__all__ = [
    # Core
    "Result",
    "Success",
    "Failure",
    "success",
    "failure",
    "is_success",
    "is_failure",
    "is_result",
    "transform",
    "transform_async",
    # Chains
    "ResultChain",
    "begin",
    # Adapters
    "from_awaitable",
    "to_awaitable",
    "map_pending",
    "map_pending_async",
    "ValidationOutcome",
    "from_validation",
    "safe_parse",
    "validate",
    # Errors
    "ResultRejected",
    "ValidationFailed",
    # Configuration & logging
    "RailcaseSettings",
    "get_settings",
    "clear_settings_cache",
    "configure_logging",
    "configure_from_settings",
    "get_logger",
    "log_context",
    "__version__",
]
