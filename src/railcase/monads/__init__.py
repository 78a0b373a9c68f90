"""Railway-oriented Result values and chains.

Provides:
- Result, Success, Failure with success()/failure() constructors
- transform: one operator absorbing plain, Result and awaitable step returns
- ResultChain / begin: fluent, short-circuiting step sequencing
- Awaitable and validation adapters

Example:
    >>> from railcase.monads import begin, failure, success
    >>>
    >>> def parse(raw: str):
    ...     return success(int(raw)) if raw.isdigit() else failure(f"not a number: {raw}")
    >>>
    >>> chain = begin("21").chain(parse).map(lambda n: n * 2)
    >>> asyncio.run(chain.run())
    Success(data=42)
"""

from .chain import ResultChain, begin
from .guards import is_failure, is_result, is_success
from .interop import from_awaitable, map_pending, map_pending_async, to_awaitable
from .result import (
    Failure,
    Result,
    Success,
    failure,
    success,
    transform,
    transform_async,
)
from .validation import ValidationOutcome, from_validation, safe_parse, validate

__all__ = [
    # Core types
    "Result",
    "Success",
    "Failure",
    "success",
    "failure",
    # Guards
    "is_success",
    "is_failure",
    "is_result",
    # Transformation
    "transform",
    "transform_async",
    # Chains
    "ResultChain",
    "begin",
    # Awaitable adapters
    "from_awaitable",
    "to_awaitable",
    "map_pending",
    "map_pending_async",
    # Validation
    "ValidationOutcome",
    "from_validation",
    "safe_parse",
    "validate",
]
