"""Fluent railway chains over awaitable Results.

A ResultChain wraps one Result (or an awaitable resolving to one) and exposes
step operators. Every operator returns a new chain; nothing is mutated. The
running value is either a success, in which case the next step is applied,
or a failure, in which case every later step is skipped and the failure
rides through to `run()` unchanged.

Steps are lazy: nothing executes until `run()` is awaited, and steps then
execute strictly in the order they were attached.

Example:
    >>> async def main():
    ...     return await (
    ...         begin(5)
    ...         .map(lambda x: x * 2)
    ...         .ensure(lambda x: x < 100, "too large")
    ...         .chain(lambda x: success(x + 3))
    ...         .map(str)
    ...         .run()
    ...     )
    >>> asyncio.run(main())
    Success(data='13')
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Callable
from typing import Any, Generic, TypeVar

from .guards import is_result
from .result import Failure, Result, Success, absorb, describe, log_skipped, success, transform, transform_async

T = TypeVar("T")
E = TypeVar("E")
U = TypeVar("U")
F = TypeVar("F")

# Applied to the running Success only; the Failure path never reaches it
_Step = Callable[[Success[Any]], Awaitable[Result[Any, Any]]]


class ResultChain(Generic[T, E]):
    """Immutable builder sequencing steps over a pending Result.

    Args:
        source: A Result, or an awaitable resolving to one. An exception
            raised while awaiting the source becomes a Failure. A coroutine
            source created inside a running event loop is scheduled as a
            task right away; outside a loop it is held until the first
            `run()`, and Python warns that it was never awaited if that
            `run()` never happens.
    """

    __slots__ = ("_factory", "_settled", "_task")

    def __init__(self, source: Result[T, E] | Awaitable[Result[T, E]]) -> None:
        self._factory: Callable[[], Awaitable[Result[T, E]]] | None
        self._settled: Result[T, E] | None
        self._task: asyncio.Future[Result[T, E]] | None = None
        if isinstance(source, Result):
            self._factory, self._settled = None, source
        else:
            if inspect.iscoroutine(source) and _running_loop() is not None:
                source = asyncio.ensure_future(source)
            self._factory, self._settled = (lambda: source), None

    @classmethod
    def _deferred(cls, factory: Callable[[], Awaitable[Result[U, F]]]) -> ResultChain[U, F]:
        chain: ResultChain[U, F] = cls.__new__(cls)
        chain._factory, chain._settled, chain._task = factory, None, None
        return chain

    # ─── Step Operators ──────────────────────────────────────────────

    def map(self, fn: Callable[[T], Any]) -> ResultChain[Any, Any]:
        """Transform the success value; awaitable and Result returns are absorbed by transform()."""
        return self._then("map", fn, lambda current: transform(current, fn))

    def map_async(self, fn: Callable[[T], Awaitable[Any]]) -> ResultChain[Any, Any]:
        """Same as map(), named for awaitable-returning steps."""
        return self._then("map_async", fn, lambda current: transform_async(current, fn))

    def ensure(self, predicate: Callable[[T], bool | Awaitable[bool]], error: F) -> ResultChain[T, E | F]:
        """Keep the value when predicate holds, otherwise fail with `error`.

        The same `error` value is used for every failing input. A predicate
        that raises fails the chain with the raised exception.
        """
        async def check(current: Success[T]) -> Result[T, Any]:
            try:
                passed = predicate(current.data)
                if inspect.isawaitable(passed):
                    passed = await passed
            except Exception as exc:
                return absorb(exc, predicate)
            return current if passed else Failure(error)

        return self._then("ensure", predicate, check)

    def chain(self, fn: Callable[[T], Result[U, F]]) -> ResultChain[U, E | F]:
        """Apply a Result-returning step (flat_map)."""
        async def bind(current: Success[T]) -> Result[Any, Any]:
            try:
                outcome = fn(current.data)
            except Exception as exc:
                return absorb(exc, fn)
            return _require_result(outcome, fn)

        return self._then("chain", fn, bind)

    def chain_async(self, fn: Callable[[T], Awaitable[Result[U, F]]]) -> ResultChain[U, E | F]:
        """Apply an awaitable Result-returning step."""
        async def bind(current: Success[T]) -> Result[Any, Any]:
            try:
                outcome = fn(current.data)
                if inspect.isawaitable(outcome):
                    outcome = await outcome
            except Exception as exc:
                return absorb(exc, fn)
            return _require_result(outcome, fn)

        return self._then("chain_async", fn, bind)

    # ─── Terminal ────────────────────────────────────────────────────

    async def run(self) -> Result[T, E]:
        """Resolve the chain.

        The first resolution is memoised: later calls, and chains branched
        from this one, reuse it instead of re-running the steps. An
        evaluation that was cancelled, or that belongs to another event
        loop, is discarded and started again.
        """
        if self._settled is not None:
            return self._settled
        task = self._task
        if task is not None and task.done() and not task.cancelled():
            self._settled = task.result()
            return self._settled
        if task is None or task.done() or task.get_loop() is not asyncio.get_running_loop():
            self._task = task = asyncio.ensure_future(self._resolve())
        settled = await asyncio.shield(task)
        self._settled = settled
        return settled

    async def _resolve(self) -> Result[T, E]:
        assert self._factory is not None
        try:
            outcome = await self._factory()
        except Exception as exc:
            return absorb(exc, "ResultChain source")  # type: ignore[return-value]
        except asyncio.CancelledError as exc:
            # Only our own cancellation propagates; a cancelled source is a failure
            current = asyncio.current_task()
            if current is not None and current.cancelling():
                raise
            return absorb(exc, "ResultChain source")  # type: ignore[arg-type,return-value]
        return _require_result(outcome, "ResultChain source")

    def _then(self, op: str, fn: object, step: _Step) -> ResultChain[Any, Any]:
        async def advance() -> Result[Any, Any]:
            current = await self.run()
            if not isinstance(current, Success):
                log_skipped(op, fn)
                return current
            return await step(current)

        return ResultChain._deferred(advance)

    def __repr__(self) -> str:
        return f"ResultChain({self._settled!r})" if self._settled is not None else "ResultChain(<pending>)"


def begin(value: T) -> ResultChain[T, Any]:
    """Start a chain from a plain value (wrapped as Success)."""
    return ResultChain(success(value))


def _require_result(outcome: object, step: object) -> Result[Any, Any]:
    if is_result(outcome):
        return outcome
    if inspect.iscoroutine(outcome):
        outcome.close()
    return absorb(TypeError(f"{describe(step)} returned {type(outcome).__name__}, expected a Result"), step)


def _running_loop() -> asyncio.AbstractEventLoop | None:
    try:
        return asyncio.get_running_loop()
    except RuntimeError:
        return None
