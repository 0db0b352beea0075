"""Always combinators

Run a callback on whichever outcome an operation settles with. The result is
the callback's own outcome, the way a continuation attached to both the
success and the failure slot would behave."""

from __future__ import annotations

import inspect
import typing
from collections.abc import Awaitable, Callable

from kungfu import Error, LazyCoroResult, Ok, Result

from .._helpers import is_result

async def _settle[R](outcome: R | Result[R, typing.Any] | Awaitable[typing.Any]) -> Result[R, typing.Any]:
    # Awaitables (operations, coroutines) are adopted, then their value settled.
    if inspect.isawaitable(outcome):
        outcome = await outcome
    if is_result(outcome):
        return typing.cast(Result[R, typing.Any], outcome)
    return Ok(typing.cast(R, outcome))

def always[T, E, R](
    interp: LazyCoroResult[T, E],
    fn: Callable[[T | E], R | Result[R, typing.Any] | Awaitable[typing.Any]],
) -> LazyCoroResult[R, typing.Any]:
    """
    Call ``fn`` with the Ok value or the Error reason, exactly once.

    A plain return value becomes Ok. A returned Result is adopted as-is, and
    a returned operation or other awaitable is awaited and adopted the same
    way, so ``fn`` can decide the outcome. Exceptions raised by ``fn``
    propagate.

    Example:
        done = always(fetch(url), lambda _: spinner.stop())
    """

    async def run() -> Result[R, typing.Any]:
        match await interp():
            case Ok(value):
                return await _settle(fn(value))
            case Error(reason):
                return await _settle(fn(reason))

    return LazyCoroResult(run)

def always_async[T, E, R](
    interp: LazyCoroResult[T, E],
    fn: Callable[[T | E], Awaitable[R | Result[R, typing.Any]]],
) -> LazyCoroResult[R, typing.Any]:
    """Like always(), typed for an async callback."""
    return always(interp, fn)

__all__ = ("always", "always_async")
