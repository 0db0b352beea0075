"""Timeout combinators

Race an operation against a timer without cancelling the operation."""

from __future__ import annotations

import asyncio
import math
from collections.abc import Callable

from kungfu import Error, LazyCoroResult, Result

from .._errors import TimeoutError
from .._helpers import detach
from .._types import Thunk, Timeout

def effective_timeout(seconds: Timeout) -> float | None:
    """Normalize a timeout: None, 0 and infinity all mean "no timeout"."""
    if seconds is not None and seconds < 0:
        raise ValueError(f"timeout must be >= 0, got {seconds}")
    if not seconds or math.isinf(seconds):
        return None
    return seconds

async def _expire(seconds: float | None) -> None:
    if seconds is None:
        # Never settles; the race is decided by the operation alone.
        await asyncio.get_running_loop().create_future()
    else:
        await asyncio.sleep(seconds)

async def race_deadline[Raw](
    interp: Thunk[Raw],
    seconds: Timeout,
    on_timeout: Callable[[float], Raw],
) -> Raw:
    """
    Run interp, racing it against a timer of ``seconds``.

    Returns interp's raw value when it settles first, otherwise
    ``on_timeout(seconds)``. The operation is left running in the
    background when it loses; only the timer is cancelled.
    """
    limit = effective_timeout(seconds)
    work = asyncio.create_task(interp())
    timer = asyncio.create_task(_expire(limit))
    try:
        done, _ = await asyncio.wait((work, timer), return_when=asyncio.FIRST_COMPLETED)
    finally:
        timer.cancel()
        detach((work,))

    if work in done:
        return work.result()
    if limit is None:
        raise RuntimeError("race_deadline(): internal error (unbounded timer fired)")
    return on_timeout(limit)

# Generic combinator (extract + wrap pattern)
def timeoutM[M, Raw](
    interp: Thunk[Raw],
    *,
    seconds: Timeout,
    on_timeout: Callable[[float], Raw],
    wrap: Callable[[Thunk[Raw]], M],
) -> M:
    """Generic timeout combinator. Negative ``seconds`` raise ValueError here."""
    effective_timeout(seconds)

    async def run() -> Raw:
        return await race_deadline(interp, seconds, on_timeout)

    return wrap(run)

# Sugar for LazyCoroResult
def timeout[T, E](
    interp: LazyCoroResult[T, E],
    *,
    seconds: Timeout,
) -> LazyCoroResult[T, E | TimeoutError]:
    """
    Timeout for LazyCoroResult.

    Fail with TimeoutError if the operation has not settled in time.
    The operation itself is not cancelled.
    """
    def on_timeout(limit: float) -> Result[T, E | TimeoutError]:
        return Error(TimeoutError(limit))

    return timeoutM(
        interp,
        seconds=seconds,
        on_timeout=on_timeout,
        wrap=LazyCoroResult,
    )

__all__ = ("effective_timeout", "race_deadline", "timeout", "timeoutM")
