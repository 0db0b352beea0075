"""
Retry combinators
=================

Run a factory again and again, each attempt racing its own timeout, until it
succeeds or the retry budget is spent.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from kungfu import Error, LazyCoroResult, Ok, Result

from .._errors import TimeoutError
from .._helpers import identity
from .._types import Factory, Thunk, TimeoutSpec
from ..lift.up import pure
from ..log import ReasonLog
from ..time.timeout import race_deadline
from .policy import RetryPolicy

log = logging.getLogger(__name__)


# ============================================================================
# Generic combinator (extract + wrap pattern)
# ============================================================================


def retryM[M, T, E, Raw](
    interp: Thunk[Raw],
    *,
    extract: Callable[[Raw], Result[T, E]],
    on_timeout: Callable[[float], Raw],
    on_exhausted: Callable[[ReasonLog[E]], Raw],
    wrap: Callable[[Thunk[Raw]], M],
    policy: RetryPolicy[E],
) -> M:
    """
    Generic retry combinator.

    Each attempt calls ``interp`` afresh and races it against the next
    timeout of the policy's schedule. Ok ends the run at once. Every Error
    reason (timeouts included, via ``on_timeout``) is recorded; when the
    budget is spent ``on_exhausted`` builds the outcome from all of them,
    first attempt at index 0.

    Args:
        interp: Callable returning Coroutine[Raw], invoked once per attempt
        extract: Function to extract Result[T, E] from Raw for retry logic
        on_timeout: Raw outcome of an attempt that ran out of time
        on_exhausted: Raw outcome once every attempt failed
        wrap: Constructor to wrap thunk back into monad M
        policy: Retry budget, timeout schedule and backoff

    Example (LazyCoroResult):
        retryM(
            lcr,
            extract=identity,
            on_timeout=lambda s: Error(TimeoutError(s)),
            on_exhausted=Error,
            wrap=LazyCoroResult,
            policy=RetryPolicy.within(0.5, retries=2),
        )

    NOTE: Attempts run one after another, never in parallel. A timed out
          attempt is not cancelled, it is merely out-raced.
    """

    async def run() -> Raw:
        schedule = policy.schedule()
        reasons = ReasonLog[E]()

        for attempt in range(policy.max_attempts):
            seconds = schedule.next()
            raw = await race_deadline(interp, seconds, on_timeout)

            match extract(raw):
                case Ok(_):
                    return raw
                case Error(reason):
                    reasons.record(reason)
                    log.debug("retry(): attempt %d/%d failed: %r", attempt + 1, policy.max_attempts, reason)

            if attempt + 1 < policy.max_attempts:
                pause = policy.pause(attempt, reasons[-1])
                if pause > 0.0:
                    await asyncio.sleep(pause)

        log.debug("retry(): all %d attempts failed", policy.max_attempts)
        return on_exhausted(reasons)

    return wrap(run)


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def retry[T, E](
    factory: Factory[T, E] | T,
    timeout: TimeoutSpec = None,
    attempts: int | None = 0,
    *,
    policy: RetryPolicy[E | TimeoutError] | None = None,
) -> LazyCoroResult[T, ReasonLog[E | TimeoutError]]:
    """
    Try ``factory`` up to ``attempts + 1`` times.

    ``timeout`` bounds each attempt: a number applies to every attempt, a
    sequence is consumed from its end, one entry per attempt. None, 0 and
    infinity disable the timeout. Fails with the reason of every attempt,
    in attempt order.

    A ``policy`` replaces ``timeout`` and ``attempts`` when given.

    A non-callable ``factory`` is not work to retry; it resolves as-is.

    Example:
        fetched = retry(lambda: fetch_user(42), timeout=0.5, attempts=2)
        match await fetched:
            case Ok(user): ...
            case Error(reasons): ...  # up to three reasons
    """
    if not callable(factory):
        log.debug("retry(): %r is not callable, resolving it as a value", factory)
        return pure(factory)

    if policy is None:
        policy = RetryPolicy.within(timeout, retries=attempts)

    async def invoke() -> Result[T, E | TimeoutError]:
        return await factory()

    def on_timeout(seconds: float) -> Result[T, E | TimeoutError]:
        return Error(TimeoutError(seconds))

    return retryM(
        invoke,
        extract=identity,
        on_timeout=on_timeout,
        on_exhausted=Error,
        wrap=LazyCoroResult,
        policy=policy,
    )


__all__ = (
    "retryM",
    "retry",
)
