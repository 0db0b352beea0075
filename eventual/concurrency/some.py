"""
Some combinators
================

First success wins; fail only when every operation failed.
"""

from __future__ import annotations

import asyncio
import logging
import typing
from collections.abc import Callable, Iterable

from kungfu import Error, LazyCoroResult, Ok, Result

from .._errors import NotAnOperationError
from .._helpers import detach, identity
from .._types import Predicate, Thunk
from ..log import ReasonLog

log = logging.getLogger(__name__)


def _validated[Op](operations: Iterable[Op] | None, is_operation: Predicate[object]) -> tuple[Op, ...]:
    if operations is None:
        return ()
    collected = tuple(operations)
    for index, candidate in enumerate(collected):
        if not is_operation(candidate):
            raise NotAnOperationError(index, candidate)
    return collected


def _is_lazy_coro_result(candidate: object) -> bool:
    return isinstance(candidate, LazyCoroResult)


# ============================================================================
# Generic combinator (extract + wrap pattern)
# ============================================================================


def someM[M, T, E, Raw](
    operations: Iterable[Thunk[Raw]] | None,
    *,
    extract: Callable[[Raw], Result[T, E]],
    on_empty: Callable[[], Raw],
    on_all_failed: Callable[[ReasonLog[E]], Raw],
    wrap: Callable[[Thunk[Raw]], M],
    is_operation: Predicate[object] = callable,
) -> M:
    """
    Generic some combinator.

    Start every operation at once and return the first raw value whose
    extracted Result is Ok. Error reasons are recorded in settlement order;
    once all operations have failed, ``on_all_failed`` builds the outcome
    from the full log.

    Validation happens here, at call time: a candidate rejected by
    ``is_operation`` raises NotAnOperationError before anything is started.

    Args:
        operations: Thunks returning Coroutine[Raw]; None counts as empty
        extract: Function to extract Result[T, E] from Raw
        on_empty: Outcome for an empty input (vacuous success)
        on_all_failed: Outcome once every operation failed
        wrap: Constructor to wrap thunk back into monad M
        is_operation: Accepts genuine operations

    NOTE: Losers are never cancelled. They keep running in the background
          and their outcome is ignored.
    """
    interps = _validated(operations, is_operation)

    async def run() -> Raw:
        if not interps:
            return on_empty()

        reasons = ReasonLog[E]()
        tasks = [asyncio.create_task(i()) for i in interps]
        try:
            for settled in asyncio.as_completed(tasks):
                raw = await settled
                match extract(raw):
                    case Ok(_):
                        log.debug("some(): success after %d failure(s) of %d", len(reasons), len(tasks))
                        return raw
                    case Error(reason):
                        reasons.record(reason)
        finally:
            detach(tasks)

        log.debug("some(): all %d operations failed", len(tasks))
        return on_all_failed(reasons)

    return wrap(run)


# ============================================================================
# Sugar for LazyCoroResult
# ============================================================================


def some[T, E](
    operations: Iterable[LazyCoroResult[T, E]] | None,
) -> LazyCoroResult[T | list[typing.Never], ReasonLog[E]]:
    """
    Resolve with the first operation to succeed.

    Fails with every reason, in settlement order, only if all of them fail.
    ``some([])`` and ``some(None)`` succeed with an empty list.

    Example:
        mirrors = [fetch(url) for url in MIRRORS]
        match await some(mirrors):
            case Ok(payload): ...
            case Error(reasons): ...  # one reason per mirror
    """

    def on_empty() -> Result[list[typing.Never], ReasonLog[E]]:
        return Ok([])

    return someM(
        operations,
        extract=identity,
        on_empty=on_empty,
        on_all_failed=Error,
        wrap=LazyCoroResult,
        is_operation=_is_lazy_coro_result,
    )


__all__ = ("some", "someM")
