"""Internal helpers for eventual.

Common functions used across multiple combinator modules.
These are not part of the public API but can be used for creating custom monads."""

from __future__ import annotations

import asyncio
import logging
import typing
from collections.abc import Iterable

from kungfu import Error, Ok, Result

log = logging.getLogger(__name__)

# Tasks that lost a race but are still running. asyncio keeps only weak
# references to tasks, so losers live here until they finish.
_background: set[asyncio.Task[typing.Any]] = set()

# Identity function
def identity[T](x: T) -> T:
    """Identity function: returns its argument unchanged."""
    return x

# Result helpers
def flip[T, E](r: Result[T, E]) -> Result[E, T]:
    """Swap Ok and Error, keeping the payload."""
    match r:
        case Ok(value):
            return Error(value)
        case Error(err):
            return Ok(err)

def is_result(value: object) -> bool:
    """True for kungfu Ok / Error instances."""
    return isinstance(value, (Ok, Error))

# Task helpers
def _reap(task: asyncio.Task[typing.Any]) -> None:
    _background.discard(task)
    if task.cancelled():
        return
    exc = task.exception()
    if exc is not None:
        log.debug("Background operation %r raised after losing its race", task, exc_info=exc)

def detach(tasks: Iterable[asyncio.Task[typing.Any]]) -> None:
    """
    Let unfinished tasks run to completion on their own.

    Combinators never cancel caller operations. Their outcome is discarded
    once the combinator has settled.
    """
    for task in tasks:
        if task.done():
            continue
        _background.add(task)
        task.add_done_callback(_reap)

__all__ = (
    # Identity
    "identity",
    # Result helpers
    "flip",
    "is_result",
    # Task helpers
    "detach",
)
