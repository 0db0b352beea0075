"""None combinator

The negation of some(): succeeds only when every operation failed."""

from __future__ import annotations

import typing
from collections.abc import Iterable

from kungfu import LazyCoroResult, Result

from .._helpers import flip
from ..log import ReasonLog
from .some import some

def none[T, E](
    operations: Iterable[LazyCoroResult[T, E]] | None,
) -> LazyCoroResult[ReasonLog[E], T | list[typing.Never]]:
    """
    Succeed with all failure reasons if every operation fails.

    Fails with the first success value otherwise. Validation errors from
    some() are raised as-is and are not swapped.
    """
    found = some(operations)

    async def run() -> Result[ReasonLog[E], T | list[typing.Never]]:
        return flip(await found())

    return LazyCoroResult(run)

__all__ = ("none",)
