"""
Core type definitions for eventual.

Aliases shared by every combinator module.
"""

from __future__ import annotations

import typing
from collections.abc import Awaitable, Callable, Coroutine, Sequence

from kungfu import LazyCoroResult, Result

# ============================================================================
# Type aliases
# ============================================================================

# Predicate = function that tests a value
type Predicate[T] = Callable[[T], bool]

# Thunk = lazy computation producing Raw; the shape every *M combinator takes
type Thunk[Raw] = Callable[[], Coroutine[typing.Any, typing.Any, Raw]]

# Factory = zero-arg callable producing a fresh attempt
type Factory[T, E] = Callable[[], Awaitable[Result[T, E]]]

# Timeout = seconds; None, 0 and math.inf mean "never time out"
type Timeout = float | None

# TimeoutSpec = a single timeout or a schedule consumed tail-first
type TimeoutSpec = Timeout | Sequence[Timeout]

# ============================================================================
# Concrete type shortcuts
# ============================================================================

# Operation = what the LazyCoroResult sugar accepts
type Operation[T, E] = LazyCoroResult[T, E]

__all__ = (
    # Type aliases
    "Predicate",
    "Thunk",
    "Factory",
    "Timeout",
    "TimeoutSpec",
    # Concrete shortcuts
    "Operation",
)
