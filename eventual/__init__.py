"""
Combinators for racing and retrying async operations.

Layered on kungfu's LazyCoroResult: an operation is a lazy coroutine that
settles into Ok(value) or Error(reason).

- some: first success wins, fail only if all fail
- none: negation of some
- retry: repeat a factory with per-attempt timeouts
- always: run a callback on either outcome

Architecture:
- Generic combinators (*M functions) work with any monad via extract + wrap pattern
- Sugar functions for LazyCoroResult (no suffix)
"""

# Core types
from ._types import Factory, Operation, Predicate, Thunk, Timeout, TimeoutSpec

# Internal helpers (for custom monads)
from . import _helpers

# Reason accumulator
from .log import ReasonLog

# Lift helpers
from . import lift
from .lift import catching_async, fail, from_result, pure

# Concurrency
from .concurrency import none, some, someM

# Control flow
from .control import BackoffStrategy, RetryPolicy, TimeoutSchedule, retry, retryM

# Time operations
from .time import race_deadline, timeout, timeoutM

# Transform
from .transform import always, always_async

# Errors
from ._errors import NotAnOperationError, TimeoutError

__all__ = (
    # Types
    "Factory",
    "Operation",
    "Predicate",
    "Thunk",
    "Timeout",
    "TimeoutSpec",
    # Internal helpers (for custom monads)
    "_helpers",
    # Reasons
    "ReasonLog",
    # Lift
    "lift",
    "catching_async",
    "fail",
    "from_result",
    "pure",
    # Concurrency
    "none",
    "some",
    "someM",
    # Control
    "BackoffStrategy",
    "RetryPolicy",
    "TimeoutSchedule",
    "retry",
    "retryM",
    # Time
    "race_deadline",
    "timeout",
    "timeoutM",
    # Transform
    "always",
    "always_async",
    # Errors
    "NotAnOperationError",
    "TimeoutError",
)
