"""
Constructors for already-settled operations.

Bridges plain values, ready Results and exception-raising coroutines into
LazyCoroResult so they can be fed to some(), none(), retry() and always().
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Never

from kungfu import Error, LazyCoroResult, Ok, Result

from .._types import Operation


def pure[T](value: T) -> Operation[T, Never]:
    """
    Operation that succeeds with ``value``.

    Example:
        from eventual import lift as L

        cached = L.pure(User(id=42))
        result = await cached  # Ok(User(id=42))
    """
    return LazyCoroResult.pure(value)


def fail[E](error: E) -> Operation[Never, E]:
    """
    Operation that fails with ``error``. Dual of pure().

    NOTE: Return type Operation[Never, E] means "never produces a value".
    """
    return Error(error).to_async()


def from_result[T, E](value: Result[T, E]) -> Operation[T, E]:
    """
    Lift an already-computed Result into an operation.

    NOTE: This is NOT lazy, the result is already computed.
    """
    async def run() -> Result[T, E]:
        return value

    return LazyCoroResult(run)


def catching_async[T, E](
    thunk: Callable[[], Awaitable[T]],
    *,
    on_error: Callable[[Exception], E],
) -> Operation[T, E]:
    """
    Run an async thunk, turning a raised exception into Error.

    **When to use:** Feeding exception-based code (third-party clients,
    legacy coroutines) to the combinators, which only treat Error as failure.

    Example:
        from eventual import lift as L

        def fetch(url: str) -> Operation[bytes, str]:
            return L.catching_async(
                lambda: client.get(url),
                on_error=lambda e: f"{url}: {e}",
            )

    NOTE: Catches all Exception subclasses. Each await of the operation
          runs the thunk again.
    """
    async def run() -> Result[T, E]:
        try:
            return Ok(await thunk())
        except Exception as exc:
            return Error(on_error(exc))

    return LazyCoroResult(run)


__all__ = (
    "pure",
    "fail",
    "from_result",
    "catching_async",
)
