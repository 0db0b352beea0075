from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from typing import Any

from kungfu import LazyCoroResult, Result


def settle_after[T, E](
    delay: float,
    result: Result[T, E],
    *,
    trace: list[str] | None = None,
    name: str = "",
) -> LazyCoroResult[T, E]:
    """Operation that sleeps ``delay`` seconds, then settles with ``result``."""

    async def run() -> Result[T, E]:
        if trace is not None:
            trace.append(f"start:{name}")
        await asyncio.sleep(delay)
        if trace is not None:
            trace.append(f"end:{name}")
        return result

    return LazyCoroResult(run)


@dataclass
class ScriptedFactory:
    """Zero-arg factory replaying ``outcomes``; the last one repeats."""

    outcomes: list[Result[Any, Any]]
    delay: float = 0.0
    calls: int = 0
    finished: list[int] = field(default_factory=list)

    def __call__(self) -> LazyCoroResult[Any, Any]:
        self.calls += 1
        attempt = self.calls
        outcome = self.outcomes[min(attempt, len(self.outcomes)) - 1]

        async def run() -> Result[Any, Any]:
            await asyncio.sleep(self.delay)
            self.finished.append(attempt)
            return outcome

        return LazyCoroResult(run)
