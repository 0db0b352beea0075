"""
Retry policy
============

Configuration for retry(): retry budget, per-attempt timeout schedule and
optional pause between attempts.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

from .._types import Timeout, TimeoutSpec
from ..time.timeout import effective_timeout


# BackoffStrategy = (attempt_index, reason) -> delay_seconds
type BackoffStrategy[E] = Callable[[int, E], float]


def _fixed_backoff[E](delay: float) -> BackoffStrategy[E]:
    """Same pause before every retry."""
    def strategy(attempt: int, reason: E) -> float:
        _ = (attempt, reason)
        return delay
    return strategy


def _exponential_backoff[E](
    initial: float,
    multiplier: float = 2.0,
    max_delay: float = 60.0,
) -> BackoffStrategy[E]:
    """Pause grows: initial * multiplier^attempt (capped at max_delay)."""
    def strategy(attempt: int, reason: E) -> float:
        _ = reason
        return min(initial * (multiplier ** attempt), max_delay)
    return strategy


def timeouts_of(spec: TimeoutSpec) -> tuple[Timeout, ...]:
    """Flatten a single timeout or a sequence of them into a tuple."""
    if spec is None:
        return ()
    if isinstance(spec, Sequence):
        return tuple(spec)
    return (spec,)


class TimeoutSchedule:
    """
    Cursor over per-attempt timeouts.

    Timeouts are consumed from the tail. When the schedule runs dry the
    last timeout taken keeps applying, so a single duration bounds every
    attempt.

    Example:
        schedule = TimeoutSchedule([1.0, 2.0, 5.0])
        schedule.next()  # 5.0
        schedule.next()  # 2.0
        schedule.next()  # 1.0
        schedule.next()  # 1.0
    """

    __slots__ = ("_pending", "_current")

    def __init__(self, timeouts: Iterable[Timeout] = ()) -> None:
        self._pending = list(timeouts)
        self._current: Timeout = None

    def next(self) -> float | None:
        """Timeout for the next attempt; None means no timeout."""
        if self._pending:
            self._current = self._pending.pop()
        return effective_timeout(self._current)

    def __repr__(self) -> str:
        return f"TimeoutSchedule(pending={self._pending!r}, current={self._current!r})"


@dataclass(frozen=True, slots=True)
class RetryPolicy[E]:
    """
    Retry configuration.

    ``retries`` counts attempts after the first one, so a policy runs at
    most ``retries + 1`` attempts.
    """

    retries: int = 0
    timeouts: tuple[Timeout, ...] = ()
    backoff: BackoffStrategy[E] | None = None

    def __post_init__(self) -> None:
        if self.retries < 0:
            raise ValueError("RetryPolicy.retries must be >= 0")
        for seconds in self.timeouts:
            if seconds is not None and seconds < 0.0:
                raise ValueError("RetryPolicy.timeouts must be >= 0")

    @property
    def max_attempts(self) -> int:
        return self.retries + 1

    @classmethod
    def within(cls, timeout: TimeoutSpec = None, retries: int | None = 0) -> RetryPolicy[E]:
        """Per-attempt timeout(s) and retry budget, no pause between attempts."""
        return cls(retries=retries or 0, timeouts=timeouts_of(timeout))

    @classmethod
    def fixed(
        cls,
        retries: int,
        delay_seconds: float = 0.0,
        timeout: TimeoutSpec = None,
    ) -> RetryPolicy[E]:
        """Same pause before every retry."""
        if delay_seconds < 0.0:
            raise ValueError("delay_seconds must be >= 0")
        return cls(retries=retries, timeouts=timeouts_of(timeout), backoff=_fixed_backoff(delay_seconds))

    @classmethod
    def exponential(
        cls,
        retries: int,
        initial: float = 0.1,
        multiplier: float = 2.0,
        max_delay: float = 60.0,
        timeout: TimeoutSpec = None,
    ) -> RetryPolicy[E]:
        """Back off more with each failed attempt."""
        if initial < 0.0:
            raise ValueError("initial must be >= 0")
        if multiplier < 1.0:
            raise ValueError("multiplier must be >= 1.0")
        if max_delay < initial:
            raise ValueError("max_delay must be >= initial")
        return cls(
            retries=retries,
            timeouts=timeouts_of(timeout),
            backoff=_exponential_backoff(initial, multiplier, max_delay),
        )

    def schedule(self) -> TimeoutSchedule:
        """Fresh timeout cursor for one run."""
        return TimeoutSchedule(self.timeouts)

    def pause(self, attempt: int, reason: E) -> float:
        """Seconds to wait before the attempt after ``attempt``."""
        if self.backoff is None:
            return 0.0
        return self.backoff(attempt, reason)


__all__ = ("BackoffStrategy", "RetryPolicy", "TimeoutSchedule", "timeouts_of")
