from .policy import BackoffStrategy, RetryPolicy, TimeoutSchedule, timeouts_of
from .retry import retry, retryM

__all__ = (
    # Policies
    "BackoffStrategy",
    "RetryPolicy",
    "TimeoutSchedule",
    "timeouts_of",
    # Retry
    "retry",
    "retryM",
)
