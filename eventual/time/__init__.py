from .timeout import effective_timeout, race_deadline, timeout, timeoutM

__all__ = (
    # Timeout
    "effective_timeout",
    "race_deadline",
    "timeout",
    "timeoutM",
)
