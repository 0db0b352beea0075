from __future__ import annotations

class TimeoutError(Exception):
    """Attempt was out-raced by its timer."""

    seconds: float

    def __init__(self, seconds: float) -> None:
        self.seconds = seconds
        super().__init__(f"Timed out after {seconds}s")

class NotAnOperationError(TypeError):
    """Input collection held something that is not an operation."""

    index: int
    value: object

    def __init__(self, index: int, value: object) -> None:
        self.index = index
        self.value = value
        super().__init__(f"Only operations are accepted, got {type(value).__name__} at index {index}")

__all__ = ("NotAnOperationError", "TimeoutError")
