"""
ReasonLog - ordered accumulator of failure reasons
==================================================
"""

from __future__ import annotations


class ReasonLog[E](list[E]):
    """
    Failure reasons collected during one run of a combinator.

    Plain list underneath, so it compares equal to a list with the same
    reasons in the same order. Order is settlement order: the reason that
    arrived first sits at index 0.
    """

    def record(self, reason: E, /) -> None:
        """Append one reason in place. The only mutation combinators perform."""
        self.append(reason)

    def __repr__(self) -> str:
        return f"ReasonLog({list.__repr__(self)})"


__all__ = ("ReasonLog",)
