"""
Lift helpers.

    from eventual import lift as L

    ready = L.pure(42)
    broken = L.fail("unreachable")
    guarded = L.catching_async(lambda: client.get(url), on_error=str)
"""

from __future__ import annotations

from . import up
from .up import catching_async, fail, from_result, pure

__all__ = (
    # Namespace
    "up",
    # Up
    "pure",
    "fail",
    "from_result",
    "catching_async",
)
