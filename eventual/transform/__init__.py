from .always import always, always_async

__all__ = (
    # Always
    "always",
    "always_async",
)
