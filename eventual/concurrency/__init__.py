from .none import none
from .some import some, someM

__all__ = (
    # None
    "none",
    # Some
    "some",
    "someM",
)
