"""Runtime helpers - violation dispatch."""

from .dispatch import notify, resolve_mode

__all__ = [
    "notify",
    "resolve_mode",
]
