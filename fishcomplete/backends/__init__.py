"""Completion backends.

The primary backend is fish, asked through `complete -C`. The secondary
backend answers when fish's result looks poor; it implements
`SecondaryBackend` and advertises itself through `is_available()`.
"""

from .base import NullBackend, SecondaryBackend
from .bash import BashBackend
from .fish import FishBackend

__all__ = ["BashBackend", "FishBackend", "NullBackend", "SecondaryBackend", "get_secondary_backend"]


def get_secondary_backend(bash_path: str | None) -> SecondaryBackend:
    """Return the secondary backend for a resolved bash path."""
    if bash_path:
        return BashBackend(bash_path)
    return NullBackend()
