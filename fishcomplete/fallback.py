"""Decide between the primary and the secondary backend results."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .backends.base import NullBackend, SecondaryBackend
from .logging_setup import get_logger
from .models import BackendResult

if TYPE_CHECKING:
    import logging

    from .config import Settings

__all__ = ["FallbackCoordinator", "unescape"]


def unescape(candidate: str) -> str:
    """Remove backslash escapes.

    The host escapes inserted text itself, leaving bash's escapes in would
    double them.
    """
    return candidate.replace("\\", "")


class FallbackCoordinator:
    """Runs the secondary backend before, after or instead of the primary one.

    | prefer_fallback | fallback_enabled | primary poor | result                     |
    |-----------------|------------------|--------------|----------------------------|
    | yes             | any              | any          | secondary if any, primary  |
    | no              | yes              | yes          | secondary if any, primary  |
    | no              | yes              | no           | primary                    |
    | no              | no               | any          | primary                    |

    "poor" means empty or looking like plain file names.
    """

    def __init__(self, secondary: SecondaryBackend | None = None, log: logging.Logger | None = None) -> None:
        self.secondary = secondary or NullBackend()
        self.log = log or get_logger("fallback")

    def should_try_secondary(self, primary: BackendResult, settings: Settings) -> bool:
        """Tell if the decision table asks for the secondary backend."""
        if settings.prefer_fallback:
            return True
        return settings.fallback_enabled and (primary.is_empty or primary.looks_like_files)

    def query_secondary(self, prompt: str) -> BackendResult:
        """Ask the secondary backend, an unavailable backend gives an empty result."""
        if not self.secondary.is_available():
            self.log.debug("secondary backend %s unavailable, skipped", self.secondary.name)
            return BackendResult(source=self.secondary.name)
        response = self.secondary.complete(prompt, len(prompt), log=self.log)
        if response is None:
            return BackendResult(source=self.secondary.name)
        candidates = [unescape(candidate) for candidate in response[2]]
        return BackendResult(candidates=candidates, source=self.secondary.name)

    def resolve(self, prompt: str, primary: BackendResult, settings: Settings) -> BackendResult:
        """Return the final result for `prompt`.

        Args:
            prompt: The normalized prompt
            primary: The classified primary result
            settings: The current settings

        Returns:
            The retained result. Its `looks_like_files` decides between
            literal candidates and generic file completion.
        """
        if not self.should_try_secondary(primary, settings):
            return primary
        secondary = self.query_secondary(prompt)
        if secondary.is_empty:
            self.log.debug("secondary backend had nothing, keeping %s result", primary.source)
            return primary
        self.log.debug("using %d candidates from %s", len(secondary.candidates), secondary.source)
        return secondary
