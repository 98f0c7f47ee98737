"""Secondary backend interface."""

from abc import ABC, abstractmethod
from logging import Logger

DynamicCompletion = tuple[int, int, list[str]]


class SecondaryBackend(ABC):
    """A completion engine asked with a whole line and a cursor position.

    Availability is checked once, when the backend is built, so callers only
    query `is_available()` instead of probing the system each time.
    """

    name = "secondary"

    @abstractmethod
    def is_available(self) -> bool:
        """Return True if the backend can be used."""

    @abstractmethod
    def complete(self, line: str, point: int, *, log: Logger) -> DynamicCompletion | None:
        """Return (start, end, candidates) for `line` at `point`.

        Candidates may contain backslash escaped characters.
        None means the backend could not run.

        Args:
            line: The input line
            point: Cursor offset in `line`
            log: Logger to use for this operation
        """


class NullBackend(SecondaryBackend):
    """Stands for a secondary backend which is not installed."""

    name = "none"

    def is_available(self) -> bool:
        return False

    def complete(self, line: str, point: int, *, log: Logger) -> DynamicCompletion | None:
        log.debug("No secondary backend available")
        return None
