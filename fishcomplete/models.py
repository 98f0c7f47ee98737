"""Common types shared by the completion pipeline."""

import os
from dataclasses import dataclass, field
from enum import IntEnum

__all__ = [
    "BackendResult",
    "CompletionOutcome",
    "ExitCode",
    "FishCompleteError",
    "LiteralCandidates",
    "SpawnError",
    "UseFileCompletion",
    "looks_like_files",
]


class FishCompleteError(Exception):
    """Used for errors which already triggered logging."""


class SpawnError(OSError):
    """An external executable could not be found or started."""

    def __init__(self, executable: str, reason: str = "") -> None:
        super().__init__(f"cannot run {executable}" + (f": {reason}" if reason else ""))
        self.executable = executable
        self.reason = reason


class ExitCode(IntEnum):
    """Exit codes of the command line tool."""

    SUCCESS = 0
    USAGE_ERROR = 1
    CONFIG_ERROR = 2


def looks_like_files(candidates: list[str]) -> bool:
    """Tell if the first candidate names an existing path.

    A shell hands back plain file names when it has nothing smarter to offer,
    so this is used as a "low quality result" signal.
    """
    if not candidates:
        return False
    return os.path.exists(os.path.expanduser(candidates[0]))


@dataclass
class BackendResult:
    """Ordered candidates produced by one backend."""

    candidates: list[str] = field(default_factory=list)
    source: str = "primary"
    descriptions: list[str] = field(default_factory=list)

    @property
    def looks_like_files(self) -> bool:
        """True if the first candidate is an existing filesystem path."""
        return looks_like_files(self.candidates)

    @property
    def is_empty(self) -> bool:
        """True when the backend produced nothing."""
        return not self.candidates

    def described(self) -> list[tuple[str, str]]:
        """Return (candidate, description) pairs, description may be empty."""
        descriptions = self.descriptions + [""] * (len(self.candidates) - len(self.descriptions))
        return list(zip(self.candidates, descriptions, strict=False))


@dataclass(frozen=True)
class UseFileCompletion:
    """The host should run its generic file & directory completion."""


@dataclass(frozen=True)
class LiteralCandidates:
    """The host should offer these exact strings, in order."""

    candidates: tuple[str, ...] = ()


CompletionOutcome = UseFileCompletion | LiteralCandidates
