"""Prompt to candidates resolution, and the hooks used by hosts.

A host (editor, REPL...) activates the pipeline once, keeping the returned
`Activation`, then calls `Activation.complete()` each time completion is
requested::

    activation = activate(host)
    outcome = activation.complete()
    ...
    previous = deactivate(activation)

`complete()` returns `UseFileCompletion` when the host should run its own
file name completion, else `LiteralCandidates`.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from .backends import FishBackend, SecondaryBackend, get_secondary_backend
from .config import Settings
from .fallback import FallbackCoordinator
from .logging_setup import get_logger
from .models import BackendResult, CompletionOutcome, FishCompleteError, LiteralCandidates, UseFileCompletion
from .normalizer import normalize

if TYPE_CHECKING:
    import logging

__all__ = ["Activation", "CompletionPipeline", "Host", "activate", "deactivate"]


class Host(Protocol):
    """What the pipeline needs from the host application."""

    def get_current_input_line(self) -> str:
        """Return the input line up to the cursor."""

    def is_remote_context(self) -> bool:
        """Return True if the working directory is on a remote machine."""

    def existing_file_completion_fallback(self) -> CompletionOutcome:
        """Run the completion in place before the pipeline was activated."""


class CompletionPipeline:
    """Normalize, ask fish, classify, then let the fallback coordinator decide."""

    def __init__(
        self,
        settings: Settings,
        primary: FishBackend | None = None,
        secondary: SecondaryBackend | None = None,
        log: logging.Logger | None = None,
    ) -> None:
        """Initialize.

        Args:
            settings: The settings to apply
            primary: The primary backend, built from settings if not given
            secondary: The secondary backend, built from settings if not given
            log: Logger to use, a "pipeline" logger by default
        """
        self.settings = settings
        self.log = log or get_logger("pipeline")
        self.primary = primary or FishBackend(settings.command_path)
        self.coordinator = FallbackCoordinator(
            secondary if secondary is not None else get_secondary_backend(settings.bash_path),
            self.log,
        )

    def resolve(self, raw_prompt: str) -> BackendResult:
        """Return the retained backend result for `raw_prompt`, descriptions included."""
        prompt = normalize(raw_prompt, self.settings.sentinel_pattern)
        self.log.debug("completing %r as %r", raw_prompt, prompt)
        primary = self.primary.complete(prompt, log=self.log)
        return self.coordinator.resolve(prompt, primary, self.settings)

    def complete(self, raw_prompt: str) -> CompletionOutcome:
        """Complete the line typed so far.

        Args:
            raw_prompt: The input line up to the cursor

        Returns:
            UseFileCompletion if the candidates are file names, else the
            candidates, right-trimmed so the host does not escape trailing spaces
        """
        result = self.resolve(raw_prompt)
        if result.looks_like_files:
            return UseFileCompletion()
        return LiteralCandidates(tuple(candidate.rstrip() for candidate in result.candidates))


@dataclass
class Activation:
    """Handle returned by `activate`, consumed by `deactivate`.

    Attributes:
        host: The host the pipeline completes for
        pipeline: The completion pipeline
        previous: The completion mechanism active before activation
        delegate: Always use `previous` (primary executable missing)
    """

    host: Host
    pipeline: CompletionPipeline
    previous: Callable[[], CompletionOutcome]
    delegate: bool = False
    active: bool = field(default=True)

    def complete(self) -> CompletionOutcome:
        """Complete the host's current input line.

        Remote working directories are delegated to the previous mechanism:
        a local shell can't see the remote file system.

        Raises:
            FishCompleteError: If the handle was deactivated
        """
        if not self.active:
            self.pipeline.log.error("completion requested on a deactivated pipeline")
            raise FishCompleteError("pipeline is not active")
        if self.delegate:
            return self.previous()
        if self.host.is_remote_context():
            self.pipeline.log.debug("remote context, using the previous completion")
            return self.previous()
        return self.pipeline.complete(self.host.get_current_input_line())


def activate(
    host: Host,
    settings: Settings | None = None,
    log: logging.Logger | None = None,
    *,
    pipeline: CompletionPipeline | None = None,
) -> Activation:
    """Install the pipeline for `host`.

    Args:
        host: The host application
        settings: The settings, looked up from PATH when not given
        log: Logger to use
        pipeline: A ready made pipeline, overrides `settings`

    Returns:
        The activation handle, remembering the host's previous completion
    """
    log = log or get_logger("pipeline")
    if pipeline is None:
        pipeline = CompletionPipeline(settings or Settings.default(), log=log)
    delegate = not pipeline.primary.is_available()
    if delegate:
        log.warning("fish executable not found, completion falls back to the previous mechanism")
    return Activation(host=host, pipeline=pipeline, previous=host.existing_file_completion_fallback, delegate=delegate)


def deactivate(activation: Activation) -> Callable[[], CompletionOutcome]:
    """Uninstall the pipeline, returning the completion mechanism to restore."""
    activation.active = False
    return activation.previous
