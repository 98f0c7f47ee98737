"""Primary backend: fish's `complete -C`."""

import shlex
from logging import Logger

from ..classifier import classify
from ..models import BackendResult, SpawnError
from ..process import invoke


def completion_args(prompt: str) -> list[str]:
    """Arguments asking fish to list the completions of `prompt`."""
    return ["-c", f"complete -C{shlex.quote(prompt)}"]


class FishBackend:
    """Lists completions by running `fish -c "complete -C<prompt>"`."""

    name = "fish"

    def __init__(self, command_path: str | None, cwd: str | None = None) -> None:
        """Initialize.

        Args:
            command_path: Resolved fish executable, None when not installed
            cwd: Working directory used to run fish
        """
        self.command_path = command_path
        self.cwd = cwd

    def is_available(self) -> bool:
        """Return True if the executable was found."""
        return self.command_path is not None

    def complete(self, prompt: str, *, log: Logger) -> BackendResult:
        """Return the candidates for an already normalized prompt.

        Never raises: a missing or broken executable gives an empty result.
        """
        if self.command_path is None:
            log.debug("fish not found, no primary completion")
            return BackendResult(source=self.name)
        try:
            output = invoke(self.command_path, completion_args(prompt), log=log, cwd=self.cwd)
        except SpawnError as e:
            log.warning("%s", e)
            return BackendResult(source=self.name)
        return classify(output, source=self.name)
