"""Synchronous subprocess invocation.

Completion backends run to completion on the calling thread: the call blocks
until the child exits, there is no timeout.
"""

from __future__ import annotations

import subprocess
from typing import TYPE_CHECKING

from .models import SpawnError

if TYPE_CHECKING:
    import logging

__all__ = ["invoke"]


def invoke(executable: str, args: list[str], *, log: logging.Logger, cwd: str | None = None) -> str:
    """Run `executable` with `args` and return its standard output.

    Standard error is discarded and the exit code is ignored: garbage or
    empty output simply means "no candidates".

    Args:
        executable: Program name or path
        args: Arguments, passed as-is (no shell involved)
        log: Logger to use for this operation
        cwd: Working directory of the child, defaults to the current one

    Raises:
        SpawnError: If the executable cannot be found or started
    """
    command = [executable, *args]
    log.debug("Running %s", command)
    try:
        proc = subprocess.run(  # noqa: S603
            command,
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.DEVNULL,
            cwd=cwd,
            check=False,
        )
    except OSError as e:
        raise SpawnError(executable, e.strerror or str(e)) from e
    if proc.returncode:
        log.debug("%s exited with code %d", executable, proc.returncode)
    return proc.stdout.decode("utf-8", errors="replace")
