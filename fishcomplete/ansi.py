"""ANSI terminal color helpers.

Colors are disabled when NO_COLOR is set or the stream is not a TTY,
and forced on by FORCE_COLOR.
"""

import os
import sys
from typing import TextIO

__all__ = [
    "RESET",
    "LogStyles",
    "OutputStyles",
    "colorize",
    "make_style",
    "should_colorize",
]

_ESC = "\x1b["

RESET = f"{_ESC}0m"

BOLD = "1"
DIM = "2"

RED = "31"
YELLOW = "33"
BLUE = "34"


def should_colorize(stream: TextIO | None = None) -> bool:
    """Determine if ANSI colors should be used for the given stream.

    Args:
        stream: The output stream to check. Defaults to sys.stderr.

    Returns:
        True if colors should be used, False otherwise.
    """
    if os.environ.get("NO_COLOR"):
        return False
    if os.environ.get("FORCE_COLOR"):
        return True
    if stream is None:
        stream = sys.stderr
    return hasattr(stream, "isatty") and stream.isatty()


def colorize(text: str, *codes: str) -> str:
    """Wrap `text` in the given ANSI codes."""
    if not codes:
        return text
    return f"{_ESC}{';'.join(codes)}m{text}{RESET}"


def make_style(*codes: str) -> tuple[str, str]:
    """Return a (prefix, suffix) pair for use in log formatters."""
    if not codes:
        return ("", RESET)
    return (f"{_ESC}{';'.join(codes)}m", RESET)


class LogStyles:
    """Styles for log levels."""

    WARNING = (YELLOW, DIM)
    ERROR = (RED, DIM)
    CRITICAL = (RED, BOLD)


class OutputStyles:
    """Styles for command line output."""

    DESCRIPTION = (DIM,)
    DIRECTORY = (BLUE, BOLD)
