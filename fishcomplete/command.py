"""fishcomplete command line: complete a line the way fish would.

Usage:
    fishcomplete [--config FILE] [--debug LOGFILE] [--describe] LINE...
    fishcomplete [--config FILE] check
"""

import glob
import os
import sys

from .ansi import OutputStyles, colorize, should_colorize
from .backends import FishBackend, get_secondary_backend
from .config import Settings
from .config_loader import ConfigLoader
from .constants import CONFIG_FILE
from .logging_setup import get_logger, init_logger
from .models import CompletionOutcome, ExitCode, FishCompleteError, LiteralCandidates, UseFileCompletion
from .normalizer import tokenize
from .pipeline import CompletionPipeline, activate

__all__ = ["main"]


class CommandLineHost:
    """Host for a line given on the command line, always local."""

    def __init__(self, line: str) -> None:
        self.line = line

    def get_current_input_line(self) -> str:
        return self.line

    def is_remote_context(self) -> bool:
        return False

    def existing_file_completion_fallback(self) -> CompletionOutcome:
        return UseFileCompletion()


def complete_files(line: str) -> list[str]:
    """Generic file & directory completion of the last word of `line`.

    Directories get a trailing "/".
    """
    tokens = tokenize(line)
    word = tokens[-1] if tokens else ""
    head = word.split("/", 1)[0]
    expanded_head = os.path.expanduser(head)
    results = []
    for match in sorted(glob.glob(os.path.expanduser(word) + "*")):
        is_dir = os.path.isdir(match)
        if head.startswith("~") and match.startswith(expanded_head):
            match = head + match[len(expanded_head) :]
        results.append(match + "/" if is_dir else match)
    return results


def use_param(txt: str) -> str:
    """Check if parameter `txt` is in sys.argv.

    if found, removes it from sys.argv & returns the argument value
    """
    v = ""
    if txt in sys.argv:
        i = sys.argv.index(txt)
        if i + 1 >= len(sys.argv):
            return v
        v = sys.argv[i + 1]
        del sys.argv[i : i + 2]
    return v


def use_flag(txt: str) -> bool:
    """Remove flag `txt` from sys.argv, returning True if it was there."""
    if txt in sys.argv:
        sys.argv.remove(txt)
        return True
    return False


def print_outcome(outcome: CompletionOutcome, line: str) -> None:
    """Print one candidate per line."""
    if isinstance(outcome, LiteralCandidates):
        for candidate in outcome.candidates:
            print(candidate)
        return
    color = should_colorize(sys.stdout)
    for path in complete_files(line):
        print(colorize(path, *OutputStyles.DIRECTORY) if color and path.endswith("/") else path)


def print_described(pipeline: CompletionPipeline, line: str) -> None:
    """Print candidates with their descriptions, tab separated."""
    result = pipeline.resolve(line)
    color = should_colorize(sys.stdout)
    for candidate, description in result.described():
        candidate = candidate.rstrip()
        if description:
            print(f"{candidate}\t{colorize(description, *OutputStyles.DESCRIPTION) if color else description}")
        else:
            print(candidate)


def run_check(loader: ConfigLoader, settings: Settings, config_filename: str) -> ExitCode:
    """Report configuration problems and backends availability."""
    print(f"config: {config_filename or CONFIG_FILE}")
    for error in loader.errors:
        print(f"  error: {error}")
    primary = FishBackend(settings.command_path)
    secondary = get_secondary_backend(settings.bash_path)
    print(f"primary: {settings.command_path or 'not found'}")
    print(f"secondary: {settings.bash_path if secondary.is_available() else 'not found'}")
    print(f"fallback: {'preferred' if settings.prefer_fallback else 'enabled' if settings.fallback_enabled else 'disabled'}")
    if loader.errors or not primary.is_available():
        return ExitCode.CONFIG_ERROR
    return ExitCode.SUCCESS


def main() -> None:
    """Run the command."""
    debug_flag = use_param("--debug")
    if debug_flag:
        init_logger(filename=debug_flag, force_debug=True)
    else:
        init_logger()
    log = get_logger()

    config_filename = use_param("--config")
    describe = use_flag("--describe")
    # after "--" everything is the line to complete, "check" included
    is_check = sys.argv[1:] == ["check"]
    if "--" in sys.argv:
        sys.argv.remove("--")

    if len(sys.argv) <= 1 or sys.argv[1] in {"--help", "-h"}:
        print(__doc__.strip())
        sys.exit(ExitCode.USAGE_ERROR if len(sys.argv) <= 1 else ExitCode.SUCCESS)

    loader = ConfigLoader(log)
    try:
        settings = Settings.from_config(loader.load(config_filename))
    except FishCompleteError:
        sys.exit(ExitCode.CONFIG_ERROR)

    if is_check:
        sys.exit(run_check(loader, settings, config_filename))

    line = " ".join(sys.argv[1:])
    pipeline = CompletionPipeline(settings, log=log)
    if describe:
        print_described(pipeline, line)
    else:
        print_outcome(activate(CommandLineHost(line), log=log, pipeline=pipeline).complete(), line)
    sys.exit(ExitCode.SUCCESS)


if __name__ == "__main__":
    main()
