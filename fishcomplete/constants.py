"""Shared constants for fishcomplete."""

import os
from pathlib import Path

__all__ = [
    "BASH_COMPLETION_SCRIPTS",
    "CONFIG_FILE",
    "CONFIG_SECTION",
    "DEFAULT_BASH_COMMAND",
    "DEFAULT_PRIMARY_COMMAND",
    "DEFAULT_SENTINEL_PATTERN",
    "PARENT_COMMANDS",
]

_xdg_config_home = Path(os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config")
CONFIG_FILE = _xdg_config_home / "fishcomplete" / "config.toml"
CONFIG_SECTION = "fishcomplete"

DEFAULT_PRIMARY_COMMAND = "fish"
DEFAULT_BASH_COMMAND = "bash"

# Leading "*" asks some hosts (eg: eshell) to run the external command literally
DEFAULT_SENTINEL_PATTERN = r"^\s*\*"

# Commands taking another command as argument, with their options expecting a value.
# fish's `complete -C` has no notion of sub-commands for these.
PARENT_COMMANDS: dict[str, frozenset[str]] = {
    "sudo": frozenset({"-u", "-g", "-C", "-D", "-p", "-R", "-r", "-t", "-T", "-U", "--user", "--group", "--chdir", "--prompt", "--role", "--type"}),
    "env": frozenset({"-u", "-C", "-S", "--unset", "--chdir", "--split-string"}),
}

# Looked up in order, the first readable one is sourced by the bash backend
BASH_COMPLETION_SCRIPTS = (
    "/usr/share/bash-completion/bash_completion",
    "/usr/local/share/bash-completion/bash_completion",
    "/opt/homebrew/share/bash-completion/bash_completion",
    "/etc/bash_completion",
)
