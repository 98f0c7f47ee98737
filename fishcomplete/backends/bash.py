"""Secondary backend: bash programmable completion.

bash is started non interactively, loads the bash-completion framework
when it is installed, then calls the completion function registered for
the command, the way readline would on <TAB>.
"""

from logging import Logger

from ..constants import BASH_COMPLETION_SCRIPTS
from ..models import SpawnError
from ..process import invoke
from .base import DynamicCompletion, SecondaryBackend

# $1: line, $2: cursor offset, remaining: bash-completion scripts to try
BASH_COMPLETE_SCRIPT = r"""
shopt -s extglob progcomp
line=${1:0:$2}
for f in "${@:3}"; do
    if [[ -r $f ]]; then
        . "$f" >/dev/null 2>&1
        break
    fi
done
read -r -a COMP_WORDS <<< "$line"
if [[ ${#COMP_WORDS[@]} -eq 0 || $line == *[[:space:]] ]]; then
    COMP_WORDS+=("")
fi
COMP_LINE=$line
COMP_POINT=${#line}
COMP_CWORD=$(( ${#COMP_WORDS[@]} - 1 ))
COMP_TYPE=9
COMP_KEY=9
cur=${COMP_WORDS[COMP_CWORD]}
COMPREPLY=()
if (( COMP_CWORD == 0 )); then
    while IFS= read -r c; do COMPREPLY+=("$c"); done < <(compgen -A function -abck -- "$cur" | sort -u)
else
    cmd=${COMP_WORDS[0]}
    prev=${COMP_WORDS[COMP_CWORD-1]}
    spec=$(complete -p -- "$cmd" 2>/dev/null)
    if [[ -z $spec ]] && declare -F _completion_loader >/dev/null; then
        _completion_loader "$cmd" >/dev/null 2>&1
        spec=$(complete -p -- "$cmd" 2>/dev/null)
    fi
    if [[ $spec =~ -F[[:space:]]+([^[:space:]]+) ]]; then
        "${BASH_REMATCH[1]}" "$cmd" "$cur" "$prev" >/dev/null 2>&1
    fi
    if (( ${#COMPREPLY[@]} == 0 )); then
        while IFS= read -r c; do COMPREPLY+=("$c"); done < <(compgen -f -- "$cur")
    fi
fi
for candidate in "${COMPREPLY[@]}"; do
    printf '%q\n' "$candidate"
done
"""


def word_start(line: str, point: int) -> int:
    """Return the offset where the word under the cursor starts."""
    prefix = line[:point]
    if not prefix or prefix[-1].isspace():
        return point
    return point - len(prefix.split()[-1])


class BashBackend(SecondaryBackend):
    """Completes through bash's programmable completion."""

    name = "bash"

    def __init__(self, bash_path: str | None, scripts: tuple[str, ...] = BASH_COMPLETION_SCRIPTS, cwd: str | None = None) -> None:
        """Initialize.

        Args:
            bash_path: Resolved bash executable, None when not installed
            scripts: bash-completion entry points, the first readable one is sourced
            cwd: Working directory used to run bash
        """
        self.bash_path = bash_path
        self.scripts = scripts
        self.cwd = cwd

    def is_available(self) -> bool:
        return self.bash_path is not None

    def command_args(self, line: str, point: int) -> list[str]:
        """Arguments given to bash to complete `line` at `point`."""
        return ["--noprofile", "--norc", "-c", BASH_COMPLETE_SCRIPT, "fishcomplete", line, str(point), *self.scripts]

    def complete(self, line: str, point: int, *, log: Logger) -> DynamicCompletion | None:
        if self.bash_path is None:
            return None
        point = max(0, min(point, len(line)))
        try:
            output = invoke(self.bash_path, self.command_args(line, point), log=log, cwd=self.cwd)
        except SpawnError as e:
            log.warning("%s", e)
            return None
        candidates = [candidate for candidate in output.splitlines() if candidate]
        return (word_start(line, point), point, candidates)
