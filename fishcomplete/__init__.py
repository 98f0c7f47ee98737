"""fishcomplete - complete command lines with fish's completion engine.

Hosts (editors, REPLs) hand over the line being typed and get back either
candidates to offer or a request to run their own file name completion.
When fish only has file names to suggest, bash's programmable completion
is tried as a fallback.
"""

from .config import Settings
from .models import BackendResult, CompletionOutcome, LiteralCandidates, UseFileCompletion
from .pipeline import Activation, CompletionPipeline, Host, activate, deactivate

__all__ = [
    "Activation",
    "BackendResult",
    "CompletionOutcome",
    "CompletionPipeline",
    "Host",
    "LiteralCandidates",
    "Settings",
    "UseFileCompletion",
    "activate",
    "deactivate",
]
