"""Turn raw backend output into candidates."""

from .models import BackendResult

__all__ = ["classify"]


def classify(output: str, source: str = "primary") -> BackendResult:
    """Split a backend's output into candidates.

    Each line starting with a candidate, optionally followed by a tab and a
    description (fish's `complete -C` format).

    Args:
        output: The captured standard output
        source: Name of the backend which produced it

    Returns:
        The candidates in the order given by the backend
    """
    candidates = []
    descriptions = []
    for line in output.splitlines():
        candidate, _, description = line.partition("\t")
        if not candidate:
            continue
        candidates.append(candidate)
        descriptions.append(description)
    return BackendResult(candidates=candidates, source=source, descriptions=descriptions)
