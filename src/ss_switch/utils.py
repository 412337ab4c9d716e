"""Utility functions for ss-switch."""

import os

from .models import ConfigCandidate


def format_candidate(candidate: ConfigCandidate) -> str:
    """Display text for a candidate in the selection list.

    Examples:
        >>> format_candidate(ConfigCandidate("hk.json"))
        'hk.json'
    """
    return candidate.file


def is_root() -> bool:
    """Whether the process runs with an effective UID of 0."""
    return os.geteuid() == 0


def order_candidates(names: list[str], current: str | None) -> list[ConfigCandidate]:
    """Build the candidate list with the current target first.

    The current target is pulled out of ``names`` (if present) and placed at
    the head so it is the default choice. Every other name keeps its
    relative order and appears once.

    Args:
        names: Directory entry names, link name already excluded
        current: Raw target of the active link, or None

    Returns:
        Candidates with no duplicates

    Examples:
        >>> [c.file for c in order_candidates(["a.json", "b.json"], "b.json")]
        ['b.json', 'a.json']

        >>> [c.file for c in order_candidates(["a.json"], None)]
        ['a.json']
    """
    candidates = [ConfigCandidate(name) for name in names if name != current]

    if current is not None:
        candidates.insert(0, ConfigCandidate(current))

    return candidates
