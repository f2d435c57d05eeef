"""
Ordering helpers built on the label and EVR comparators.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from functools import cmp_to_key

from .evr import compare_evrs
from .version import compare_versions

logger = logging.getLogger(__name__)


def is_newer(candidate: str, current: str) -> bool:
    """
    Check if an EVR is newer than another.

    Args:
        candidate: EVR that may be an update
        current: EVR currently in use

    Returns:
        True if candidate sorts after current
    """
    return compare_evrs(candidate, current) > 0


def sort_versions(labels: Iterable[str], reverse: bool = False) -> list[str]:
    """Sort Version or Release labels from oldest to newest."""
    return sorted(labels, key=cmp_to_key(compare_versions), reverse=reverse)


def sort_evrs(evrs: Iterable[str], reverse: bool = False) -> list[str]:
    """Sort EVR strings from oldest to newest."""
    return sorted(evrs, key=cmp_to_key(compare_evrs), reverse=reverse)


def latest_evr(evrs: Iterable[str]) -> str:
    """
    Return the newest of several EVR strings.

    Of EVRs that compare equal, the first one seen is returned.

    Raises:
        ValueError: if no EVR is given
    """
    candidates = list(evrs)
    if not candidates:
        raise ValueError("latest_evr() needs at least one EVR")

    logger.debug(f"Selecting latest of {len(candidates)} EVRs")
    return max(candidates, key=cmp_to_key(compare_evrs))
