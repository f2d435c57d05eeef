"""
RPM Version Labels

Splits Version and Release labels into segments and compares them using
RPM's ordering rules, including the tilde (pre-release) and caret
(post-release) markers.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import total_ordering

from .errors import HYPHEN_IN_LABEL, InvalidArgumentError

logger = logging.getLogger(__name__)

TILDE = "~"
CARET = "^"


def _is_digit(char: str) -> bool:
    return char.isascii() and char.isdigit()


def _is_alpha(char: str) -> bool:
    return char.isascii() and char.isalpha()


def segments(label: str) -> list[str]:
    """
    Split a label into comparable segments.

    Segments are maximal runs of either digits or letters. Any other
    character is a separator and never appears in the output.

    Examples:
        "1.2.3" -> ["1", "2", "3"]
        "1.2a3" -> ["1", "2", "a", "3"]
        "001ab.dd100" -> ["001", "ab", "dd", "100"]
    """
    result = []
    current = ""
    current_is_digit = None

    for char in label:
        if _is_digit(char):
            if current_is_digit is False and current:
                result.append(current)
                current = ""
            current += char
            current_is_digit = True
        elif _is_alpha(char):
            if current_is_digit is True and current:
                result.append(current)
                current = ""
            current += char
            current_is_digit = False
        else:
            # Separator character
            if current:
                result.append(current)
                current = ""
            current_is_digit = None

    if current:
        result.append(current)

    return result


def validate_label(label: str) -> str:
    """
    Check a Version or Release label.

    Returns:
        Empty string if the label is valid, otherwise a diagnostic message
    """
    if "-" in label:
        return HYPHEN_IN_LABEL
    return ""


def _require_valid_label(label: str) -> None:
    diagnostic = validate_label(label)
    if diagnostic:
        logger.debug(f"Rejected label {label!r}: {diagnostic}")
        raise InvalidArgumentError(diagnostic)


def _compare_marker(lhs: str, rhs: str, marker: str, newer: bool) -> int:
    # Only decides when exactly one side carries the marker
    lhs_has, rhs_has = marker in lhs, marker in rhs
    if lhs_has == rhs_has:
        return 0
    result = 1 if lhs_has else -1
    return result if newer else -result


def _compare_segments(lhs: list[str], rhs: list[str]) -> int:
    for s1, s2 in zip(lhs, rhs):
        # Both numeric
        if s1.isdigit() and s2.isdigit():
            n1, n2 = int(s1), int(s2)
            if n1 < n2:
                return -1
            if n1 > n2:
                return 1
        # Both alphabetic
        elif not s1.isdigit() and not s2.isdigit():
            if s1 < s2:
                return -1
            if s1 > s2:
                return 1
        # Mixed: numeric > alphabetic
        elif s1.isdigit():
            return 1
        else:
            return -1

    # All compared segments are equal, longer label is greater
    if len(lhs) < len(rhs):
        return -1
    if len(lhs) > len(rhs):
        return 1

    return 0


def _compare_labels(lhs: str, rhs: str) -> int:
    result = _compare_marker(lhs, rhs, TILDE, newer=False)
    if result != 0:
        return result

    result = _compare_marker(lhs, rhs, CARET, newer=True)
    if result != 0:
        return result

    return _compare_segments(segments(lhs), segments(rhs))


def compare_versions(lhs: str, rhs: str) -> int:
    """
    Compare two labels using RPM's comparison algorithm.

    A label containing "~" is older than one without it, and a label
    containing "^" is newer than one without it. Otherwise labels are
    compared segment by segment: numbers numerically, letters by code
    point, and a number always beats letters. When every compared
    segment is equal the label with more segments wins.

    Returns:
        -1 if lhs < rhs
         0 if lhs == rhs
         1 if lhs > rhs

    Raises:
        InvalidArgumentError: if either label is invalid
    """
    return RPMVersion(lhs).compare(RPMVersion(rhs))


def _label_key(label: str) -> tuple:
    """Key equal for exactly the labels that compare equal."""
    return (
        TILDE in label,
        CARET in label,
        tuple(int(s) if s.isdigit() else s for s in segments(label)),
    )


@total_ordering
@dataclass(frozen=True)
class RPMVersion:
    """
    A validated Version or Release label.

    Attributes:
        label: The label string, never containing a hyphen
    """

    label: str

    def __post_init__(self) -> None:
        """Reject labels containing a hyphen."""
        _require_valid_label(self.label)

    def __str__(self) -> str:
        return self.label

    @property
    def segments(self) -> list[str]:
        """Return the label's segments."""
        return segments(self.label)

    def compare(self, other: RPMVersion) -> int:
        """Compare against another label, returning -1, 0 or 1."""
        return _compare_labels(self.label, other.label)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RPMVersion):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RPMVersion):
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self) -> int:
        return hash(_label_key(self.label))
