"""
Pytest configuration and fixtures for rpmcmp tests.
"""

import pytest

# (lhs, rhs, reason): lhs sorts strictly before rhs under both the label
# and the EVR comparators.
ORDERED_LABEL_PAIRS = [
    ("1.0", "1.1", "0 < 1"),
    ("1.1", "1.2.3", "1 < 2"),
    ("1.0a", "1.0b", "a < b"),
    ("2.5", "2.50", "5 < 50"),
    ("1.9", "1.0010", "9 < 10, leading zeroes ignored"),
    ("2.1.7A", "2.1.7a", "'A' (65) < 'a' (97)"),
    ("2a", "2.0", "numbers are newer than letters"),
    ("0.5.0.post1", "0.5.0.1", "numeric 1 sorts after alphabetic post"),
    ("0.5.0.post1", "0.5.1", "0 < 1"),
    ("1.0", "1.0a", "rhs has one more segment"),
    ("1", "1.0", "rhs has one more segment"),
    ("1.1~201601", "1.1", "tilde marks a pre-release"),
    ("1.1", "1.1^201601", "caret marks a post-release"),
]

EQUAL_LABEL_PAIRS = [
    ("1.05", "1.5", "05 and 5 are both the number 5"),
    ("fc4", "fc.4", "letters and digits split anyway"),
    ("3.0.0_fc", "3.0.0.fc", "separators are not significant"),
]

ORDERED_EVR_PAIRS = [
    ("0:1.2.3-1", "1:1.2.3-1", "epoch 0 < epoch 1, rest equal"),
    ("0:1.2.3-1", "1:foo.bar-1", "epoch 0 < epoch 1"),
    ("0:1.2.3", "1:foo.bar", "epoch 0 < epoch 1"),
    ("0:3", "1:2", "epoch 0 < epoch 1"),
    ("1.2.3-1", "1:1.2.3-1", "missing epoch is 0, rest equal"),
    ("1.2.3-1", "1:foo.bar-1", "missing epoch is 0"),
    ("1.2.3", "1:foo.bar", "missing epoch is 0"),
    ("3", "1:2", "missing epoch is 0"),
    ("888:1.2.3-1", "999:foo.bar-1", "888 < 999"),
    ("1.0-1.el9", "1.0-2.el9", "release 1 < release 2"),
    ("1.0", "1.0-1", "empty release sorts first"),
]

EQUAL_EVR_PAIRS = [
    ("1:1.2.3-1", "1:1.2.3-1", "identical"),
    ("1.2.3-1", "1.2.3-1", "identical"),
    ("0:1.2.3-1", "1.2.3-1", "explicit zero epoch"),
    ("3.0.0_fc-3.0.0_fc", "3.0.0.fc-3.0.0.fc", "separators are not significant"),
    ("009:1.05-a", "9:1.5-a", "leading zeroes in epoch and version"),
]


@pytest.fixture
def ordered_label_pairs():
    """Provide label pairs where lhs sorts before rhs."""
    return ORDERED_LABEL_PAIRS


@pytest.fixture
def equal_label_pairs():
    """Provide label pairs that compare equal."""
    return EQUAL_LABEL_PAIRS


@pytest.fixture
def ordered_evr_pairs():
    """Provide EVR pairs where lhs sorts before rhs."""
    return ORDERED_EVR_PAIRS + ORDERED_LABEL_PAIRS


@pytest.fixture
def equal_evr_pairs():
    """Provide EVR pairs that compare equal."""
    return EQUAL_EVR_PAIRS + EQUAL_LABEL_PAIRS
