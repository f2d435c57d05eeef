"""
RPM Version Comparison

Compares RPM version labels and Epoch:Version-Release strings using
RPM's segment-based ordering rules.
"""

from .errors import InvalidArgumentError
from .evr import RPMEvr, compare_evrs, format_evr, parse_evr, validate_evr
from .sorting import is_newer, latest_evr, sort_evrs, sort_versions
from .version import RPMVersion, compare_versions, segments, validate_label

__all__ = [
    "InvalidArgumentError",
    "RPMEvr",
    "RPMVersion",
    "compare_evrs",
    "compare_versions",
    "format_evr",
    "is_newer",
    "latest_evr",
    "parse_evr",
    "segments",
    "sort_evrs",
    "sort_versions",
    "validate_evr",
    "validate_label",
]

__version__ = "1.0.0"
