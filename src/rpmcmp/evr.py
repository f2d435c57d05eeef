"""
RPM EVR Strings

Validates, parses and compares Epoch:Version-Release strings.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from functools import total_ordering

from .errors import (
    INVALID_EPOCH,
    MULTIPLE_COLONS,
    MULTIPLE_HYPHENS,
    NEGATIVE_EPOCH,
    InvalidArgumentError,
)
from .version import RPMVersion, _label_key, compare_versions

logger = logging.getLogger(__name__)

_EPOCH_PATTERN = re.compile(r"\+?[0-9]+")
_NEGATIVE_EPOCH_PATTERN = re.compile(r"-[0-9]+")


def validate_evr(evr: str) -> str:
    """
    Check an EVR string.

    The string may hold at most one colon (after the epoch) and at most
    one hyphen (before the release). An epoch, when present, must be a
    non-negative integer.

    Returns:
        Empty string if the EVR is valid, otherwise a diagnostic message
    """
    if evr.count(":") > 1:
        return MULTIPLE_COLONS

    if ":" in evr:
        epoch = evr.split(":", 1)[0]
        if _NEGATIVE_EPOCH_PATTERN.fullmatch(epoch):
            return NEGATIVE_EPOCH
        if not _EPOCH_PATTERN.fullmatch(epoch):
            return INVALID_EPOCH

    if evr.count("-") > 1:
        return MULTIPLE_HYPHENS

    return ""


def _require_valid_evr(evr: str) -> None:
    diagnostic = validate_evr(evr)
    if diagnostic:
        logger.debug(f"Rejected EVR {evr!r}: {diagnostic}")
        raise InvalidArgumentError(diagnostic)


def parse_evr(evr: str) -> RPMEvr:
    """
    Parse an EVR string into its epoch, version and release.

    Supported formats:
        epoch:version-release
        epoch:version
        version-release
        version

    A missing epoch defaults to 0 and a missing release to "".

    Raises:
        InvalidArgumentError: if the EVR string is invalid
    """
    _require_valid_evr(evr)

    epoch = 0
    rest = evr
    if ":" in evr:
        epoch_text, rest = evr.split(":", 1)
        epoch = int(epoch_text)

    if "-" in rest:
        version, release = rest.split("-", 1)
    else:
        version, release = rest, ""

    return RPMEvr(epoch=epoch, version=version, release=release)


def compare_evrs(lhs: str, rhs: str) -> int:
    """
    Compare two EVR strings.

    Epochs are compared numerically first, then versions, then releases
    using the label comparison rules.

    Returns:
        -1 if lhs < rhs
         0 if lhs == rhs
         1 if lhs > rhs

    Raises:
        InvalidArgumentError: if either EVR string is invalid
    """
    return parse_evr(lhs).compare(parse_evr(rhs))


def format_evr(epoch: int, version: str, release: str = "") -> str:
    """
    Format an EVR string.

    The epoch is omitted when it is 0 and the release when it is empty.
    """
    result = version
    if epoch > 0:
        result = f"{epoch}:{result}"
    if release:
        result = f"{result}-{release}"
    return result


@total_ordering
@dataclass(frozen=True)
class RPMEvr:
    """
    Represents an RPM Epoch:Version-Release.

    Attributes:
        epoch: Package epoch (default: 0)
        version: Package version label
        release: Package release label, possibly empty
    """

    epoch: int = 0
    version: str = ""
    release: str = ""

    def __post_init__(self) -> None:
        """Validate epoch and labels."""
        if not isinstance(self.epoch, int):
            logger.debug(f"Rejected epoch {self.epoch!r}: {INVALID_EPOCH}")
            raise InvalidArgumentError(INVALID_EPOCH)
        if self.epoch < 0:
            logger.debug(f"Rejected epoch {self.epoch!r}: {NEGATIVE_EPOCH}")
            raise InvalidArgumentError(NEGATIVE_EPOCH)
        RPMVersion(self.version)
        RPMVersion(self.release)

    @classmethod
    def parse(cls, evr: str) -> RPMEvr:
        """Parse an EVR string, see parse_evr()."""
        return parse_evr(evr)

    @property
    def evr(self) -> str:
        """Return full EVR string."""
        return f"{self.epoch}:{self.version}-{self.release}"

    def __str__(self) -> str:
        return format_evr(self.epoch, self.version, self.release)

    def compare(self, other: RPMEvr) -> int:
        """Compare against another EVR, returning -1, 0 or 1."""
        # Compare epoch first
        if self.epoch < other.epoch:
            return -1
        if self.epoch > other.epoch:
            return 1

        # Compare version
        version_cmp = compare_versions(self.version, other.version)
        if version_cmp != 0:
            return version_cmp

        # Compare release
        return compare_versions(self.release, other.release)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RPMEvr):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, RPMEvr):
            return NotImplemented
        return self.compare(other) < 0

    def __hash__(self) -> int:
        return hash(
            (self.epoch, _label_key(self.version), _label_key(self.release))
        )
