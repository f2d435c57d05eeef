"""
Error types and diagnostic messages.

Diagnostics are fixed strings; callers may match on them verbatim.
"""

HYPHEN_IN_LABEL = "Label can't have hyphen symbol!"
MULTIPLE_COLONS = "EVR must contain only one colon symbol!"
INVALID_EPOCH = "Epoch must be a number!"
NEGATIVE_EPOCH = "Epoch must be a positive number!"
MULTIPLE_HYPHENS = "EVR must contain only one hyphen symbol!"


class InvalidArgumentError(ValueError):
    """Raised when a label or EVR string fails validation."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message
