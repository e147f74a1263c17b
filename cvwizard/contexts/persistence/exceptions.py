"""Custom exceptions for the persistence context."""

from typing import Optional


class SnapshotFormatError(ValueError):
    """
    Raised when a serialized snapshot does not have the expected shape.

    Attributes:
        message: Error description
        key: Dotted path of the offending key (e.g., "document.education[2]")
    """

    def __init__(self, message: str, key: Optional[str] = None):
        self.message = message
        self.key = key

        if key:
            message = f"{message} (at '{key}')"

        super().__init__(message)
