"""Custom exceptions for the authoring context."""

from typing import Iterable, Optional


class UnknownEntryKindError(ValueError):
    """
    Raised when an entry list operation names a list that does not exist.

    Attributes:
        kind: The requested entry kind
        available: Entry kinds that do exist
    """

    def __init__(self, kind: str, available: Optional[Iterable[str]] = None):
        self.kind = kind
        self.available = list(available or [])

        message = f"Unknown entry kind: '{kind}'"
        if self.available:
            message += f". Available kinds: {', '.join(self.available)}"

        super().__init__(message)


class UnknownSectionError(ValueError):
    """Raised when a section identifier is not one of the seven list-backed sections."""

    def __init__(self, section_id: str):
        self.section_id = section_id
        super().__init__(f"Unknown section: '{section_id}'")


class InvalidFieldError(ValueError):
    """
    Raised when a setter names a field that does not exist or receives a value
    outside a fixed choice set (template, accent color).

    Attributes:
        field_name: Name of the offending field
        value: Offending value, if any
    """

    def __init__(self, field_name: str, message: Optional[str] = None, value: object = None):
        self.field_name = field_name
        self.value = value
        super().__init__(message or f"Unknown field: '{field_name}'")
