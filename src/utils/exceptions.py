"""Custom exception classes."""
from typing import Dict


class AttendeeNotFoundError(Exception):
    """Raised when attendee ID doesn't exist in the store."""
    pass


class ValidationError(Exception):
    """Raised when registration input fails validation."""

    def __init__(self, errors: Dict[str, str]):
        self.errors = dict(errors)
        super().__init__("; ".join(f"{field}: {msg}" for field, msg in self.errors.items()))


class EncodingError(Exception):
    """Raised when a profile image cannot be encoded."""
    pass


class PersistenceError(Exception):
    """Raised when the stored attendee blob is malformed."""
    pass


class ArtifactGenerationError(Exception):
    """Raised when a ticket or export file cannot be produced."""
    pass


class TicketGenerationError(ArtifactGenerationError):
    """Raised when the ticket image or PDF cannot be rendered."""
    pass


class ExportError(ArtifactGenerationError):
    """Raised when the attendee workbook cannot be written."""
    pass
