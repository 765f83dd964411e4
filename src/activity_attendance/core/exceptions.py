class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ActivityNotFoundError(ValidationError):
    """Raised when a report is requested for an unknown activity."""


class ExportError(DomainError):
    """Raised when a report cannot be written to a spreadsheet."""
