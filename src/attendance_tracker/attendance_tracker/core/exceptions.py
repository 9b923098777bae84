class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class ConflictNotice(DomainError):
    """Raised when an event already exists for the triple and the caller has not decided whether to overwrite."""

    def __init__(self, existing, message: str = "Attendance already recorded for this date"):
        super().__init__(message)
        self.existing = existing


class StorageError(DomainError):
    """Raised when the record store is unreachable or rejects an operation."""
