"""Custom exceptions for the domain model and services."""

from learntrack.errors import ErrorKind, LearnTrackError


class DomainError(LearnTrackError):
    """Base exception for domain errors."""


class ValidationError(DomainError):
    """A field was given a malformed value."""

    kind = ErrorKind.VALIDATION

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field


class InvalidStateError(DomainError):
    """A cross-entity business rule was violated."""

    kind = ErrorKind.INVALID_STATE

    def __init__(self, reason: str, message: str | None = None) -> None:
        super().__init__(message or reason)
        self.reason = reason
