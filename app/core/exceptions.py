"""Domain-level exception hierarchy for service and repository layers."""

from __future__ import annotations


class DomainError(Exception):
    """Base class for domain-specific failures."""


class NotFoundError(DomainError):
    """Raised when a requested entity does not exist."""


class ConflictError(DomainError):
    """Raised when a state conflict occurs (e.g. duplicate entries)."""


class ValidationError(DomainError):
    """Raised when input validation fails at the domain/service layer."""


class InfrastructureError(DomainError):
    """Raised when infrastructure (DB or external service) is unavailable."""


class ResourceNotFoundError(NotFoundError):
    """Raised when a referenced gym or check-in does not exist."""

    def __init__(self, message: str = "Resource not found.") -> None:
        super().__init__(message)


class MaxDistanceError(ValidationError):
    """Raised when the user is farther from the gym than the check-in radius."""

    def __init__(self, message: str = "Max distance reached.") -> None:
        super().__init__(message)


class MaxNumberOfCheckInsError(ConflictError):
    """Raised when the user already checked in on the same calendar day."""

    def __init__(self, message: str = "Max number of check-ins reached.") -> None:
        super().__init__(message)


class LateCheckInValidationError(ValidationError):
    """Raised when a check-in is validated after the validation window closed."""

    def __init__(
        self,
        message: str = "The check-in can only be validated until 20 minutes of its creation.",
    ) -> None:
        super().__init__(message)
