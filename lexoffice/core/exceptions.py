"""
Exception hierarchy for the LexOffice application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class LexOfficeException(Exception):
    """Base exception for all LexOffice application errors."""

    status_code: int = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class NotFoundError(LexOfficeException):
    """Raised when a record looked up by id does not exist."""

    status_code = 404

    def __init__(
        self,
        resource: str,
        resource_id: Any = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize not-found error.

        Args:
            resource: Resource name (e.g. "Case")
            resource_id: Identifier that was looked up
            details: Additional context
        """
        self.resource = resource
        self.resource_id = resource_id
        message = f"{resource} not found"
        if resource_id is not None:
            message = f"{resource} {resource_id} not found"
        super().__init__(message, details)


class ConflictError(LexOfficeException):
    """Raised when a uniqueness rule would be violated."""

    status_code = 409


class PreconditionFailedError(LexOfficeException):
    """Raised when an operation is refused because of the record's current state."""

    status_code = 412


class ValidationError(LexOfficeException):
    """Raised when input violates a business rule."""

    status_code = 400

    def __init__(
        self,
        message: str,
        field: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation error.

        Args:
            message: Error message
            field: Field name that failed validation
            details: Additional context
        """
        self.field = field
        if field:
            details = {**(details or {}), "field": field}
        super().__init__(message, details)


class ExternalServiceError(LexOfficeException):
    """Raised when an upstream provider (e.g. the text-generation model) fails."""

    status_code = 502

    def __init__(
        self,
        message: str,
        service: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        self.service = service
        if service:
            details = {**(details or {}), "service": service}
        super().__init__(message, details)
