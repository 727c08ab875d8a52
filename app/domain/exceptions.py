"""Domain exceptions for the catalog service.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. Presentation
layer maps them to HTTP responses in exception handlers.
"""

from typing import Any


class CatalogException(Exception):
    """Base exception for all catalog service errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. Presentation layer maps
    these to HTTP responses using message, error_code, and details.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, domain_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON error body used by the API exception handler."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(CatalogException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class AuthenticationException(CatalogException):
    """Raised when the caller cannot be identified (e.g. missing user header)."""

    def __init__(self, message: str = "Authentication failed") -> None:
        """Initialize with optional message.

        Args:
            message: Description of the authentication failure.
        """
        super().__init__(message, "AUTHENTICATION_ERROR")


class ResourceNotFoundException(CatalogException):
    """Raised when a resource that must exist for an operation is missing.

    Plain lookups return None instead; this is for references such as a
    parent domain or a grant target.
    """

    def __init__(self, resource_type: str, resource_id: int | str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'domain', 'user').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class UserAlreadyExistsException(CatalogException):
    """Raised when a username or email is already taken by another user."""

    def __init__(self, field: str) -> None:
        """Initialize with the conflicting field.

        Args:
            field: 'username' or 'email'; 'username_or_email' when the
                database reports the conflict without naming it.
        """
        super().__init__(
            "username or email already in use",
            "USER_ALREADY_EXISTS",
            {"field": field},
        )


class DomainAccessDeniedException(CatalogException):
    """Raised when a write targets a domain outside the caller's accessible set."""

    def __init__(self, domain_id: int | None) -> None:
        """Initialize with the denied domain.

        Args:
            domain_id: The requested domain id; None when no domain was given.
        """
        super().__init__(
            f"Access denied to domain {domain_id}",
            "DOMAIN_ACCESS_DENIED",
            {"domain_id": domain_id},
        )
        self.domain_id = domain_id


class InvalidCursorException(CatalogException):
    """Raised when a pagination cursor cannot be decoded or does not fit the query."""

    def __init__(self, reason: str) -> None:
        """Initialize with the reason the cursor was rejected.

        Args:
            reason: Short description (e.g. 'not valid base64').
        """
        super().__init__(
            f"Invalid cursor: {reason}",
            "INVALID_CURSOR",
            {"reason": reason},
        )
        self.reason = reason


class DatabaseNotConfiguredException(CatalogException):
    """Raised when an operation requires the SQL database but DATABASE_URL is empty."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
