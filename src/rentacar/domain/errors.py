"""Domain error classes.

Protocol-agnostic errors that represent business failures.
These errors are translated to appropriate formats (HTTP, client messages) by adapters.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Protocol-agnostic. Contains business error information that
    can be translated to an HTTP response or a user-facing message.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message (default locale)
            **context: Additional context for error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Malformed or out-of-range input.

    Examples:
        - price_min > price_max
        - Booking with a non-positive duration
        - Car with a negative daily price

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "end_date", "message": "Must be after start_date"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class NotFoundError(DomainError):
    """Referenced entity is absent.

    Examples:
        - Car with ID not found
        - No account registered for an email
        - Booking doesn't exist

    Protocol mappings:
        - REST: 404 Not Found
    """

    error_code: str = "NOT_FOUND"

    def __init__(self, resource: str, identifier: str | None = None, **context: Any) -> None:
        """Create a not found error.

        Args:
            resource: Type of resource (e.g., "Car", "User")
            identifier: Resource identifier (e.g., UUID, email)
            **context: Additional context
        """
        if identifier:
            message = f"{resource} with identifier '{identifier}' not found"
        else:
            message = f"{resource} not found"

        super().__init__(message, resource=resource, identifier=identifier, **context)


class ConflictError(DomainError):
    """Business constraint conflict.

    Protocol mappings:
        - REST: 409 Conflict
    """

    error_code: str = "CONFLICT"


class UnauthorizedError(DomainError):
    """Authentication required or failed.

    Protocol mappings:
        - REST: 401 Unauthorized
    """

    error_code: str = "UNAUTHORIZED"


class ForbiddenError(DomainError):
    """Authenticated but insufficient permissions.

    Protocol mappings:
        - REST: 403 Forbidden
    """

    error_code: str = "FORBIDDEN"


class InternalError(DomainError):
    """Internal domain error (unexpected conditions).

    Should be logged for investigation.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "INTERNAL_ERROR"


class InvalidCredentialError(UnauthorizedError):
    """Password does not match the stored credential."""

    error_code: str = "INVALID_CREDENTIALS"

    def __init__(self, message: str = "Incorrect password", **context: Any) -> None:
        super().__init__(message, **context)


class InactiveAccountError(ForbiddenError):
    """Account exists but has been deactivated by an administrator."""

    error_code: str = "INACTIVE_ACCOUNT"

    def __init__(
        self, message: str = "Account is inactive. Contact an administrator.", **context: Any
    ) -> None:
        super().__init__(message, **context)


class DuplicateEmailError(ConflictError):
    """Email is already registered to another account."""

    error_code: str = "DUPLICATE_EMAIL"

    def __init__(self, email: str, **context: Any) -> None:
        super().__init__(f"Email '{email}' is already registered", email=email, **context)


class InvalidTransitionError(ConflictError):
    """Requested booking status is not reachable from the current status."""

    error_code: str = "INVALID_TRANSITION"

    def __init__(self, current: str, requested: str, **context: Any) -> None:
        super().__init__(
            f"Cannot change booking status from '{current}' to '{requested}'",
            current=current,
            requested=requested,
            **context,
        )


class PersistenceError(DomainError):
    """A call into the storage collaborator failed.

    Recoverable: the caller may retry the operation.

    Protocol mappings:
        - REST: 503 Service Unavailable
    """

    error_code: str = "PERSISTENCE_ERROR"

    def __init__(
        self, operation: str, message: str = "Storage is unavailable, try again", **context: Any
    ) -> None:
        super().__init__(message, operation=operation, **context)
