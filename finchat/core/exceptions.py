"""
Exception hierarchy for the FinChat application.

Provides layered exception structure for domain-specific errors.
Every exception carries the HTTP status the API layer renders it with,
plus context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class FinChatException(Exception):
    """Base exception for all FinChat application errors."""

    status_code: int = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message, returned to API callers
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


class ValidationError(FinChatException):
    """Raised when input validation fails."""

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
        details = details or {}
        if field:
            details["field"] = field
        super().__init__(message, details)


class ConflictError(FinChatException):
    """Raised when a unique value (username) is already taken."""

    status_code = 400


class NotFoundError(FinChatException):
    """Raised when a login names a user that does not exist."""

    status_code = 404


class UnknownUserError(FinChatException):
    """Raised when an authenticated request names a user that does not exist."""

    status_code = 400

    def __init__(self, username: str | None, details: dict[str, Any] | None = None) -> None:
        details = details or {}
        details["username"] = username
        super().__init__("Username doesn't exists", details)


class AuthError(FinChatException):
    """Raised when credentials are rejected."""

    status_code = 401


class NoCredentialError(AuthError):
    """Raised when a request carries no bearer token."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__("No token provided", details)


class InvalidCredentialError(AuthError):
    """Raised when a bearer token fails signature or expiry verification."""

    status_code = 403

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__("Failed to authenticate token", details)


class DependencyError(FinChatException):
    """Base exception for failures of external collaborators."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize dependency error.

        Args:
            message: Error message
            operation: Operation that failed (fetch, embed, upsert, query, ...)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class ScrapeError(DependencyError):
    """Raised when a source page cannot be fetched or parsed."""

    pass


class EmbeddingError(DependencyError):
    """Raised when embedding generation fails."""

    pass


class VectorStoreError(DependencyError):
    """Raised when vector store operations fail."""

    pass


class LLMError(DependencyError):
    """Raised when a chat completion fails."""

    pass


class InternalError(FinChatException):
    """Raised for unexpected failures, rendered with a generic message."""

    status_code = 500
