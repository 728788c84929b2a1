"""
Exception hierarchy for the Terminal AI API.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class TerminalAIException(Exception):
    """Base exception for all Terminal AI application errors."""

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
        """Return the human-readable message."""
        return self.message


class ValidationError(TerminalAIException):
    """Raised when request input validation fails."""

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


class ConfigurationError(TerminalAIException):
    """Raised when a required setting is missing at request time."""

    def __init__(self, message: str, setting: str | None = None) -> None:
        details = {"setting": setting} if setting else {}
        super().__init__(message, details)


class CompletionError(TerminalAIException):
    """Base exception for chat completion provider failures."""

    pass


class CompletionUpstreamError(CompletionError):
    """Raised when the completion provider answers with a non-success status."""

    def __init__(self, status_code: int, body: str) -> None:
        """
        Initialize upstream error.

        Args:
            status_code: HTTP status returned by the provider
            body: Raw response body text
        """
        self.status_code = status_code
        self.body = body
        super().__init__(
            f"API Error ({status_code}): {body}",
            {"status_code": status_code},
        )


class CompletionTimeoutError(CompletionError):
    """Raised when the completion call is cancelled by its deadline."""

    def __init__(self, timeout_seconds: float) -> None:
        self.timeout_seconds = timeout_seconds
        super().__init__(
            f"Completion request exceeded {timeout_seconds:g}s",
            {"timeout_seconds": timeout_seconds},
        )


class VectorStoreError(TerminalAIException):
    """Raised when vector store operations fail."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize vector store error.

        Args:
            message: Error message
            operation: Operation that failed (describe, upsert, query)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class NotificationError(TerminalAIException):
    """Raised when an operator notification cannot be delivered (non-critical)."""

    pass


class GitHubAuthError(TerminalAIException):
    """Raised when the GitHub device flow returns an error."""

    pass
