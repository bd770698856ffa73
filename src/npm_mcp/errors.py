"""Exception hierarchy for the Nginx Proxy Manager client.

All failures raised by the client layer derive from ``NPMError`` so the tool
boundary can convert them into MCP error results in one place.
"""

from typing import Any


class NPMError(Exception):
    """Base exception for all Nginx Proxy Manager client errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize the error with a message and optional details.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional diagnostic fields.

        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ConfigurationError(NPMError):
    """Raised when required connection settings are missing or invalid."""


class AuthenticationError(NPMError):
    """Raised when the token exchange is rejected or the service is unreachable."""

    def __init__(self, message: str = "Authentication failed", body: str | None = None) -> None:
        super().__init__(message, {"body": body} if body is not None else None)
        self.body = body


class RequestError(NPMError):
    """Raised when an API request fails.

    ``status_code`` is ``None`` when no HTTP response was received at all.
    """

    def __init__(self, message: str, *, status_code: int | None = None, body: str = "") -> None:
        details: dict[str, Any] = {"body": body}
        if status_code is not None:
            details["status_code"] = status_code
        super().__init__(message, details)
        self.status_code = status_code
        self.body = body


class DecodeError(NPMError):
    """Raised when a non-empty response body is not valid JSON."""

    def __init__(self, message: str, *, body: str) -> None:
        super().__init__(message, {"body": body})
        self.body = body


__all__ = [
    "AuthenticationError",
    "ConfigurationError",
    "DecodeError",
    "NPMError",
    "RequestError",
]
