"""Exception classes for Microsoft Graph interactions.

This module defines a hierarchy of exception classes for handling
the error conditions met while querying Graph for calendar settings.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class GraphAPIError(Exception):
    """Error during a Microsoft Graph request or response parsing.

    Raised when the request fails due to network issues, rejected
    credentials, throttling, or malformed response data.
    """

    def __init__(
        self, code: int, message: str, response: Optional[Dict[str, Any]] = None
    ) -> None:
        """Initialize the exception.

        Args:
            code: HTTP status code or custom error code
            message: Human-readable error message
            response: Optional raw API response for debugging
        """
        super().__init__(f"[{code}] {message}")
        self.code: int = code
        self.message: str = message
        self.response: Optional[Dict[str, Any]] = response

    @property
    def is_client_error(self) -> bool:
        """True for 400-499 status codes."""
        return 400 <= self.code < 500

    @property
    def is_server_error(self) -> bool:
        """True for 500-599 status codes."""
        return self.code >= 500

    @classmethod
    def from_response(
        cls, response: Dict[str, Any], status_code: int = 0
    ) -> GraphAPIError:
        """Create an error from a Graph error body.

        Graph wraps failures as ``{"error": {"code": ..., "message": ...}}``.

        Args:
            response: Decoded response body
            status_code: HTTP status code

        Returns:
            Appropriate GraphAPIError subclass
        """
        detail = response.get("error") or {}
        if not isinstance(detail, dict):
            detail = {"message": str(detail)}
        message = detail.get("message") or response.get("message")

        if 400 <= status_code < 500:
            if status_code in (401, 403):
                return AuthenticationError(status_code, message or "Authentication failed")
            elif status_code == 404:
                return NotFoundError(status_code, message or "Resource not found")
            elif status_code == 429:
                return RateLimitError(status_code, message or "Rate limit exceeded")
            return ClientError(status_code, message or "Client error", response)
        elif status_code >= 500:
            return ServerError(status_code, message or "Server error", response)

        return cls(status_code, message or "Unknown error", response)


class NetworkError(GraphAPIError):
    """Raised when a network issue prevents talking to Graph."""

    def __init__(
        self, message: str, original_error: Optional[Exception] = None
    ) -> None:
        super().__init__(0, message)
        self.original_error = original_error


class AuthenticationError(GraphAPIError):
    """Raised when Graph rejects the application's token."""

    pass


class NotFoundError(GraphAPIError):
    """Raised when the user or mailbox does not exist."""

    pass


class RateLimitError(GraphAPIError):
    """Raised when Graph throttles the application."""

    pass


class ClientError(GraphAPIError):
    """Raised for general 4xx client errors."""

    pass


class ServerError(GraphAPIError):
    """Raised for 5xx server errors."""

    pass


class ParseError(GraphAPIError):
    """Raised when a Graph response cannot be interpreted."""

    def __init__(
        self, message: str, original_error: Optional[Exception] = None
    ) -> None:
        super().__init__(0, message)
        self.original_error = original_error
