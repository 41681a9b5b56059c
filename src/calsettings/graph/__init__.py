"""Microsoft Graph package - timezone provider and custom errors."""

from .errors import (
    AuthenticationError,
    ClientError,
    GraphAPIError,
    NetworkError,
    NotFoundError,
    ParseError,
    RateLimitError,
    ServerError,
)
from .timezone import GraphTimezoneProvider, StaticTimezoneProvider, create_timezone_provider

__all__ = [
    "AuthenticationError",
    "ClientError",
    "GraphAPIError",
    "GraphTimezoneProvider",
    "NetworkError",
    "NotFoundError",
    "ParseError",
    "RateLimitError",
    "ServerError",
    "StaticTimezoneProvider",
    "create_timezone_provider",
]
