"""
Custom exceptions for the apiwire client.

Every failure raised by a backend or by the request wrapper derives from
ClientError, so callers can handle all of them with a single except clause.
"""
from typing import Optional


class ClientError(Exception):
    """Base exception for all client errors."""
    pass


class HTTPTransportError(ClientError):
    """Raised when the request could not be completed (connection, DNS, TLS, timeout)."""
    pass


class HTTPStatusError(ClientError):
    """Raised when the server answered with a non-success status code."""

    def __init__(self, status_code: int, url: str, body: str = ""):
        self.status_code = status_code
        self.url = url
        self.body = body
        message = f"HTTP {status_code} from {url}"
        if body:
            message += f": {body[:200]}"
        super().__init__(message)


class BodyError(ClientError):
    """Raised when a response body could not be read or decoded as text."""
    pass


class PayloadEncodingError(ClientError):
    """Raised when a request payload could not be encoded for the wire."""
    pass


class AuthenticationUnavailableError(ClientError):
    """Raised when an authenticated request is made without a current token."""

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or "No access token available; authenticate first")


class BackendConfigurationError(ClientError):
    """Raised when the HTTP backend selection is unknown or cannot be loaded."""
    pass


class ConfigurationError(ClientError):
    """Raised when client configuration values are invalid."""
    pass
