"""
Exceptions for the ZyFi SDK.
"""
from typing import Optional


class ZyFiError(Exception):
    """Base exception for ZyFi-related errors."""
    pass


class ConfigurationError(ZyFiError):
    """Raised when required client configuration is missing or invalid."""
    pass


class TransportError(ZyFiError):
    """Raised when the request never produced an HTTP response."""

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        self.cause = cause
        super().__init__(message)


class ApiError(ZyFiError):
    """Raised when the ZyFi API answers with a non-success status."""

    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"ZyFi API error {status_code}: {body}")


class DecodeError(ZyFiError):
    """Raised when a success response does not match the expected shape."""

    def __init__(self, message: str, details: Optional[str] = None):
        self.details = details
        super().__init__(message)
