"""
Custom exceptions for the Prepr SDK.

Every exception is a terminal outcome for a single call. The client hands
it to the completion callback (or raises it from the awaitable helpers);
nothing here is retried.
"""

from typing import Dict, Any, List, Optional


class PreprError(Exception):
    """Base exception for SDK errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class TransportError(PreprError):
    """Raised when the request never produced a usable response."""

    def __init__(
        self,
        message: str,
        cause: Optional[BaseException] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.cause = cause


class TimeoutError(TransportError):
    """Raised when the connection stayed idle past the configured timeout."""

    def __init__(
        self,
        message: str = "request timeout",
        cause: Optional[BaseException] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, cause, details)


class RequestClosedError(TransportError):
    """Raised when the server closed the connection before the body ended."""

    def __init__(
        self,
        message: str = "request closed",
        cause: Optional[BaseException] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, cause, details)


class ParseError(PreprError):
    """Raised when a response body is not valid JSON."""

    def __init__(
        self,
        message: str = "response failed",
        status_code: Optional[int] = None,
        cause: Optional[BaseException] = None,
    ):
        super().__init__(message, {"status_code": status_code})
        self.status_code = status_code
        self.cause = cause


class ApiError(PreprError):
    """
    Raised when the API answered with a structured ``errors`` list.

    Attributes:
        status_code: HTTP status of the response
        errors: The raw error dictionaries as returned by the API
        entries: The same errors parsed into ApiErrorEntry objects
    """

    def __init__(
        self,
        message: str,
        status_code: int,
        errors: List[Any],
        entries: Optional[List[Any]] = None,
    ):
        super().__init__(message, {"status_code": status_code, "errors": errors})
        self.status_code = status_code
        self.errors = errors
        self.entries = entries or []
