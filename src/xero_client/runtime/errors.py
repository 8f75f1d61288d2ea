"""
Xero Client Error Model

This module provides the error handling framework for the Xero client.
Every failure raised by the package derives from XeroError and carries a
structured ErrorCode, so callers can tell request construction problems,
query builder misuse, transport failures and API responses apart.
"""

from __future__ import annotations
from typing import Optional, Dict, Any
from enum import IntEnum


class ErrorCode(IntEnum):
    """Error codes used by the Xero client."""

    # Success
    OK = 0

    # General errors (1-99)
    UNKNOWN = 1
    INTERNAL = 2
    CONFIGURATION = 3

    # Request construction errors (100-199)
    INVALID_METHOD = 100
    ALREADY_SENT = 101

    # Query builder errors (200-299)
    UNKNOWN_TYPE = 200
    NOT_PAGEABLE = 201
    INVALID_QUERY = 202

    # Transport errors (300-399)
    TRANSPORT_ERROR = 300

    # Response errors (400-599, mirroring HTTP status classes)
    RESPONSE_ERROR = 400
    BAD_REQUEST = 401
    UNAUTHORIZED = 402
    FORBIDDEN = 403
    NOT_FOUND = 404
    RATE_LIMIT_EXCEEDED = 405
    INTERNAL_SERVER_ERROR = 500
    NOT_IMPLEMENTED = 501
    NOT_AVAILABLE = 503
    PARSE_ERROR = 510


class XeroError(Exception):
    """
    Root of every error raised by this package.

    ``code`` says what kind of failure it is; ``details`` holds structured
    context such as the URL or the API's validation messages; ``cause`` is
    the lower-level exception, when there is one.
    """

    def __init__(self, message: str, code: ErrorCode = ErrorCode.UNKNOWN,
                 details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.code = code
        self.cause = cause
        self.details = dict(details) if details else {}

    def __str__(self) -> str:
        text = f"[{self.code.name}] {self.message}"
        if self.details:
            text += f" | Details: {self.details}"
        if self.cause is not None:
            text += f" | Caused by: {self.cause}"
        return text

    def to_dict(self) -> Dict[str, Any]:
        """Plain-dict form for logs and API boundaries; empty parts are left out."""
        optional = {
            "details": self.details or None,
            "cause": str(self.cause) if self.cause is not None else None,
        }
        return {
            "code": int(self.code),
            "message": self.message,
            **{key: value for key, value in optional.items() if value is not None},
        }


class ConfigurationError(XeroError):
    """Invalid client or signer configuration."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.CONFIGURATION, details, cause)


class InvalidMethodError(XeroError):
    """Request constructed with an unsupported HTTP method."""

    def __init__(self, method: Any, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"Invalid request method [{method}]", ErrorCode.INVALID_METHOD, details)
        self.method = method


class AlreadySentError(XeroError):
    """A request instance was sent twice."""

    def __init__(self, message: str = "Request has already been sent",
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.ALREADY_SENT, details)


class UnknownTypeError(XeroError):
    """Query target type could not be resolved against the model registry."""

    def __init__(self, identifier: Any, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"{identifier} is not a known model class", ErrorCode.UNKNOWN_TYPE, details)
        self.identifier = identifier


class NotPageableError(XeroError):
    """page() called for a type whose endpoint does not support paging."""

    def __init__(self, model_name: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(f"{model_name} does not support paging.", ErrorCode.NOT_PAGEABLE, details)
        self.model_name = model_name


class QueryError(XeroError):
    """Query builder used in an invalid state."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.INVALID_QUERY, details)


class TransportError(XeroError):
    """The HTTP exchange could not be completed at all."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.TRANSPORT_ERROR, details, cause)


class ResponseError(XeroError):
    """Base class for errors reported by the API in a response."""

    def __init__(self, message: str, code: ErrorCode = ErrorCode.RESPONSE_ERROR,
                 status: Optional[int] = None, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code, details)
        self.status = status


class ResponseParseError(ResponseError):
    """The response body could not be decoded."""

    def __init__(self, message: str, status: Optional[int] = None, cause: Optional[Exception] = None):
        super().__init__(message, ErrorCode.PARSE_ERROR, status)
        self.cause = cause


class BadRequestError(ResponseError):
    """400: the API rejected the request, usually with validation messages."""

    def __init__(self, message: str = "Bad request", status: int = 400,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.BAD_REQUEST, status, details)

    @property
    def validation_errors(self):
        return self.details.get("validation_errors", [])


class UnauthorizedError(ResponseError):
    """401: missing or rejected credentials."""

    def __init__(self, message: str = "Unauthorized", status: int = 401,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.UNAUTHORIZED, status, details)


class ForbiddenError(ResponseError):
    """403: credentials lack access to the resource."""

    def __init__(self, message: str = "Forbidden", status: int = 403,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.FORBIDDEN, status, details)


class NotFoundError(ResponseError):
    """404: the resource does not exist."""

    def __init__(self, message: str = "Resource not found", status: int = 404,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.NOT_FOUND, status, details)


class RateLimitExceededError(ResponseError):
    """The API rate limit was hit."""

    def __init__(self, message: str = "Rate limit exceeded", status: int = 429,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.RATE_LIMIT_EXCEEDED, status, details)


class InternalServerError(ResponseError):
    """5xx: the API failed while handling the request."""

    def __init__(self, message: str = "Internal server error", status: int = 500,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.INTERNAL_SERVER_ERROR, status, details)


class NotImplementedError_(ResponseError):
    """501: the method is not supported by the endpoint."""

    def __init__(self, message: str = "Method not implemented", status: int = 501,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.NOT_IMPLEMENTED, status, details)


class NotAvailableError(ResponseError):
    """503: the API is down for maintenance."""

    def __init__(self, message: str = "API not available", status: int = 503,
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(message, ErrorCode.NOT_AVAILABLE, status, details)


def error_from_status(status: int, message: Optional[str] = None,
                      details: Optional[Dict[str, Any]] = None,
                      rate_limited: bool = False) -> Optional[ResponseError]:
    """
    Create an appropriate error for an HTTP status code.

    Args:
        status: HTTP status code
        message: Message reported by the API, if any
        details: Additional error details
        rate_limited: Whether the response carried a rate limit problem

    Returns:
        Appropriate error instance or None if the status is not an error
    """
    if 200 <= status < 300 or status == 304:
        return None

    kwargs: Dict[str, Any] = {"status": status, "details": details}
    if message:
        kwargs["message"] = message

    if rate_limited or status == 429:
        return RateLimitExceededError(**kwargs)
    elif status == 400:
        return BadRequestError(**kwargs)
    elif status == 401:
        return UnauthorizedError(**kwargs)
    elif status == 403:
        return ForbiddenError(**kwargs)
    elif status == 404:
        return NotFoundError(**kwargs)
    elif status == 501:
        return NotImplementedError_(**kwargs)
    elif status == 503:
        return NotAvailableError(**kwargs)
    elif status >= 500:
        return InternalServerError(**kwargs)
    else:
        return ResponseError(message or f"Unexpected response status {status}",
                             ErrorCode.RESPONSE_ERROR, status, details)


__all__ = [
    "ErrorCode",
    "XeroError",
    "ConfigurationError",
    "InvalidMethodError",
    "AlreadySentError",
    "UnknownTypeError",
    "NotPageableError",
    "QueryError",
    "TransportError",
    "ResponseError",
    "ResponseParseError",
    "BadRequestError",
    "UnauthorizedError",
    "ForbiddenError",
    "NotFoundError",
    "RateLimitExceededError",
    "InternalServerError",
    "NotImplementedError_",
    "NotAvailableError",
    "error_from_status",
]
