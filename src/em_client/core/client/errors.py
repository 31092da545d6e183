"""
Structured error system for the Enclave Manager client.

Every failure raised by the client derives from :class:`EmClientError`.
Request failures additionally carry a :class:`SimpleErrorType` telling the
caller whether repeating the same call could succeed.
"""

from enum import Enum
from typing import Any, Dict, Mapping, Optional
import logging

import httpx
from pydantic import ValidationError

logger = logging.getLogger(__name__)


class SimpleErrorType(str, Enum):
    """Coarse classification of a failed call."""
    TEMPORARY = "temporary"
    PERMANENT = "permanent"


class EmClientError(Exception):
    """Base exception for all em-client errors."""

    def __init__(
        self,
        message: str,
        status: Optional[int] = None,
        code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
        error_type: SimpleErrorType = SimpleErrorType.PERMANENT,
    ):
        super().__init__(message)
        self.message = message
        self.status = status
        self.code = code
        self.details = details or {}
        self.original_error = original_error
        self.error_type = error_type

    @property
    def is_temporary(self) -> bool:
        return self.error_type is SimpleErrorType.TEMPORARY

    def to_dict(self) -> Dict[str, Any]:
        """Convert error to dictionary representation."""
        return {
            "message": self.message,
            "status": self.status,
            "code": self.code,
            "details": self.details,
            "error_type": self.error_type.value,
            "type": self.__class__.__name__,
        }

    def __str__(self) -> str:
        parts = [self.message]
        if self.status:
            parts.append(f"(Status: {self.status})")
        if self.code:
            parts.append(f"(Code: {self.code})")
        return " ".join(parts)


class ClientInitError(EmClientError):
    """The client could not be constructed from the given base URL."""

    INVALID_URL = "INVALID_URL"
    INVALID_SCHEME = "INVALID_SCHEME"
    MISSING_HOST = "MISSING_HOST"
    INVALID_ROOT_CA = "INVALID_ROOT_CA"

    def __init__(self, message: str, code: str = INVALID_URL, **kwargs):
        super().__init__(message, code=code, **kwargs)


class ApiError(EmClientError):
    """A call to the service failed."""

    def __init__(self, message: str, code: str = "API_ERROR", **kwargs):
        super().__init__(message, code=code, **kwargs)


class NoResponseError(ApiError):
    """The request never produced an HTTP response."""

    def __init__(self, message: str = "No response received", **kwargs):
        kwargs.setdefault("error_type", SimpleErrorType.TEMPORARY)
        super().__init__(message, code="NO_RESPONSE", **kwargs)


class UnexpectedStatusError(ApiError):
    """The service answered with a status code the endpoint does not declare."""

    def __init__(
        self,
        status: int,
        headers: Optional[Mapping[str, str]] = None,
        body: str = "",
        **kwargs
    ):
        self.headers = dict(headers or {})
        self.body = body
        rendered_headers = "\n".join(f"{k}: {v}" for k, v in self.headers.items())
        message = f"Unexpected response code {status}:\n{rendered_headers}\n\n{body}"
        if status == 429 or 500 <= status < 600:
            kwargs.setdefault("error_type", SimpleErrorType.TEMPORARY)
        super().__init__(message, status=status, code="UNEXPECTED_STATUS", **kwargs)

    def __str__(self) -> str:
        return self.message


class ResponseDecodeError(ApiError):
    """The response body was not UTF-8 or did not match the expected schema."""

    def __init__(self, message: str, **kwargs):
        super().__init__(message, code="DECODE_ERROR", **kwargs)


class ConfigHashMismatchError(ApiError):
    """A runtime config did not hash to the digest the caller expected."""

    def __init__(self, expected: str, actual: str, **kwargs):
        super().__init__(
            f"Runtime config hash mismatch: expected {expected}, got {actual}",
            code="CONFIG_HASH_MISMATCH",
            **kwargs
        )
        self.details["expected"] = expected
        self.details["actual"] = actual


def classify_error(error: Exception) -> EmClientError:
    """
    Classify a generic exception into a structured EmClientError.

    Args:
        error: The original exception

    Returns:
        Classified EmClientError instance
    """
    if isinstance(error, EmClientError):
        return error

    if isinstance(error, httpx.HTTPStatusError):
        response = error.response
        return UnexpectedStatusError(
            response.status_code,
            headers=response.headers,
            body=response.text,
            original_error=error,
        )
    if isinstance(error, httpx.TransportError):
        return NoResponseError(f"No response received: {error}", original_error=error)
    if isinstance(error, httpx.InvalidURL):
        return ApiError(f"Unable to build URL: {error}", original_error=error)
    if isinstance(error, ValidationError):
        return ResponseDecodeError(
            f"Response body did not match the schema: {error}", original_error=error
        )
    if isinstance(error, UnicodeDecodeError):
        return ResponseDecodeError(f"Response was not valid UTF8: {error}", original_error=error)

    return EmClientError(str(error), original_error=error)


def describe_error(error: EmClientError) -> str:
    """
    Create a one-line, user-facing description of an error.

    Args:
        error: The EmClientError to describe

    Returns:
        User-friendly error message
    """
    if isinstance(error, UnexpectedStatusError):
        if error.status == 401:
            return "Not authenticated or session expired. Please run 'em-cli user login' again."
        elif error.status == 403:
            return "You don't have permission to perform this operation in the selected account."
        elif error.status == 404:
            return f"Resource not found. {error.body}".strip()
        return f"Unexpected response code {error.status}: {error.body}".strip()

    elif isinstance(error, NoResponseError):
        return f"{error.message}. Please check the Enclave Manager URL and your network connection."

    elif isinstance(error, ConfigHashMismatchError):
        return error.message

    return error.message
