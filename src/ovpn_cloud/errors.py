"""
Error taxonomy for ovpn-cloud.

This module provides a hierarchical exception system with:
- Error codes for programmatic handling
- Retryable vs non-retryable classification
- Structured context for debugging
- HTTP status mapping for the management API
"""

from __future__ import annotations

import asyncio
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Standardized error codes for the cloud client and resources."""

    # Remote API errors (1xxx)
    API_ERROR = "ERR_1000"
    RATE_LIMIT = "ERR_1001"
    AUTHENTICATION = "ERR_1002"
    NOT_FOUND = "ERR_1003"
    CONFLICT = "ERR_1004"
    REMOTE_VALIDATION = "ERR_1005"
    SERVICE_UNAVAILABLE = "ERR_1006"
    API_TIMEOUT = "ERR_1007"
    API_CONNECTION = "ERR_1008"
    INVALID_RESPONSE = "ERR_1009"

    # Validation errors (2xxx)
    VALIDATION_ERROR = "ERR_2000"
    SCHEMA_VALIDATION = "ERR_2001"

    # Configuration errors (6xxx)
    CONFIG_ERROR = "ERR_6000"
    MISSING_CREDENTIALS = "ERR_6001"
    INVALID_CONFIG = "ERR_6002"

    # Internal errors (9xxx)
    INTERNAL_ERROR = "ERR_9000"


@dataclass
class ErrorContext:
    """Structured context for error debugging."""

    request_id: str | None = None
    trace_id: str | None = None
    resource: str | None = None
    resource_id: str | None = None
    operation: str | None = None
    method: str | None = None
    path: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {
            "request_id": self.request_id,
            "trace_id": self.trace_id,
            "resource": self.resource,
            "resource_id": self.resource_id,
            "operation": self.operation,
            "method": self.method,
            "path": self.path,
            **self.extra,
        }


class OvpnCloudError(Exception):
    """
    Base exception for all ovpn-cloud errors.

    Attributes:
        code: Standardized error code for programmatic handling
        message: Human-readable error message
        retryable: Whether the operation can be retried
        context: Structured debugging context
        cause: Original exception that caused this error
    """

    code: ErrorCode = ErrorCode.INTERNAL_ERROR
    retryable: bool = False

    def __init__(
        self,
        message: str,
        *,
        code: ErrorCode | None = None,
        retryable: bool | None = None,
        context: ErrorContext | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        if retryable is not None:
            self.retryable = retryable
        self.context = context or ErrorContext()
        self.cause = cause

    def __str__(self) -> str:
        parts = [f"[{self.code.value}] {self.message}"]
        if self.context.request_id:
            parts.append(f"(request_id={self.context.request_id})")
        return " ".join(parts)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for logging/serialization."""
        return {
            "error_type": self.__class__.__name__,
            "code": self.code.value,
            "message": self.message,
            "retryable": self.retryable,
            "context": self.context.to_dict(),
            "cause": str(self.cause) if self.cause else None,
        }


# =============================================================================
# Remote API Errors
# =============================================================================


class ApiError(OvpnCloudError):
    """Base class for errors returned by the management API."""

    code = ErrorCode.API_ERROR
    retryable = False
    http_status: int | None = None

    def __init__(
        self,
        message: str,
        *,
        http_status: int | None = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.http_status = http_status


class AuthenticationError(ApiError):
    """Credentials were rejected or lack permission. Not retryable."""

    code = ErrorCode.AUTHENTICATION

    def __init__(
        self,
        message: str = "unauthorized",
        *,
        http_status: int | None = 401,
        **kwargs,
    ):
        super().__init__(message, http_status=http_status, **kwargs)


class NotFoundError(ApiError):
    """Requested object does not exist."""

    code = ErrorCode.NOT_FOUND

    def __init__(self, message: str = "Not found", **kwargs):
        kwargs.setdefault("http_status", 404)
        super().__init__(message, **kwargs)


class ConflictError(ApiError):
    """The request conflicts with the current state of the remote object."""

    code = ErrorCode.CONFLICT

    def __init__(self, message: str = "Conflict", **kwargs):
        kwargs.setdefault("http_status", 409)
        super().__init__(message, **kwargs)


class RemoteValidationError(ApiError):
    """The API rejected the request payload."""

    code = ErrorCode.REMOTE_VALIDATION

    def __init__(self, message: str = "Request rejected by the API", **kwargs):
        kwargs.setdefault("http_status", 400)
        super().__init__(message, **kwargs)


class RateLimitError(ApiError):
    """Rate limit exceeded. Operation can be retried after a delay."""

    code = ErrorCode.RATE_LIMIT
    retryable = True

    def __init__(
        self,
        message: str = "Rate limit exceeded",
        *,
        retry_after: float | None = None,
        **kwargs,
    ):
        kwargs.setdefault("http_status", 429)
        super().__init__(message, **kwargs)
        self.retry_after = retry_after


class ServiceUnavailableError(ApiError):
    """API is temporarily unavailable. Retryable."""

    code = ErrorCode.SERVICE_UNAVAILABLE
    retryable = True

    def __init__(self, message: str = "Service unavailable", **kwargs):
        kwargs.setdefault("http_status", 503)
        super().__init__(message, **kwargs)


class ApiTimeoutError(ApiError):
    """Request to the API timed out. Retryable."""

    code = ErrorCode.API_TIMEOUT
    retryable = True

    def __init__(
        self,
        message: str = "Request timed out",
        *,
        timeout: float | None = None,
        **kwargs,
    ):
        kwargs.setdefault("http_status", 504)
        super().__init__(message, **kwargs)
        self.timeout = timeout


class ApiConnectionError(ApiError):
    """Could not reach the API. Retryable."""

    code = ErrorCode.API_CONNECTION
    retryable = True


class InvalidResponseError(ApiError):
    """The API returned a body that could not be interpreted."""

    code = ErrorCode.INVALID_RESPONSE

    def __init__(self, message: str = "Invalid response from API", **kwargs):
        super().__init__(message, **kwargs)


# =============================================================================
# Validation Errors
# =============================================================================


class ValidationError(OvpnCloudError):
    """Base class for local validation errors."""

    code = ErrorCode.VALIDATION_ERROR
    retryable = False


class SchemaValidationError(ValidationError):
    """A configuration record does not satisfy its resource schema."""

    code = ErrorCode.SCHEMA_VALIDATION

    def __init__(
        self,
        message: str = "Schema validation failed",
        *,
        field_name: str | None = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.field_name = field_name


# =============================================================================
# Configuration Errors
# =============================================================================


class ConfigError(OvpnCloudError):
    """Base class for configuration errors."""

    code = ErrorCode.CONFIG_ERROR
    retryable = False


class MissingCredentialsError(ConfigError):
    """Required credentials or endpoint are not set."""

    code = ErrorCode.MISSING_CREDENTIALS

    def __init__(
        self,
        message: str = "Credentials not found",
        *,
        env_var: str | None = None,
        **kwargs,
    ):
        super().__init__(message, **kwargs)
        self.env_var = env_var


class InvalidConfigError(ConfigError):
    """Configuration is invalid."""

    code = ErrorCode.INVALID_CONFIG


# =============================================================================
# Error Mapping from HTTP Status Codes
# =============================================================================


def error_from_status(
    status: int,
    message: str,
    *,
    context: ErrorContext | None = None,
) -> ApiError:
    """
    Create an appropriate ApiError from an HTTP status code.

    Args:
        status: HTTP status code
        message: Error message from the API
        context: Additional error context

    Returns:
        Appropriate ApiError subclass
    """
    ctx = context or ErrorContext()

    error_map: dict[int, type[ApiError]] = {
        400: RemoteValidationError,
        401: AuthenticationError,
        403: AuthenticationError,
        404: NotFoundError,
        409: ConflictError,
        422: RemoteValidationError,
        429: RateLimitError,
        502: ServiceUnavailableError,
        503: ServiceUnavailableError,
        504: ApiTimeoutError,
    }

    error_class = error_map.get(status, ApiError)
    return error_class(message, http_status=status, context=ctx)


def is_retryable(error: Exception) -> bool:
    """
    Check if an error is retryable.

    The adapter never retries on its own; this is exposed for engines that
    carry a retry policy.
    """
    if isinstance(error, OvpnCloudError):
        return error.retryable

    retryable_types = (
        asyncio.TimeoutError,
        ConnectionError,
        TimeoutError,
    )
    return isinstance(error, retryable_types)


__all__ = [
    # Base
    "ErrorCode",
    "ErrorContext",
    "OvpnCloudError",
    # Remote API errors
    "ApiError",
    "AuthenticationError",
    "NotFoundError",
    "ConflictError",
    "RemoteValidationError",
    "RateLimitError",
    "ServiceUnavailableError",
    "ApiTimeoutError",
    "ApiConnectionError",
    "InvalidResponseError",
    # Validation errors
    "ValidationError",
    "SchemaValidationError",
    # Config errors
    "ConfigError",
    "MissingCredentialsError",
    "InvalidConfigError",
    # Utilities
    "error_from_status",
    "is_retryable",
]
