"""
Tests for the error taxonomy.
"""
import asyncio

import pytest

from ovpn_cloud.errors import (
    # Base
    ErrorCode,
    ErrorContext,
    OvpnCloudError,
    # Remote API errors
    ApiError,
    ApiConnectionError,
    ApiTimeoutError,
    AuthenticationError,
    ConflictError,
    NotFoundError,
    RateLimitError,
    RemoteValidationError,
    ServiceUnavailableError,
    # Validation errors
    SchemaValidationError,
    ValidationError,
    # Config errors
    MissingCredentialsError,
    # Utilities
    error_from_status,
    is_retryable,
)


class TestErrorCodes:
    """Test error code enumeration."""

    def test_error_codes_are_strings(self):
        assert ErrorCode.RATE_LIMIT.value.startswith("ERR_")
        assert ErrorCode.AUTHENTICATION.value.startswith("ERR_")

    def test_error_codes_unique(self):
        values = [e.value for e in ErrorCode]
        assert len(values) == len(set(values))


class TestErrorContext:
    def test_to_dict(self):
        ctx = ErrorContext(
            request_id="req_456",
            resource="openvpncloud_route",
            extra={"custom": "data"},
        )

        d = ctx.to_dict()

        assert d["request_id"] == "req_456"
        assert d["resource"] == "openvpncloud_route"
        assert d["custom"] == "data"


class TestOvpnCloudError:
    """Test base error."""

    def test_create_error(self):
        error = OvpnCloudError("Something went wrong")

        assert error.message == "Something went wrong"
        assert error.code == ErrorCode.INTERNAL_ERROR
        assert not error.retryable

    def test_error_str_includes_code_and_request(self):
        error = OvpnCloudError("Test error", context=ErrorContext(request_id="req_1"))
        s = str(error)

        assert "ERR_9000" in s
        assert "Test error" in s
        assert "req_1" in s

    def test_to_dict(self):
        error = OvpnCloudError("Test error", cause=ValueError("inner"))

        d = error.to_dict()

        assert d["error_type"] == "OvpnCloudError"
        assert d["cause"] == "inner"


class TestApiErrors:
    """Test remote API errors."""

    def test_authentication_error(self):
        error = AuthenticationError()

        assert error.code == ErrorCode.AUTHENTICATION
        assert error.retryable is False
        assert error.http_status == 401
        assert error.message == "unauthorized"

    def test_rate_limit_error(self):
        error = RateLimitError(retry_after=30.0)

        assert error.retryable is True
        assert error.http_status == 429
        assert error.retry_after == 30.0

    def test_timeout_error(self):
        error = ApiTimeoutError(timeout=5.0)

        assert error.retryable is True
        assert error.timeout == 5.0

    def test_hierarchy(self):
        assert issubclass(NotFoundError, ApiError)
        assert issubclass(SchemaValidationError, ValidationError)
        assert issubclass(ApiError, OvpnCloudError)

    def test_missing_credentials(self):
        error = MissingCredentialsError(env_var="OPENVPN_CLIENT_ID")

        assert error.env_var == "OPENVPN_CLIENT_ID"
        assert error.code == ErrorCode.MISSING_CREDENTIALS


class TestErrorFromStatus:
    """Test error_from_status utility."""

    @pytest.mark.parametrize(
        "status,expected",
        [
            (400, RemoteValidationError),
            (401, AuthenticationError),
            (403, AuthenticationError),
            (404, NotFoundError),
            (409, ConflictError),
            (429, RateLimitError),
            (503, ServiceUnavailableError),
            (504, ApiTimeoutError),
            (418, ApiError),
        ],
    )
    def test_mapping(self, status, expected):
        error = error_from_status(status, "boom")

        assert type(error) is expected
        assert error.http_status == status
        assert error.message == "boom"

    def test_403_keeps_status(self):
        assert error_from_status(403, "forbidden").http_status == 403


class TestIsRetryable:
    def test_classification(self):
        assert is_retryable(ServiceUnavailableError())
        assert is_retryable(ApiConnectionError("refused"))
        assert not is_retryable(AuthenticationError())
        assert is_retryable(asyncio.TimeoutError())
        assert not is_retryable(ValueError("x"))
