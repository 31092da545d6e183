"""Tests for the structured error system."""

import httpx
import pytest
from pydantic import BaseModel, ValidationError

from em_client.core.client.errors import (
    ApiError,
    ClientInitError,
    ConfigHashMismatchError,
    EmClientError,
    NoResponseError,
    ResponseDecodeError,
    SimpleErrorType,
    UnexpectedStatusError,
    classify_error,
    describe_error,
)


class TestEmClientError:
    """Test cases for the base error."""

    def test_str_includes_status_and_code(self) -> None:
        """Test string rendering with status and code."""
        error = EmClientError("boom", status=400, code="BAD")
        assert str(error) == "boom (Status: 400) (Code: BAD)"

    def test_str_plain_message(self) -> None:
        """Test string rendering without extra information."""
        assert str(EmClientError("boom")) == "boom"

    def test_to_dict(self) -> None:
        """Test dictionary representation."""
        error = ApiError("failed", status=500, details={"id": 1})
        data = error.to_dict()

        assert data == {
            "message": "failed",
            "status": 500,
            "code": "API_ERROR",
            "details": {"id": 1},
            "error_type": "permanent",
            "type": "ApiError",
        }

    def test_default_error_type_is_permanent(self) -> None:
        """Test that errors are permanent unless stated otherwise."""
        assert ClientInitError("bad url").error_type is SimpleErrorType.PERMANENT
        assert not ResponseDecodeError("bad body").is_temporary


class TestUnexpectedStatusError:
    """Test cases for UnexpectedStatusError."""

    def test_message_format(self) -> None:
        """Test that the message carries status, headers and body."""
        error = UnexpectedStatusError(
            404, headers={"content-type": "text/plain"}, body="no such build"
        )

        assert str(error) == (
            "Unexpected response code 404:\ncontent-type: text/plain\n\nno such build"
        )
        assert error.status == 404
        assert error.body == "no such build"
        assert error.headers == {"content-type": "text/plain"}

    @pytest.mark.parametrize("status", [429, 500, 502, 503])
    def test_temporary_statuses(self, status: int) -> None:
        """Test that throttling and server errors are temporary."""
        assert UnexpectedStatusError(status).is_temporary

    @pytest.mark.parametrize("status", [400, 401, 403, 404, 409])
    def test_permanent_statuses(self, status: int) -> None:
        """Test that client errors are permanent."""
        assert UnexpectedStatusError(status).error_type is SimpleErrorType.PERMANENT

    def test_is_api_error(self) -> None:
        """Test the class hierarchy."""
        assert isinstance(UnexpectedStatusError(500), ApiError)
        assert isinstance(NoResponseError(), EmClientError)


class TestConfigHashMismatchError:
    """Test cases for ConfigHashMismatchError."""

    def test_details(self) -> None:
        """Test that both digests are recorded."""
        error = ConfigHashMismatchError(expected="aa", actual="bb")

        assert error.details == {"expected": "aa", "actual": "bb"}
        assert error.code == "CONFIG_HASH_MISMATCH"
        assert "expected aa, got bb" in error.message


class TestClassifyError:
    """Test cases for classify_error."""

    def test_passes_through_client_errors(self) -> None:
        """Test that structured errors are returned unchanged."""
        error = ApiError("already structured")
        assert classify_error(error) is error

    def test_transport_error(self) -> None:
        """Test that connection failures become temporary NoResponseErrors."""
        classified = classify_error(httpx.ConnectError("refused"))

        assert isinstance(classified, NoResponseError)
        assert classified.is_temporary
        assert "refused" in classified.message

    def test_http_status_error(self) -> None:
        """Test conversion of httpx status errors."""
        request = httpx.Request("GET", "https://em.test/v1/zones")
        response = httpx.Response(503, text="maintenance", request=request)
        error = httpx.HTTPStatusError("503", request=request, response=response)

        classified = classify_error(error)

        assert isinstance(classified, UnexpectedStatusError)
        assert classified.status == 503
        assert classified.body == "maintenance"
        assert classified.is_temporary

    def test_validation_error(self) -> None:
        """Test conversion of schema validation failures."""

        class Sample(BaseModel):
            value: int

        with pytest.raises(ValidationError) as exc_info:
            Sample.model_validate({"value": "not a number"})

        classified = classify_error(exc_info.value)
        assert isinstance(classified, ResponseDecodeError)

    def test_unknown_error(self) -> None:
        """Test fallback for arbitrary exceptions."""
        classified = classify_error(RuntimeError("strange"))

        assert type(classified) is EmClientError
        assert classified.message == "strange"


class TestDescribeError:
    """Test cases for user-facing descriptions."""

    def test_unauthorized(self) -> None:
        """Test the hint shown for an expired session."""
        message = describe_error(UnexpectedStatusError(401))
        assert "em-cli user login" in message

    def test_forbidden(self) -> None:
        """Test the message for missing permissions."""
        assert "permission" in describe_error(UnexpectedStatusError(403))

    def test_not_found(self) -> None:
        """Test that the response body is included for 404."""
        message = describe_error(UnexpectedStatusError(404, body="app not found"))
        assert message == "Resource not found. app not found"

    def test_other_status(self) -> None:
        """Test the generic status description."""
        message = describe_error(UnexpectedStatusError(500, body="oops"))
        assert message == "Unexpected response code 500: oops"

    def test_no_response(self) -> None:
        """Test the connectivity hint."""
        message = describe_error(NoResponseError("No response received: refused"))
        assert message.startswith("No response received: refused.")
        assert "network connection" in message

    def test_plain_error(self) -> None:
        """Test that other errors are described by their message."""
        assert describe_error(ClientInitError("Invalid scheme 'http'")) == "Invalid scheme 'http'"
