"""Tests for the shared HTTP plumbing of the API client."""

import base64
import logging
from uuid import UUID

import httpx
import pytest

from em_client import USER_AGENT
from em_client.core.client import Client
from em_client.core.client.base import build_query, into_base_path, path_segment
from em_client.core.client.errors import (
    ApiError,
    ClientInitError,
    NoResponseError,
    ResponseDecodeError,
    UnexpectedStatusError,
)
from em_client.models import AccountRequest, BuildStatusType


class TestIntoBasePath:
    """Test cases for base URL normalization."""

    def test_drops_path_and_query(self) -> None:
        """Test that only scheme and authority are kept."""
        assert into_base_path("https://em.example.com/console/?x=1") == "https://em.example.com"

    def test_keeps_port(self) -> None:
        """Test that an explicit port survives."""
        assert into_base_path("https://em.example.com:8443/v1") == "https://em.example.com:8443"

    def test_ipv6_host(self) -> None:
        """Test that IPv6 literals stay bracketed."""
        assert into_base_path("https://[::1]:8443/") == "https://[::1]:8443"

    def test_matching_scheme(self) -> None:
        """Test that a URL with the required scheme is accepted."""
        assert into_base_path("https://em.example.com", "https") == "https://em.example.com"

    def test_wrong_scheme(self) -> None:
        """Test rejection of a URL with another scheme."""
        with pytest.raises(ClientInitError) as exc_info:
            into_base_path("http://em.example.com", "https")

        assert exc_info.value.code == ClientInitError.INVALID_SCHEME

    def test_missing_host(self) -> None:
        """Test rejection of a URL without a host."""
        with pytest.raises(ClientInitError) as exc_info:
            into_base_path("https:///path")

        assert exc_info.value.code == ClientInitError.MISSING_HOST

    def test_missing_scheme(self) -> None:
        """Test rejection of a bare host name."""
        with pytest.raises(ClientInitError) as exc_info:
            into_base_path("em.example.com")

        assert exc_info.value.code == ClientInitError.INVALID_URL

    def test_invalid_port(self) -> None:
        """Test rejection of a non-numeric port."""
        with pytest.raises(ClientInitError) as exc_info:
            into_base_path("https://em.example.com:port")

        assert exc_info.value.code == ClientInitError.INVALID_URL


class TestRequestHelpers:
    """Test cases for path and query encoding."""

    def test_path_segment_escapes_separators(self) -> None:
        """Test that a value cannot introduce extra path segments."""
        assert path_segment("a/b c?") == "a%2Fb%20c%3F"

    def test_path_segment_uuid(self) -> None:
        """Test UUIDs are rendered in canonical form."""
        value = UUID("5d3c1f0a-2b4e-4a6b-8c9d-0e1f2a3b4c5d")
        assert path_segment(value) == "5d3c1f0a-2b4e-4a6b-8c9d-0e1f2a3b4c5d"

    def test_build_query(self) -> None:
        """Test that unset parameters are dropped and values stringified."""
        query = build_query({
            "name": "web",
            "limit": 10,
            "status": BuildStatusType.PENDING,
            "debug": False,
            "offset": None,
        })

        assert query == {"name": "web", "limit": "10", "status": "PENDING", "debug": "false"}

    def test_build_query_empty(self) -> None:
        """Test that no parameters yield an empty query."""
        assert build_query(None) == {}


class TestClientConstruction:
    """Test cases for client construction and default headers."""

    def test_default_headers(self, mock_api) -> None:
        """Test user agent and bearer token headers."""
        client = Client("https://em.test/some/path", token="abc", transport=mock_api.transport)

        assert client.base_path == "https://em.test"
        assert client.headers["User-Agent"] == USER_AGENT
        assert client.headers["Authorization"] == "Bearer abc"

    def test_no_token(self, mock_api) -> None:
        """Test that no Authorization header is sent without a token."""
        client = Client("https://em.test", transport=mock_api.transport)
        assert "Authorization" not in client.headers

    def test_basic_auth_and_clear(self, mock_api) -> None:
        """Test switching credentials."""
        client = Client("https://em.test", transport=mock_api.transport)

        client.set_basic_auth("alice@example.com", "secret")
        expected = base64.b64encode(b"alice@example.com:secret").decode("ascii")
        assert client.headers["Authorization"] == f"Basic {expected}"

        client.clear_auth()
        assert "Authorization" not in client.headers

    def test_wrong_scheme(self, mock_api) -> None:
        """Test that the scheme requirement is enforced at construction."""
        with pytest.raises(ClientInitError):
            Client("http://em.test", scheme="https", transport=mock_api.transport)

    def test_invalid_root_ca(self) -> None:
        """Test that an unparsable root CA is rejected."""
        with pytest.raises(ClientInitError) as exc_info:
            Client("https://em.test", root_ca_pem="not a certificate")

        assert exc_info.value.code == ClientInitError.INVALID_ROOT_CA

    def test_context_manager(self, mock_api) -> None:
        """Test that the client can be used as a context manager."""
        mock_api.add("GET", "/v1/sys/version", json_body={"version": "3.1"})

        with Client("https://em.test", transport=mock_api.transport) as client:
            assert client.get_manager_version().version == "3.1"


class TestSend:
    """Test cases for request dispatch and response handling."""

    def test_request_shape(self, client, mock_api, payloads) -> None:
        """Test URL prefix, auth header and JSON body."""
        mock_api.add("POST", "/v1/accounts", json_body=payloads.account())

        client.create_account(AccountRequest(name="acme"))

        request = mock_api.last
        assert str(request.url) == "https://em.test/v1/accounts"
        assert request.headers["Authorization"] == "Bearer test-token"
        assert request.headers["Content-Type"] == "application/json"
        assert mock_api.last_json() == {"name": "acme"}

    def test_unexpected_status(self, client, mock_api, caplog) -> None:
        """Test that undeclared status codes raise with the body attached."""
        mock_api.add("GET", "/v1/sys/version", status=503, text="maintenance")

        with caplog.at_level(logging.WARNING):
            with pytest.raises(UnexpectedStatusError) as exc_info:
                client.get_manager_version()

        error = exc_info.value
        assert error.status == 503
        assert error.body == "maintenance"
        assert error.is_temporary
        assert "unexpected status 503" in caplog.text

    def test_error_status_on_success_only_endpoint(self, client, mock_api) -> None:
        """Test that 201 is not accepted where 200 is declared."""
        mock_api.add("GET", "/v1/sys/version", status=201, json_body={"version": "1"})

        with pytest.raises(UnexpectedStatusError) as exc_info:
            client.get_manager_version()

        assert exc_info.value.status == 201

    def test_no_content_accepted(self, client, mock_api, payloads) -> None:
        """Test that 204 is accepted for endpoints without a result."""
        mock_api.add("DELETE", f"/v1/builds/{payloads.BUILD_ID}", status=204)

        assert client.delete_build(UUID(payloads.BUILD_ID)) is None

    def test_invalid_utf8(self, client, mock_api) -> None:
        """Test that a body which is not UTF-8 is reported."""
        mock_api.add("GET", "/v1/sys/version", content=b"\xff\xfe\xfa")

        with pytest.raises(ResponseDecodeError, match="not valid UTF8"):
            client.get_manager_version()

    def test_invalid_utf8_ignored_without_result(self, client, mock_api, payloads) -> None:
        """Test that the body of an endpoint without a result is not decoded."""
        mock_api.add("DELETE", f"/v1/builds/{payloads.BUILD_ID}", content=b"\xff\xfe")

        assert client.delete_build(UUID(payloads.BUILD_ID)) is None

    def test_schema_mismatch(self, client, mock_api) -> None:
        """Test that a body not matching the model is reported."""
        mock_api.add("GET", "/v1/zones", json_body={"not": "a list"})

        with pytest.raises(ResponseDecodeError, match="did not match"):
            client.get_zones()

    def test_malformed_json(self, client, mock_api) -> None:
        """Test that a body which is not JSON is reported."""
        mock_api.add("GET", "/v1/sys/version", text="<html>")

        with pytest.raises(ResponseDecodeError):
            client.get_manager_version()

    def test_transport_failure(self, mock_api) -> None:
        """Test that connection failures become temporary errors."""

        def refuse(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        mock_api.add_handler("GET", "/v1/sys/version", refuse)
        client = Client("https://em.test", transport=mock_api.transport)

        with pytest.raises(NoResponseError) as exc_info:
            client.get_manager_version()

        assert exc_info.value.is_temporary
        assert "connection refused" in exc_info.value.message


class TestLogin:
    """Test cases for the login helper."""

    def test_login_switches_to_bearer(self, mock_api) -> None:
        """Test that Basic credentials are exchanged for a bearer token."""
        mock_api.add("POST", "/v1/sys/auth", json_body={"access_token": "fresh-token"})
        client = Client("https://em.test", transport=mock_api.transport)

        token = client.login("alice@example.com", "secret")

        expected = base64.b64encode(b"alice@example.com:secret").decode("ascii")
        assert token == "fresh-token"
        assert mock_api.last.headers["Authorization"] == f"Basic {expected}"
        assert client.headers["Authorization"] == "Bearer fresh-token"

    def test_login_without_token(self, mock_api) -> None:
        """Test that a response without a token is an error."""
        mock_api.add("POST", "/v1/sys/auth", json_body={})
        client = Client("https://em.test", transport=mock_api.transport)

        with pytest.raises(ApiError, match="access token"):
            client.login("alice@example.com", "secret")

    def test_login_rejected(self, mock_api) -> None:
        """Test that wrong credentials surface the status code."""
        mock_api.add("POST", "/v1/sys/auth", status=401, text="bad credentials")
        client = Client("https://em.test", transport=mock_api.transport)

        with pytest.raises(UnexpectedStatusError) as exc_info:
            client.login("alice@example.com", "wrong")

        assert exc_info.value.status == 401
