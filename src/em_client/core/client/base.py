"""
HTTP plumbing shared by every Enclave Manager API group.

:class:`BaseApiClient` owns one ``httpx.Client`` and turns endpoint
descriptions (verb, path, query, body, declared status codes, response
type) into typed results or structured errors.
"""

import base64
import logging
import ssl
from typing import Any, Dict, Iterable, Mapping, Optional, Type, TypeVar, Union
from urllib.parse import quote, urlsplit

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from em_client import USER_AGENT
from .errors import (
    ApiError,
    ClientInitError,
    NoResponseError,
    ResponseDecodeError,
    UnexpectedStatusError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")

API_PREFIX = "/v1"
# Endpoints without a response body may answer either way.
NO_CONTENT = (200, 204)


def into_base_path(url: str, correct_scheme: Optional[str] = None) -> str:
    """Reduce a URL to ``scheme://host[:port]``.

    Args:
        url: Base URL of the service, any path is dropped
        correct_scheme: Scheme the URL must use, if any

    Raises:
        ClientInitError: if the URL is malformed, uses the wrong scheme or has no host
    """
    try:
        parts = urlsplit(url)
        port = parts.port
    except ValueError as e:
        raise ClientInitError(f"Invalid base URL {url!r}: {e}", original_error=e) from e

    if not parts.scheme:
        raise ClientInitError(f"Invalid base URL {url!r}: missing scheme")
    if correct_scheme is not None and parts.scheme != correct_scheme:
        raise ClientInitError(
            f"Invalid scheme {parts.scheme!r}, expected {correct_scheme!r}",
            code=ClientInitError.INVALID_SCHEME,
        )
    if not parts.hostname:
        raise ClientInitError(
            f"Base URL {url!r} has no host", code=ClientInitError.MISSING_HOST
        )

    host = parts.hostname
    if ":" in host:
        host = f"[{host}]"
    if port is not None:
        return f"{parts.scheme}://{host}:{port}"
    return f"{parts.scheme}://{host}"


def path_segment(value: Any) -> str:
    """Percent-encode a value for use as a single path segment."""
    return quote(str(value), safe="")


def _query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if hasattr(value, "value") and isinstance(value.value, str):
        return value.value
    return str(value)


def build_query(params: Optional[Mapping[str, Any]]) -> Dict[str, str]:
    """Drop unset parameters and render the rest as strings."""
    if not params:
        return {}
    return {k: _query_value(v) for k, v in params.items() if v is not None}


def _ssl_context_with_root_ca(root_ca_pem: str) -> ssl.SSLContext:
    context = ssl.create_default_context()
    try:
        context.load_verify_locations(cadata=root_ca_pem)
    except (ssl.SSLError, ValueError) as e:
        raise ClientInitError(
            f"Invalid root CA certificate: {e}",
            code=ClientInitError.INVALID_ROOT_CA,
            original_error=e,
        ) from e
    return context


class BaseApiClient:
    """Blocking HTTP client bound to one service base path."""

    def __init__(
        self,
        base_url: str,
        *,
        scheme: Optional[str] = None,
        token: Optional[str] = None,
        root_ca_pem: Optional[str] = None,
        verify: Union[bool, ssl.SSLContext] = True,
        timeout: float = 30.0,
        headers: Optional[Mapping[str, str]] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """Initialize the client.

        Args:
            base_url: Service URL, reduced to scheme, host and port
            scheme: Required URL scheme, e.g. ``"https"``
            token: Bearer token sent with every request
            root_ca_pem: Extra trusted root CA in PEM format
            verify: TLS verification setting when no root CA is given
            timeout: Request timeout in seconds
            headers: Additional default headers
            transport: Custom httpx transport, mainly for tests
        """
        self.base_path = into_base_path(base_url, scheme)

        default_headers = {
            "User-Agent": USER_AGENT,
            "Accept": "application/json",
        }
        if headers:
            default_headers.update(headers)

        if root_ca_pem:
            verify = _ssl_context_with_root_ca(root_ca_pem)

        self._http = httpx.Client(
            base_url=self.base_path,
            headers=default_headers,
            timeout=httpx.Timeout(timeout),
            verify=verify,
            transport=transport,
        )
        if token:
            self.set_bearer_token(token)

    @property
    def headers(self) -> httpx.Headers:
        """Default headers sent with every request."""
        return self._http.headers

    def set_bearer_token(self, token: str) -> None:
        self._http.headers["Authorization"] = f"Bearer {token}"

    def set_basic_auth(self, username: str, password: str) -> None:
        credentials = base64.b64encode(f"{username}:{password}".encode("utf-8")).decode("ascii")
        self._http.headers["Authorization"] = f"Basic {credentials}"

    def clear_auth(self) -> None:
        self._http.headers.pop("Authorization", None)

    def close(self) -> None:
        self._http.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.close()

    def _send(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        body: Optional[BaseModel] = None,
        expected: Iterable[int] = (200,),
    ) -> bytes:
        """Perform one request and return the raw body of an accepted response."""
        url = f"{API_PREFIX}{path}"
        request_headers = {}
        content = None
        if body is not None:
            content = body.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
            request_headers["Content-Type"] = "application/json"

        logger.debug(f"{method} {self.base_path}{url}")
        try:
            response = self._http.request(
                method,
                url,
                params=build_query(params),
                content=content,
                headers=request_headers,
            )
        except httpx.InvalidURL as e:
            raise ApiError(f"Unable to build URL: {e}", original_error=e) from e
        except httpx.TransportError as e:
            raise NoResponseError(f"No response received: {e}", original_error=e) from e

        if response.status_code not in tuple(expected):
            logger.warning(f"{method} {url} returned unexpected status {response.status_code}")
            raise UnexpectedStatusError(
                response.status_code,
                headers=response.headers,
                body=response.content.decode("utf-8", errors="replace"),
            )

        return response.content

    def _request(
        self,
        method: str,
        path: str,
        response_type: Optional[Type[T]] = None,
        *,
        params: Optional[Mapping[str, Any]] = None,
        body: Optional[BaseModel] = None,
        expected: Iterable[int] = (200,),
    ) -> Optional[T]:
        """Perform one request and validate the body against ``response_type``.

        With no ``response_type`` the body is discarded and ``None`` is returned.
        """
        raw = self._send(method, path, params=params, body=body, expected=expected)
        if response_type is None:
            return None
        return parse_body(decode_body(raw), response_type)


def decode_body(raw: bytes) -> str:
    """Decode a response body that is about to be parsed."""
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ResponseDecodeError(f"Response was not valid UTF8: {e}", original_error=e) from e


def parse_body(text: str, response_type: Type[T]) -> T:
    """Validate a JSON document against a model or other type."""
    try:
        return TypeAdapter(response_type).validate_json(text)
    except ValidationError as e:
        raise ResponseDecodeError(
            f"Response body did not match the schema: {e}", original_error=e
        ) from e
