"""Shared fixtures: a recording mock transport and sample API payloads."""

import json
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

import httpx
import pytest

from em_client.core.client import Client

BASE_URL = "https://em.test"

ACCT_ID = "1c7d1e36-6c4a-4f4b-9f0e-6a1b8f0c2a11"
APP_ID = "5d3c1f0a-2b4e-4a6b-8c9d-0e1f2a3b4c5d"
BUILD_ID = "9a8b7c6d-5e4f-4a3b-9c1d-0e2f3a4b5c6d"
TASK_ID = "0f1e2d3c-4b5a-4968-8776-655443322110"
ZONE_ID = "3b2a1908-7f6e-4d5c-8b4a-392817161514"
NODE_ID = "7e6d5c4b-3a29-4817-9f6e-5d4c3b2a1908"
USER_ID = "c0ffee00-1234-4abc-8def-001122334455"
CERT_ID = "d1e2f3a4-b5c6-4d7e-8f90-a1b2c3d4e5f6"

Handler = Union[httpx.Response, Callable[[httpx.Request], httpx.Response]]


class MockApi:
    """Routes requests to canned responses and records what was sent."""

    def __init__(self) -> None:
        self.routes: Dict[Tuple[str, str], Handler] = {}
        self.requests: List[httpx.Request] = []
        self.transport = httpx.MockTransport(self._handle)

    def add(
        self,
        method: str,
        path: str,
        status: int = 200,
        json_body: Any = None,
        text: Optional[str] = None,
        content: Optional[bytes] = None,
    ) -> None:
        if content is not None:
            response = httpx.Response(status, content=content)
        elif text is not None:
            response = httpx.Response(status, text=text)
        elif json_body is not None:
            response = httpx.Response(status, json=json_body)
        else:
            response = httpx.Response(status)
        self.routes[(method, path)] = response

    def add_handler(self, method: str, path: str, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.routes[(method, path)] = handler

    def _handle(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        route = self.routes.get((request.method, request.url.raw_path.split(b"?")[0].decode("ascii")))
        if route is None:
            return httpx.Response(404, text=f"no route for {request.method} {request.url.path}")
        if callable(route):
            return route(request)
        return route

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self) -> Any:
        return json.loads(self.last.content)


@pytest.fixture
def mock_api() -> MockApi:
    return MockApi()


@pytest.fixture
def client(mock_api: MockApi) -> Client:
    api_client = Client(BASE_URL, scheme="https", token="test-token", transport=mock_api.transport)
    yield api_client
    api_client.close()


class Payloads:
    """Minimal valid JSON documents for the main resources."""

    ACCT_ID = ACCT_ID
    APP_ID = APP_ID
    BUILD_ID = BUILD_ID
    TASK_ID = TASK_ID
    ZONE_ID = ZONE_ID
    NODE_ID = NODE_ID
    USER_ID = USER_ID
    CERT_ID = CERT_ID

    @staticmethod
    def account(**overrides: Any) -> Dict[str, Any]:
        data = {
            "name": "acme",
            "acct_id": ACCT_ID,
            "created_at": 1600000000,
            "roles": ["MANAGER"],
            "status": "ACTIVE",
        }
        data.update(overrides)
        return data

    @staticmethod
    def app(**overrides: Any) -> Dict[str, Any]:
        data = {
            "name": "web",
            "app_id": APP_ID,
            "input_image_name": "registry/web:1",
            "output_image_name": "registry/web-sgx:1",
            "isvprodid": 1,
            "isvsvn": 2,
            "mem_size": 1024,
            "threads": 128,
            "allowed_domains": ["web.example.com"],
        }
        data.update(overrides)
        return data

    @staticmethod
    def build(**overrides: Any) -> Dict[str, Any]:
        data = {
            "build_id": BUILD_ID,
            "app_id": APP_ID,
            "status": {"status": "WHITELISTED", "status_updated_at": 1600000001},
            "enclave_info": {"mrenclave": "aa" * 32, "mrsigner": "bb" * 32, "isvprodid": 1, "isvsvn": 2},
        }
        data.update(overrides)
        return data

    @staticmethod
    def task(**overrides: Any) -> Dict[str, Any]:
        data = {
            "task_id": TASK_ID,
            "requester_info": {"requester_type": "USER", "user_id": USER_ID},
            "entity_id": BUILD_ID,
            "task_type": "BUILD_WHITELIST",
            "status": {"created_at": 1, "status_updated_at": 2, "status": "INPROGRESS"},
            "approvals": [],
        }
        data.update(overrides)
        return data

    @staticmethod
    def task_result(**overrides: Any) -> Dict[str, Any]:
        data = {
            "task_id": TASK_ID,
            "task_type": "BUILD_WHITELIST",
            "task_status": {"created_at": 1, "status_updated_at": 3, "status": "SUCCESS"},
        }
        data.update(overrides)
        return data

    @staticmethod
    def zone(**overrides: Any) -> Dict[str, Any]:
        data = {
            "acct_id": ACCT_ID,
            "certificate": "-----BEGIN CERTIFICATE-----\nMIIB\n-----END CERTIFICATE-----\n",
            "zone_id": ZONE_ID,
            "name": "default",
        }
        data.update(overrides)
        return data

    @staticmethod
    def node(**overrides: Any) -> Dict[str, Any]:
        data = {
            "name": "node-1",
            "acct_id": ACCT_ID,
            "node_id": NODE_ID,
            "status": {"status": "RUNNING", "created_at": 1, "status_updated_at": 2},
            "apps": [],
            "sgx_info": {"version": "2"},
        }
        data.update(overrides)
        return data

    @staticmethod
    def user(**overrides: Any) -> Dict[str, Any]:
        data = {
            "user_id": USER_ID,
            "user_email": "alice@example.com",
            "status": "ACTIVE",
            "roles": ["MANAGER"],
        }
        data.update(overrides)
        return data

    @staticmethod
    def certificate(**overrides: Any) -> Dict[str, Any]:
        data = {"certificate_id": CERT_ID, "status": "ISSUED", "certificate": "PEM"}
        data.update(overrides)
        return data

    @staticmethod
    def certificate_details(**overrides: Any) -> Dict[str, Any]:
        data = {
            "subject_name": "CN=web.example.com",
            "issuer_name": "CN=Enclave Manager",
            "valid_until": 1700000000,
            "valid_from": 1600000000,
            "cpusvn": "0000",
            "ias_quote_status": "OK",
        }
        data.update(overrides)
        return data


@pytest.fixture
def payloads() -> type:
    return Payloads
