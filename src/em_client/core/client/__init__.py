"""
Enclave Manager API client.

Each API area has an abstract interface (``AccountsApi``, ``AppsApi``, ...)
and a concrete implementation over HTTP. :class:`Api` combines every
interface so callers can depend on the abstraction, and :class:`Client`
implements all of them against one base URL.

Example:
    >>> client = Client("https://em.example.com", scheme="https")
    >>> client.login("user@example.com", "secret")
    >>> client.get_zones()
"""

from .accounts import AccountsApi, AccountsClient
from .app_configs import ApplicationConfigApi, ApplicationConfigClient
from .apps import AppsApi, AppsClient
from .auth import AuthApi, AuthClient
from .base import API_PREFIX, BaseApiClient, into_base_path, path_segment
from .builds import BuildsApi, BuildsClient
from .certificates import CertificatesApi, CertificatesClient
from .errors import (
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
from .node_agent import NodeAgentApi, NodeAgentClient
from .nodes import NodesApi, NodesClient
from .system import SystemApi, SystemClient
from .tasks import TasksApi, TasksClient
from .tools import ToolsApi, ToolsClient
from .users import UsersApi, UsersClient
from .workflows import (
    WorkflowApi,
    WorkflowClient,
    WorkflowFinalApi,
    WorkflowFinalClient,
)
from .zones import ZonesApi, ZonesClient


class Api(
    AccountsApi,
    AppsApi,
    ApplicationConfigApi,
    AuthApi,
    BuildsApi,
    CertificatesApi,
    NodesApi,
    SystemApi,
    TasksApi,
    ToolsApi,
    UsersApi,
    WorkflowApi,
    WorkflowFinalApi,
    ZonesApi,
):
    """Every Enclave Manager operation."""


class Client(
    AccountsClient,
    AppsClient,
    ApplicationConfigClient,
    AuthClient,
    BuildsClient,
    CertificatesClient,
    NodesClient,
    SystemClient,
    TasksClient,
    ToolsClient,
    UsersClient,
    WorkflowClient,
    WorkflowFinalClient,
    ZonesClient,
    Api,
):
    """HTTP implementation of :class:`Api`."""


__all__ = [
    # Combined interface and client
    "Api",
    "Client",
    "BaseApiClient",
    "API_PREFIX",
    "into_base_path",
    "path_segment",
    # Per-area interfaces
    "AccountsApi",
    "AppsApi",
    "ApplicationConfigApi",
    "AuthApi",
    "BuildsApi",
    "CertificatesApi",
    "NodesApi",
    "SystemApi",
    "TasksApi",
    "ToolsApi",
    "UsersApi",
    "WorkflowApi",
    "WorkflowFinalApi",
    "ZonesApi",
    # Per-area clients
    "AccountsClient",
    "AppsClient",
    "ApplicationConfigClient",
    "AuthClient",
    "BuildsClient",
    "CertificatesClient",
    "NodesClient",
    "SystemClient",
    "TasksClient",
    "ToolsClient",
    "UsersClient",
    "WorkflowClient",
    "WorkflowFinalClient",
    "ZonesClient",
    # Node agent
    "NodeAgentApi",
    "NodeAgentClient",
    # Errors
    "ApiError",
    "ClientInitError",
    "ConfigHashMismatchError",
    "EmClientError",
    "NoResponseError",
    "ResponseDecodeError",
    "SimpleErrorType",
    "UnexpectedStatusError",
    "classify_error",
    "describe_error",
]
