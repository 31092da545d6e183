"""Compute node endpoints."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from em_client.models import (
    Certificate,
    CertificateDetails,
    GetAllNodesResponse,
    Node,
    NodeProvisionRequest,
    NodeStatusType,
    NodeUpdateRequest,
    TaskResult,
)
from .base import NO_CONTENT, BaseApiClient, path_segment


class NodesApi(ABC):
    """Provision, inspect and deactivate compute nodes."""

    @abstractmethod
    def deactivate_node(self, node_id: UUID) -> None:
        pass

    @abstractmethod
    def get_all_nodes(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        sgx_version: Optional[str] = None,
        all_search: Optional[str] = None,
        status: Optional[NodeStatusType] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        sort_by: Optional[str] = None,
    ) -> GetAllNodesResponse:
        pass

    @abstractmethod
    def get_node(self, node_id: UUID) -> Node:
        pass

    @abstractmethod
    def get_node_certificate(self, node_id: UUID) -> Certificate:
        pass

    @abstractmethod
    def get_node_certificate_details(self, node_id: UUID) -> CertificateDetails:
        pass

    @abstractmethod
    def provision_node(self, body: NodeProvisionRequest) -> TaskResult:
        pass

    @abstractmethod
    def update_node(self, node_id: UUID, body: NodeUpdateRequest) -> Node:
        pass


class NodesClient(BaseApiClient, NodesApi):

    def deactivate_node(self, node_id: UUID) -> None:
        self._request(
            "POST", f"/nodes/{path_segment(node_id)}/deactivate", expected=NO_CONTENT
        )

    def get_all_nodes(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        sgx_version: Optional[str] = None,
        all_search: Optional[str] = None,
        status: Optional[NodeStatusType] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        sort_by: Optional[str] = None,
    ) -> GetAllNodesResponse:
        params = {
            "name": name,
            "description": description,
            "sgx_version": sgx_version,
            "all_search": all_search,
            "status": status,
            "limit": limit,
            "offset": offset,
            "sort_by": sort_by,
        }
        return self._request("GET", "/nodes", GetAllNodesResponse, params=params)

    def get_node(self, node_id: UUID) -> Node:
        return self._request("GET", f"/nodes/{path_segment(node_id)}", Node)

    def get_node_certificate(self, node_id: UUID) -> Certificate:
        return self._request("GET", f"/nodes/{path_segment(node_id)}/certificate", Certificate)

    def get_node_certificate_details(self, node_id: UUID) -> CertificateDetails:
        return self._request(
            "GET", f"/nodes/{path_segment(node_id)}/certificate-details", CertificateDetails
        )

    def provision_node(self, body: NodeProvisionRequest) -> TaskResult:
        return self._request("POST", "/nodes", TaskResult, body=body)

    def update_node(self, node_id: UUID, body: NodeUpdateRequest) -> Node:
        return self._request("PATCH", f"/nodes/{path_segment(node_id)}", Node, body=body)
