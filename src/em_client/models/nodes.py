"""Compute node models."""

from typing import List, Optional
from uuid import UUID

from .apps import AppNodeInfo
from .base import ByteArray, EmModel
from .common import SearchMetadata
from .enums import NodeStatusType


class SgxInfo(EmModel):
    version: Optional[str] = None


class NodeStatus(EmModel):
    status: NodeStatusType
    created_at: int
    status_updated_at: int


class Node(EmModel):
    name: str
    description: Optional[str] = None
    acct_id: UUID
    ipaddress: Optional[str] = None
    node_id: UUID
    host_id: Optional[str] = None
    zone_id: Optional[UUID] = None
    status: NodeStatus
    attested_at: Optional[int] = None
    certificate: Optional[str] = None
    apps: List[AppNodeInfo]
    sgx_info: SgxInfo


class AttestationRequest(EmModel):
    ias_quote: Optional[ByteArray] = None
    csr: Optional[str] = None


class NodeProvisionRequest(EmModel):
    name: str
    description: Optional[str] = None
    ipaddress: str
    host_id: Optional[str] = None
    sgx_version: str
    attestation_request: AttestationRequest


class NodeUpdateRequest(EmModel):
    name: str
    description: Optional[str] = None
    ipaddress: str
    status: Optional[NodeStatus] = None
    sgx_version: str


class GetAllNodesResponse(EmModel):
    metadata: Optional[SearchMetadata] = None
    items: List[Node]
