"""Models exchanged with the node agent running on each compute node."""

from enum import Enum
from typing import Optional
from uuid import UUID

from pydantic import Field

from .base import EmModel


class ResponseStatus(str, Enum):
    OK = "OK"
    NOT_OK = "NOT_OK"


class NodeAgentTaskStatusType(str, Enum):
    INPROGRESS = "INPROGRESS"
    FAILED = "FAILED"
    SUCCESS = "SUCCESS"
    DENIED = "DENIED"
    PENDING_WHITELIST = "PENDING_WHITELIST"


class AgentManagerAuthRequest(EmModel):
    node_ip: Optional[str] = None
    node_name: Optional[str] = None


class AgentManagerAuthResponse(EmModel):
    access_token: Optional[str] = None


class AppHeartbeatRequest(EmModel):
    csr: Optional[str] = None
    node_id: Optional[UUID] = None


class AppHeartbeatResponse(EmModel):
    status: Optional[ResponseStatus] = None


class GetFortanixAttestationRequest(EmModel):
    report: Optional[str] = None
    attestation_csr: Optional[str] = None


class GetFortanixAttestationResponse(EmModel):
    attestation_certificate: Optional[str] = None
    node_certificate: Optional[str] = None
    fqpe_report: Optional[str] = None


class IssueCertificateRequest(EmModel):
    csr: Optional[str] = None


class IssueCertificateResponse(EmModel):
    task_id: Optional[UUID] = None
    task_status: Optional[NodeAgentTaskStatusType] = None
    certificate: Optional[str] = None


class NodeLocalData(EmModel):
    node_id: Optional[UUID] = None
    certificate: Optional[str] = None


class TargetInfo(EmModel):
    target_info: Optional[str] = Field(default=None, alias="targetInfo")


class AgentVersionResponse(EmModel):
    version: Optional[str] = None
