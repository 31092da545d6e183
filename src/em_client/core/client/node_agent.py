"""
Client for the node agent.

The node agent runs on every compute node and brokers attestation and
certificate issuance between local enclaves and the Enclave Manager. It
speaks the same JSON-over-HTTP conventions as the manager itself.
"""

from abc import ABC, abstractmethod
from uuid import UUID

from em_client.models.node_agent import (
    AgentVersionResponse,
    GetFortanixAttestationRequest,
    GetFortanixAttestationResponse,
    IssueCertificateRequest,
    IssueCertificateResponse,
    TargetInfo,
)
from .base import BaseApiClient, path_segment


class NodeAgentApi(ABC):

    @abstractmethod
    def get_issue_certificate_response(self, task_id: UUID) -> IssueCertificateResponse:
        """Poll the result of an earlier certificate issuance."""

    @abstractmethod
    def issue_certificate(self, body: IssueCertificateRequest) -> IssueCertificateResponse:
        pass

    @abstractmethod
    def get_fortanix_attestation(
        self, body: GetFortanixAttestationRequest
    ) -> GetFortanixAttestationResponse:
        pass

    @abstractmethod
    def get_target_info(self) -> TargetInfo:
        pass

    @abstractmethod
    def get_agent_version(self) -> AgentVersionResponse:
        pass


class NodeAgentClient(BaseApiClient, NodeAgentApi):

    def get_issue_certificate_response(self, task_id: UUID) -> IssueCertificateResponse:
        return self._request(
            "POST", f"/certificate/result/{path_segment(task_id)}", IssueCertificateResponse
        )

    def issue_certificate(self, body: IssueCertificateRequest) -> IssueCertificateResponse:
        return self._request("POST", "/certificate/issue", IssueCertificateResponse, body=body)

    def get_fortanix_attestation(
        self, body: GetFortanixAttestationRequest
    ) -> GetFortanixAttestationResponse:
        return self._request(
            "POST", "/enclave/attest", GetFortanixAttestationResponse, body=body
        )

    def get_target_info(self) -> TargetInfo:
        return self._request("GET", "/enclave/target-info", TargetInfo)

    def get_agent_version(self) -> AgentVersionResponse:
        return self._request("GET", "/sys/version", AgentVersionResponse)
