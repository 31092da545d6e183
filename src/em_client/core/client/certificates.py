"""Certificate endpoints."""

from abc import ABC, abstractmethod
from uuid import UUID

from em_client.models import Certificate, NewCertificateRequest, TaskResult
from .base import BaseApiClient, path_segment


class CertificatesApi(ABC):

    @abstractmethod
    def get_certificate(self, cert_id: UUID) -> Certificate:
        pass

    @abstractmethod
    def new_certificate(self, body: NewCertificateRequest) -> TaskResult:
        """Submit a CSR; issuance runs as a task."""


class CertificatesClient(BaseApiClient, CertificatesApi):

    def get_certificate(self, cert_id: UUID) -> Certificate:
        return self._request("GET", f"/certificates/{path_segment(cert_id)}", Certificate)

    def new_certificate(self, body: NewCertificateRequest) -> TaskResult:
        return self._request("POST", "/certificates", TaskResult, body=body)
