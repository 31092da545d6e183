"""Certificate models."""

from typing import Optional
from uuid import UUID

from .base import EmModel
from .common import EnclaveInfo
from .enums import CertificateStatusType


class Certificate(EmModel):
    certificate_id: Optional[UUID] = None
    status: Optional[CertificateStatusType] = None
    csr: Optional[str] = None
    certificate: Optional[str] = None


class CertificateDetails(EmModel):
    """Parsed attributes of an issued certificate."""
    enclave_info: Optional[EnclaveInfo] = None
    subject_name: str
    issuer_name: str
    valid_until: int
    valid_from: int
    cpusvn: str
    ias_quote_status: str


class NewCertificateRequest(EmModel):
    csr: Optional[str] = None
    node_id: Optional[UUID] = None
