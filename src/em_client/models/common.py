"""Models shared by several API groups."""

from typing import Any, List, Optional

from pydantic import Field

from .base import EmModel
from .enums import JavaRuntime


class SearchMetadata(EmModel):
    """Paging information attached to list responses."""
    page: int
    pages: int
    limit: int
    total_count: int
    filtered_count: int


class CertificateConfig(EmModel):
    issuer: Optional[str] = None
    subject: Optional[str] = None
    alt_names: Optional[List[str]] = Field(default=None, alias="altNames")
    key_type: Optional[str] = Field(default=None, alias="keyType")
    key_param: Optional[Any] = Field(default=None, alias="keyParam")
    key_path: Optional[str] = Field(default=None, alias="keyPath")
    cert_path: Optional[str] = Field(default=None, alias="certPath")
    chain_path: Optional[str] = Field(default=None, alias="chainPath")


class CaCertificateConfig(EmModel):
    ca_path: Optional[str] = Field(default=None, alias="caPath")
    ca_cert: Optional[str] = Field(default=None, alias="caCert")
    system: Optional[str] = None


class AdvancedSettings(EmModel):
    """Runtime options applied when an application image is converted."""
    entrypoint: Optional[List[str]] = None
    encrypted_dirs: Optional[List[str]] = Field(default=None, alias="encryptedDirs")
    certificate: Optional[CertificateConfig] = None
    ca_certificate: Optional[CaCertificateConfig] = Field(default=None, alias="caCertificate")
    java_runtime: Optional[JavaRuntime] = None
    rw_dirs: Optional[List[str]] = None
    allow_cmdline_args: Optional[bool] = Field(default=None, alias="allowCmdlineArgs")
    manifest_env: Optional[List[str]] = Field(default=None, alias="manifestEnv")


class EnclaveInfo(EmModel):
    """Measurement of an enclave: MRENCLAVE, MRSIGNER and ISV identifiers."""
    mrenclave: str
    mrsigner: str
    isvprodid: int
    isvsvn: int


class DockerInfo(EmModel):
    docker_image_name: str
    docker_version: str
    docker_image_sha: Optional[str] = None
    docker_image_size: Optional[int] = None
