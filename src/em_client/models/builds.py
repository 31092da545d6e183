"""Build models."""

from typing import List, Optional
from uuid import UUID

from pydantic import Field

from .base import EmModel
from .common import AdvancedSettings, DockerInfo, EnclaveInfo, SearchMetadata
from .enums import BuildDeploymentStatusType, BuildStatusType
from .tools import AuthConfig


class BuildStatus(EmModel):
    status: BuildStatusType
    status_updated_at: int


class BuildDeploymentStatus(EmModel):
    status: BuildDeploymentStatusType
    status_updated_at: int


class Build(EmModel):
    build_id: Optional[UUID] = None
    docker_info: Optional[DockerInfo] = None
    created_at: Optional[int] = None
    updated_at: Optional[int] = None
    app_id: Optional[UUID] = None
    app_name: Optional[str] = None
    status: BuildStatus
    deployment_status: Optional[BuildDeploymentStatus] = None
    enclave_info: Optional[EnclaveInfo] = None
    app_description: Optional[str] = None
    mem_size: Optional[int] = None
    threads: Optional[int] = None
    advanced_settings: Optional[AdvancedSettings] = None
    build_name: Optional[str] = None


class CreateBuildRequest(EmModel):
    """Register an enclave build by its measurement."""
    docker_info: Optional[DockerInfo] = None
    mrenclave: str
    mrsigner: str
    isvprodid: int
    isvsvn: int
    app_id: Optional[UUID] = None
    app_name: Optional[str] = None
    mem_size: Optional[int] = None
    threads: Optional[int] = None
    advanced_settings: Optional[AdvancedSettings] = None


class ConvertAppBuildRequest(EmModel):
    app_id: UUID
    docker_version: str
    input_auth_config: Optional[AuthConfig] = Field(default=None, alias="inputAuthConfig")
    output_auth_config: Optional[AuthConfig] = Field(default=None, alias="outputAuthConfig")
    auth_config: Optional[AuthConfig] = Field(default=None, alias="authConfig")
    debug: Optional[bool] = None
    mem_size: Optional[int] = Field(default=None, alias="memSize")
    threads: Optional[int] = None


class GetAllBuildsResponse(EmModel):
    metadata: Optional[SearchMetadata] = None
    items: List[Build]
