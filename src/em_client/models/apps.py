"""Application models."""

from typing import List, Optional
from uuid import UUID

from .base import EmModel
from .builds import Build
from .certificates import Certificate
from .common import AdvancedSettings, SearchMetadata
from .enums import AppStatusType


class AppStatus(EmModel):
    status: Optional[AppStatusType] = None
    status_updated_at: Optional[int] = None
    attested_at: Optional[int] = None


class AppNodeInfo(EmModel):
    """An application instance running on a node."""
    certificate: Certificate
    created_at: int
    node_id: UUID
    node_name: Optional[str] = None
    status: Optional[AppStatus] = None
    build_info: Optional[Build] = None
    message_count: Optional[int] = None
    key_id: Optional[str] = None
    is_debug: Optional[bool] = None


class App(EmModel):
    created_at: Optional[int] = None
    updated_at: Optional[int] = None
    name: str
    description: Optional[str] = None
    app_id: UUID
    input_image_name: str
    output_image_name: str
    isvprodid: int
    isvsvn: int
    mem_size: int
    threads: int
    allowed_domains: Optional[List[str]] = None
    whitelisted_domains: Optional[List[str]] = None
    nodes: Optional[List[AppNodeInfo]] = None
    advanced_settings: Optional[AdvancedSettings] = None
    pending_domain_whitelist_tasks: Optional[int] = None
    domains_added: Optional[List[str]] = None
    domains_removed: Optional[List[str]] = None


class AppRequest(EmModel):
    name: str
    description: Optional[str] = None
    input_image_name: str
    output_image_name: str
    isvprodid: int
    isvsvn: int
    mem_size: int
    threads: int
    allowed_domains: Optional[List[str]] = None
    advanced_settings: Optional[AdvancedSettings] = None


class AppBodyUpdateRequest(EmModel):
    """Partial update of an application; unset fields are left unchanged."""
    description: Optional[str] = None
    input_image_name: Optional[str] = None
    output_image_name: Optional[str] = None
    isvsvn: Optional[int] = None
    mem_size: Optional[int] = None
    threads: Optional[int] = None
    allowed_domains: Optional[List[str]] = None
    advanced_settings: Optional[AdvancedSettings] = None


class AppUpdateRequest(EmModel):
    status: AppStatusType


class GetAllAppsResponse(EmModel):
    metadata: Optional[SearchMetadata] = None
    items: List[App]


class GetAllBuildDeploymentsResponse(EmModel):
    metadata: Optional[SearchMetadata] = None
    items: List[AppNodeInfo]
