"""
Application configuration models.

An application config maps file paths inside the enclave to their contents.
The runtime variant is what a running application fetches and verifies
against a known SHA-256 digest before use.
"""

from typing import Any, Dict, List, Optional

from .base import EmModel
from .common import SearchMetadata


class ApplicationConfigContents(EmModel):
    contents: Optional[str] = None


class ApplicationConfig(EmModel):
    name: str
    description: Optional[str] = None
    app_config: Dict[str, ApplicationConfigContents]
    labels: Optional[Dict[str, str]] = None
    ports: Optional[List[str]] = None


class ApplicationConfigResponse(EmModel):
    config_id: str
    created_at: Optional[int] = None
    updated_at: Optional[int] = None
    name: str
    description: Optional[str] = None
    app_config: Dict[str, ApplicationConfigContents]
    labels: Optional[Dict[str, str]] = None
    ports: Optional[List[str]] = None


class UpdateApplicationConfigRequest(EmModel):
    name: Optional[str] = None
    description: Optional[str] = None
    app_config: Optional[Dict[str, ApplicationConfigContents]] = None
    labels: Optional[Dict[str, str]] = None
    ports: Optional[List[str]] = None


class GetAllApplicationConfigsResponse(EmModel):
    metadata: Optional[SearchMetadata] = None
    items: List[ApplicationConfigResponse]


class HashedConfig(EmModel):
    """The part of a runtime config covered by its digest."""
    app_config: Dict[str, ApplicationConfigContents]
    labels: Optional[Dict[str, str]] = None
    ports: Optional[List[str]] = None


class RuntimeAppConfig(EmModel):
    config: HashedConfig
    extra: Optional[Dict[str, Any]] = None
