"""Build endpoints."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from em_client.models import (
    AppStatusType,
    Build,
    BuildDeploymentStatusType,
    BuildStatusType,
    ConvertAppBuildRequest,
    CreateBuildRequest,
    GetAllBuildDeploymentsResponse,
    GetAllBuildsResponse,
)
from .base import NO_CONTENT, BaseApiClient, path_segment


class BuildsApi(ABC):
    """Register, list and remove enclave builds."""

    @abstractmethod
    def convert_app_build(self, body: ConvertAppBuildRequest) -> Build:
        pass

    @abstractmethod
    def create_build(self, body: CreateBuildRequest) -> Build:
        pass

    @abstractmethod
    def delete_build(self, build_id: UUID) -> None:
        pass

    @abstractmethod
    def get_all_builds(
        self,
        all_search: Optional[str] = None,
        docker_image_name: Optional[str] = None,
        config_id: Optional[str] = None,
        deployed_status: Optional[BuildDeploymentStatusType] = None,
        status: Optional[BuildStatusType] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        sort_by: Optional[str] = None,
    ) -> GetAllBuildsResponse:
        pass

    @abstractmethod
    def get_build(self, build_id: UUID) -> Build:
        pass

    @abstractmethod
    def get_build_deployments(
        self,
        build_id: UUID,
        status: Optional[AppStatusType] = None,
        all_search: Optional[str] = None,
        sort_by: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> GetAllBuildDeploymentsResponse:
        pass


class BuildsClient(BaseApiClient, BuildsApi):

    def convert_app_build(self, body: ConvertAppBuildRequest) -> Build:
        return self._request("POST", "/builds/convert-app", Build, body=body)

    def create_build(self, body: CreateBuildRequest) -> Build:
        return self._request("POST", "/builds", Build, body=body)

    def delete_build(self, build_id: UUID) -> None:
        self._request("DELETE", f"/builds/{path_segment(build_id)}", expected=NO_CONTENT)

    def get_all_builds(
        self,
        all_search: Optional[str] = None,
        docker_image_name: Optional[str] = None,
        config_id: Optional[str] = None,
        deployed_status: Optional[BuildDeploymentStatusType] = None,
        status: Optional[BuildStatusType] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        sort_by: Optional[str] = None,
    ) -> GetAllBuildsResponse:
        params = {
            "all_search": all_search,
            "docker_image_name": docker_image_name,
            "config_id": config_id,
            "deployed_status": deployed_status,
            "status": status,
            "limit": limit,
            "offset": offset,
            "sort_by": sort_by,
        }
        return self._request("GET", "/builds", GetAllBuildsResponse, params=params)

    def get_build(self, build_id: UUID) -> Build:
        return self._request("GET", f"/builds/{path_segment(build_id)}", Build)

    def get_build_deployments(
        self,
        build_id: UUID,
        status: Optional[AppStatusType] = None,
        all_search: Optional[str] = None,
        sort_by: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> GetAllBuildDeploymentsResponse:
        params = {
            "status": status,
            "all_search": all_search,
            "sort_by": sort_by,
            "limit": limit,
            "offset": offset,
        }
        return self._request(
            "GET",
            f"/builds/deployments/{path_segment(build_id)}",
            GetAllBuildDeploymentsResponse,
            params=params,
        )
