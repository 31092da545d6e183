"""Application endpoints."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from em_client.models import (
    App,
    AppBodyUpdateRequest,
    AppRequest,
    Certificate,
    CertificateDetails,
    GetAllAppsResponse,
)
from .base import NO_CONTENT, BaseApiClient, path_segment


class AppsApi(ABC):
    """Manage enclave applications."""

    @abstractmethod
    def add_application(self, body: AppRequest) -> App:
        pass

    @abstractmethod
    def delete_app(self, app_id: UUID) -> None:
        pass

    @abstractmethod
    def get_all_apps(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        all_search: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        sort_by: Optional[str] = None,
    ) -> GetAllAppsResponse:
        pass

    @abstractmethod
    def get_app(self, app_id: UUID) -> App:
        pass

    @abstractmethod
    def get_app_certificate(self, node_id: UUID, app_id: UUID) -> Certificate:
        pass

    @abstractmethod
    def get_app_node_certificate_details(self, node_id: UUID, app_id: UUID) -> CertificateDetails:
        pass

    @abstractmethod
    def update_app(self, app_id: UUID, body: AppBodyUpdateRequest) -> App:
        pass


class AppsClient(BaseApiClient, AppsApi):

    def add_application(self, body: AppRequest) -> App:
        return self._request("POST", "/apps", App, body=body)

    def delete_app(self, app_id: UUID) -> None:
        self._request("DELETE", f"/apps/{path_segment(app_id)}", expected=NO_CONTENT)

    def get_all_apps(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        all_search: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        sort_by: Optional[str] = None,
    ) -> GetAllAppsResponse:
        params = {
            "name": name,
            "description": description,
            "all_search": all_search,
            "limit": limit,
            "offset": offset,
            "sort_by": sort_by,
        }
        return self._request("GET", "/apps", GetAllAppsResponse, params=params)

    def get_app(self, app_id: UUID) -> App:
        return self._request("GET", f"/apps/{path_segment(app_id)}", App)

    def get_app_certificate(self, node_id: UUID, app_id: UUID) -> Certificate:
        path = f"/apps/{path_segment(app_id)}/node/{path_segment(node_id)}/certificate"
        return self._request("GET", path, Certificate)

    def get_app_node_certificate_details(self, node_id: UUID, app_id: UUID) -> CertificateDetails:
        path = f"/apps/{path_segment(app_id)}/node/{path_segment(node_id)}/certificate-details"
        return self._request("GET", path, CertificateDetails)

    def update_app(self, app_id: UUID, body: AppBodyUpdateRequest) -> App:
        return self._request("PATCH", f"/apps/{path_segment(app_id)}", App, body=body)
