"""System endpoints."""

from abc import ABC, abstractmethod

from em_client.models import VersionResponse
from .base import BaseApiClient


class SystemApi(ABC):

    @abstractmethod
    def get_manager_version(self) -> VersionResponse:
        pass


class SystemClient(BaseApiClient, SystemApi):

    def get_manager_version(self) -> VersionResponse:
        return self._request("GET", "/sys/version", VersionResponse)
