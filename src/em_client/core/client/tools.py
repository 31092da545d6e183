"""Image converter endpoint."""

from abc import ABC, abstractmethod

from em_client.models import ConversionRequest, ConversionResponse
from .base import BaseApiClient


class ToolsApi(ABC):

    @abstractmethod
    def convert_app(self, body: ConversionRequest) -> ConversionResponse:
        """Convert a container image into an enclave-ready image."""


class ToolsClient(BaseApiClient, ToolsApi):

    def convert_app(self, body: ConversionRequest) -> ConversionResponse:
        return self._request("POST", "/tools/converter/convert-app", ConversionResponse, body=body)
