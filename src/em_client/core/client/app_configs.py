"""
Application configuration endpoints.

Runtime configs are fetched as raw text and only parsed once their SHA-256
digest matches the one the caller pinned, so a tampered or substituted
config never reaches the application.
"""

from abc import ABC, abstractmethod
from typing import Optional
import logging

from em_client.core.hashing import SHA256_DIGEST_SIZE, digest_matches, sha256_hex
from em_client.models import (
    ApplicationConfig,
    ApplicationConfigResponse,
    GetAllApplicationConfigsResponse,
    RuntimeAppConfig,
    UpdateApplicationConfigRequest,
)
from .base import NO_CONTENT, BaseApiClient, decode_body, parse_body, path_segment
from .errors import ConfigHashMismatchError

logger = logging.getLogger(__name__)


class ApplicationConfigApi(ABC):
    """Manage application configs and fetch verified runtime configs."""

    @abstractmethod
    def create_application_config(self, body: ApplicationConfig) -> ApplicationConfigResponse:
        pass

    @abstractmethod
    def delete_application_config(self, config_id: str) -> None:
        pass

    @abstractmethod
    def get_all_application_configs(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        image_id: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> GetAllApplicationConfigsResponse:
        pass

    @abstractmethod
    def get_application_config(self, config_id: str) -> ApplicationConfigResponse:
        pass

    @abstractmethod
    def get_runtime_application_config(self, expected_hash: bytes) -> RuntimeAppConfig:
        """Fetch the runtime config of the calling application.

        Args:
            expected_hash: Raw 32-byte SHA-256 digest of the config text

        Raises:
            ValueError: if ``expected_hash`` is not 32 raw bytes
            ConfigHashMismatchError: if the fetched text hashes differently
        """

    @abstractmethod
    def get_specific_runtime_application_config(self, config_id: str) -> RuntimeAppConfig:
        pass

    @abstractmethod
    def update_application_config(
        self, config_id: str, body: UpdateApplicationConfigRequest
    ) -> ApplicationConfigResponse:
        pass


class ApplicationConfigClient(BaseApiClient, ApplicationConfigApi):

    def create_application_config(self, body: ApplicationConfig) -> ApplicationConfigResponse:
        return self._request("POST", "/app_configs", ApplicationConfigResponse, body=body)

    def delete_application_config(self, config_id: str) -> None:
        self._request(
            "DELETE", f"/app_configs/{path_segment(config_id)}", expected=NO_CONTENT
        )

    def get_all_application_configs(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        image_id: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> GetAllApplicationConfigsResponse:
        params = {
            "name": name,
            "description": description,
            "image_id": image_id,
            "limit": limit,
            "offset": offset,
        }
        return self._request(
            "GET", "/app_configs", GetAllApplicationConfigsResponse, params=params
        )

    def get_application_config(self, config_id: str) -> ApplicationConfigResponse:
        return self._request(
            "GET", f"/app_configs/{path_segment(config_id)}", ApplicationConfigResponse
        )

    def get_runtime_application_config(self, expected_hash: bytes) -> RuntimeAppConfig:
        if not isinstance(expected_hash, (bytes, bytearray)):
            raise ValueError(
                f"Expected the SHA-256 digest as bytes, got {type(expected_hash).__name__}"
            )
        if len(expected_hash) != SHA256_DIGEST_SIZE:
            raise ValueError(
                f"Expected a {SHA256_DIGEST_SIZE}-byte SHA-256 digest, got {len(expected_hash)} bytes"
            )

        raw = self._send("GET", "/runtime/app_configs")
        if not digest_matches(raw, expected_hash):
            logger.warning("Runtime config digest does not match the pinned value")
            raise ConfigHashMismatchError(expected=expected_hash.hex(), actual=sha256_hex(raw))

        return parse_body(decode_body(raw), RuntimeAppConfig)

    def get_specific_runtime_application_config(self, config_id: str) -> RuntimeAppConfig:
        return self._request(
            "GET", f"/runtime/app_configs/{path_segment(config_id)}", RuntimeAppConfig
        )

    def update_application_config(
        self, config_id: str, body: UpdateApplicationConfigRequest
    ) -> ApplicationConfigResponse:
        return self._request(
            "PATCH",
            f"/app_configs/{path_segment(config_id)}",
            ApplicationConfigResponse,
            body=body,
        )
