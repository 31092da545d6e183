"""
Configuration settings for em-cli.

This module provides configuration management using Pydantic settings
with support for environment variables and .env files.
"""

from typing import Any, Dict, Optional
from pathlib import Path
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_EDP_IMAGE_NAME = "EDP ENCLAVE APP - 5f42a1ee280cf158490a8"


class EmCliSettings(BaseSettings):
    """
    Main configuration settings for em-cli.

    Settings are loaded from multiple sources in order of preference:
    1. Environment variables (prefixed with EM_CLI_)
    2. Configuration files (.env)
    3. Default values
    """

    model_config = SettingsConfigDict(
        env_prefix="EM_CLI_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Session
    login_file: Path = Field(
        default_factory=lambda: Path.home() / ".em-login.json",
        description="File holding the URL, token and root CA of the last login"
    )

    # Connection
    timeout: float = Field(
        default=30.0,
        description="Request timeout in seconds",
        gt=0
    )

    require_https: bool = Field(
        default=True,
        description="Only accept https Enclave Manager URLs"
    )

    # Defaults for `app create`
    edp_image_name: str = Field(
        default=DEFAULT_EDP_IMAGE_NAME,
        description="Input and output image name used for new applications"
    )

    app_mem_size: int = Field(
        default=1024,
        description="Enclave memory size (MB) used for new applications",
        gt=0
    )

    app_threads: int = Field(
        default=128,
        description="Enclave thread count used for new applications",
        gt=0
    )

    # Logging
    log_level: str = Field(
        default="WARNING",
        description="Logging level"
    )

    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level '{v}'. Valid levels: {', '.join(sorted(valid_levels))}")
        return v_upper

    @property
    def url_scheme(self) -> Optional[str]:
        """Scheme the client enforces on base URLs, if any."""
        return "https" if self.require_https else None

    @property
    def effective_log_level(self) -> str:
        return "DEBUG" if self.debug else self.log_level

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to a plain dictionary."""
        data = self.model_dump()
        data["login_file"] = str(self.login_file)
        return data


def get_settings() -> EmCliSettings:
    """Get the current em-cli settings."""
    return EmCliSettings()
