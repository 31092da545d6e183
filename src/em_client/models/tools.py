"""Image converter models."""

from typing import Any, List, Optional

from pydantic import Field

from .base import EmModel
from .common import CaCertificateConfig, CertificateConfig


class AuthConfig(EmModel):
    """Registry credentials."""
    username: Optional[str] = None
    password: Optional[str] = None


class SdkmsSigningKeyConfig(EmModel):
    name: Optional[str] = None
    api_key: Optional[str] = Field(default=None, alias="apiKey")


class SigningKeyConfig(EmModel):
    default: Optional[Any] = None
    sdkms: Optional[SdkmsSigningKeyConfig] = None


class ConversionRequest(EmModel):
    input_image_name: str = Field(alias="inputImageName")
    output_image_name: str = Field(alias="outputImageName")
    input_auth_config: Optional[AuthConfig] = Field(default=None, alias="inputAuthConfig")
    output_auth_config: Optional[AuthConfig] = Field(default=None, alias="outputAuthConfig")
    auth_config: Optional[AuthConfig] = Field(default=None, alias="authConfig")
    # memory size with unit, e.g. "1G"
    mem_size: Optional[str] = Field(default=None, alias="memSize")
    threads: Optional[int] = None
    debug: Optional[bool] = None
    entrypoint: Optional[List[str]] = None
    entrypoint_args: Optional[List[str]] = Field(default=None, alias="entrypointArgs")
    encrypted_dirs: Optional[List[str]] = Field(default=None, alias="encryptedDirs")
    manifest_options: Optional[Any] = Field(default=None, alias="manifestOptions")
    certificates: Optional[List[CertificateConfig]] = None
    ca_certificates: Optional[List[CaCertificateConfig]] = Field(default=None, alias="caCertificates")
    signing_key: Optional[SigningKeyConfig] = Field(default=None, alias="signingKey")
    external_packages: Optional[str] = Field(default=None, alias="externalPackages")
    app: Optional[Any] = None
    core_dump_pattern: Optional[str] = Field(default=None, alias="coreDumpPattern")
    log_file_path: Optional[str] = Field(default=None, alias="logFilePath")
    java_mode: Optional[str] = Field(default=None, alias="javaMode")
    rw_dirs: Optional[List[str]] = Field(default=None, alias="rwDirs")
    allow_cmdline_args: Optional[bool] = Field(default=None, alias="allowCmdlineArgs")
    manifest_env: Optional[List[str]] = Field(default=None, alias="manifestEnv")


class ConversionResponse(EmModel):
    new_image: Optional[str] = Field(default=None, alias="newImage")
    image_sha: Optional[str] = Field(default=None, alias="imageSHA")
    image_size: Optional[int] = Field(default=None, alias="imageSize")
    isvprodid: Optional[int] = None
    isvsvn: Optional[int] = None
    mrenclave: Optional[str] = None
    mrsigner: Optional[str] = None
