"""
Persisted login data.

``em-cli user login`` stores the Enclave Manager URL, the access token and
an optional extra root CA so later commands can reuse the session.
"""

from pathlib import Path
from typing import Optional
import logging
import os

from pydantic import BaseModel, ValidationError

from em_client.core.client.errors import EmClientError

logger = logging.getLogger(__name__)


class LoginDataError(EmClientError):
    """The login file is missing, unreadable or malformed."""

    def __init__(self, message: str, path: Optional[Path] = None, **kwargs):
        super().__init__(message, code="LOGIN_DATA_ERROR", **kwargs)
        if path is not None:
            self.details["path"] = str(path)


class LoginData(BaseModel):
    url: str
    token: str
    root_ca_str: Optional[str] = None


def store_login_data(path: Path, data: LoginData) -> None:
    """Write login data, replacing any previous session.

    The file holds a bearer token, so it is created readable by the owner only.
    """
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(data.model_dump_json(indent=2))
    except OSError as e:
        raise LoginDataError(
            f"Failed writing login-token file {path}, {e}", path=path, original_error=e
        ) from e
    logger.debug(f"Stored login data in {path}")


def load_login_data(path: Path) -> LoginData:
    path = Path(path)
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise LoginDataError(
            f"Failed opening login-token file {path}, {e}. Please log in first.",
            path=path,
            original_error=e,
        ) from e

    try:
        return LoginData.model_validate_json(raw)
    except ValidationError as e:
        raise LoginDataError(
            f"Failed parsing login-token file {path}, {e}", path=path, original_error=e
        ) from e


def clear_login_data(path: Path) -> bool:
    """Delete stored login data.

    Returns:
        True if a file was removed
    """
    path = Path(path)
    try:
        path.unlink()
    except FileNotFoundError:
        return False
    except OSError as e:
        raise LoginDataError(
            f"Failed removing login-token file {path}, {e}", path=path, original_error=e
        ) from e
    return True
