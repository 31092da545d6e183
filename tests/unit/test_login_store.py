"""Tests for persisted login data."""

import stat
from pathlib import Path

import pytest

from em_client.config.login_store import (
    LoginData,
    LoginDataError,
    clear_login_data,
    load_login_data,
    store_login_data,
)


class TestLoginStore:
    """Test cases for storing and loading the session."""

    def test_store_and_load(self, tmp_path: Path) -> None:
        """Test that stored data is read back unchanged."""
        path = tmp_path / "login.json"
        data = LoginData(url="https://em.example.com", token="abc", root_ca_str="PEM")

        store_login_data(path, data)

        assert load_login_data(path) == data

    def test_file_is_private(self, tmp_path: Path) -> None:
        """Test that the token file is readable by the owner only."""
        path = tmp_path / "login.json"
        store_login_data(path, LoginData(url="https://em.example.com", token="abc"))

        assert stat.S_IMODE(path.stat().st_mode) == 0o600

    def test_store_replaces_previous_session(self, tmp_path: Path) -> None:
        """Test that a new login overwrites the old one."""
        path = tmp_path / "login.json"
        store_login_data(path, LoginData(url="https://a.example.com", token="first-long-token"))
        store_login_data(path, LoginData(url="https://b.example.com", token="x"))

        loaded = load_login_data(path)
        assert loaded.url == "https://b.example.com"
        assert loaded.token == "x"

    def test_creates_parent_directories(self, tmp_path: Path) -> None:
        """Test storing below a directory that does not exist yet."""
        path = tmp_path / "nested" / "dir" / "login.json"
        store_login_data(path, LoginData(url="https://em.example.com", token="abc"))
        assert path.exists()

    def test_load_missing_file(self, tmp_path: Path) -> None:
        """Test the error when no session was stored."""
        path = tmp_path / "login.json"

        with pytest.raises(LoginDataError) as exc_info:
            load_login_data(path)

        message = exc_info.value.message
        assert message.startswith(f"Failed opening login-token file {path}")
        assert message.endswith("Please log in first.")

    def test_load_malformed_file(self, tmp_path: Path) -> None:
        """Test the error for a corrupt login file."""
        path = tmp_path / "login.json"
        path.write_text("{not json")

        with pytest.raises(LoginDataError, match="Failed parsing login-token file"):
            load_login_data(path)

    def test_clear(self, tmp_path: Path) -> None:
        """Test removing the stored session."""
        path = tmp_path / "login.json"
        store_login_data(path, LoginData(url="https://em.example.com", token="abc"))

        assert clear_login_data(path) is True
        assert not path.exists()
        assert clear_login_data(path) is False
