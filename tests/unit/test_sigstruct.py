"""Tests for SIGSTRUCT parsing."""

import hashlib
import struct
from pathlib import Path
from uuid import UUID

import pytest

from em_client.core.sigstruct import (
    SIGSTRUCT_SIZE,
    Sigstruct,
    SigstructError,
    build_request_from_sigstruct,
    parse_sigstruct,
    read_sigstruct,
)

ENCLAVE_HASH = bytes(range(32))
MODULUS = bytes((i * 7) % 256 for i in range(384))


def make_sigstruct(isvprodid: int = 0x0102, isvsvn: int = 0x0304) -> bytes:
    data = bytearray(SIGSTRUCT_SIZE)
    data[0:16] = bytes.fromhex("06000000e10000000000010000000000")
    struct.pack_into("<L", data, 16, 0x8086)
    struct.pack_into("<L", data, 20, 0x20240131)
    data[128:512] = MODULUS
    struct.pack_into("<L", data, 512, 3)
    data[960:992] = ENCLAVE_HASH
    struct.pack_into("<H", data, 1024, isvprodid)
    struct.pack_into("<H", data, 1026, isvsvn)
    return bytes(data)


@pytest.fixture
def sigstruct_file(tmp_path: Path) -> Path:
    path = tmp_path / "enclave.sig"
    path.write_bytes(make_sigstruct())
    return path


class TestParseSigstruct:
    """Test cases for parse_sigstruct."""

    def test_fields(self) -> None:
        """Test decoding of the fields used to identify a build."""
        sigstruct = parse_sigstruct(make_sigstruct())

        assert sigstruct.vendor == 0x8086
        assert sigstruct.date == 0x20240131
        assert sigstruct.exponent == 3
        assert sigstruct.modulus == MODULUS
        assert sigstruct.enclavehash == ENCLAVE_HASH
        assert sigstruct.isvprodid == 0x0102
        assert sigstruct.isvsvn == 0x0304

    def test_mrenclave(self) -> None:
        """Test that MRENCLAVE is the hex enclave hash."""
        sigstruct = parse_sigstruct(make_sigstruct())
        assert sigstruct.mrenclave == ENCLAVE_HASH.hex()

    def test_mrsigner(self) -> None:
        """Test that MRSIGNER is the SHA-256 of the modulus."""
        sigstruct = parse_sigstruct(make_sigstruct())
        assert sigstruct.mrsigner == hashlib.sha256(MODULUS).hexdigest()

    @pytest.mark.parametrize("size", [0, SIGSTRUCT_SIZE - 1, SIGSTRUCT_SIZE + 1])
    def test_wrong_size(self, size: int) -> None:
        """Test that only exactly sized input is accepted."""
        with pytest.raises(SigstructError, match=f"got {size}"):
            parse_sigstruct(b"\x00" * size)


class TestReadSigstruct:
    """Test cases for reading SIGSTRUCT files."""

    def test_read_file(self, sigstruct_file: Path) -> None:
        """Test reading from disk."""
        sigstruct = read_sigstruct(sigstruct_file)
        assert isinstance(sigstruct, Sigstruct)
        assert sigstruct.isvsvn == 0x0304

    def test_missing_file(self, tmp_path: Path) -> None:
        """Test the error for a missing file."""
        path = tmp_path / "missing.sig"

        with pytest.raises(SigstructError) as exc_info:
            read_sigstruct(path)

        assert exc_info.value.message.startswith(f"Failed reading SIGSTRUCT {path}")
        assert exc_info.value.details["path"] == str(path)

    def test_truncated_file(self, tmp_path: Path) -> None:
        """Test that a short file reports its path."""
        path = tmp_path / "short.sig"
        path.write_bytes(b"\x00" * 100)

        with pytest.raises(SigstructError) as exc_info:
            read_sigstruct(path)

        assert exc_info.value.details["path"] == str(path)


class TestBuildRequestFromSigstruct:
    """Test cases for build_request_from_sigstruct."""

    def test_from_path(self, sigstruct_file: Path) -> None:
        """Test building a request from a file."""
        app_id = UUID("5d3c1f0a-2b4e-4a6b-8c9d-0e1f2a3b4c5d")

        request = build_request_from_sigstruct(sigstruct_file, app_id=app_id)

        assert request.mrenclave == ENCLAVE_HASH.hex()
        assert request.mrsigner == hashlib.sha256(MODULUS).hexdigest()
        assert request.isvprodid == 0x0102
        assert request.isvsvn == 0x0304
        assert request.app_id == app_id

    def test_from_parsed(self) -> None:
        """Test building a request from an already parsed SIGSTRUCT."""
        request = build_request_from_sigstruct(parse_sigstruct(make_sigstruct(isvsvn=9)))

        assert request.isvsvn == 9
        assert request.app_id is None
        assert "app_id" not in request.to_json_dict()
