"""
SGX SIGSTRUCT parsing.

A SIGSTRUCT is the 1808-byte enclave signature structure produced when an
enclave is signed. Enclave Manager identifies a build by MRENCLAVE (the
enclave hash stored in the SIGSTRUCT) and MRSIGNER (the SHA-256 of the
signer's RSA modulus as stored), together with ISVPRODID and ISVSVN.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union
from uuid import UUID
import logging
import struct

from em_client.core.client.errors import EmClientError
from em_client.core.hashing import sha256_hex
from em_client.models import CreateBuildRequest

logger = logging.getLogger(__name__)

SIGSTRUCT_SIZE = 1808

# field name: (offset, struct format); all integers little-endian
SIGSTRUCT_FIELDS = {
    "header": (0, "16s"),
    "vendor": (16, "<L"),
    "date": (20, "<L"),
    "header2": (24, "16s"),
    "swdefined": (40, "<L"),
    "modulus": (128, "384s"),
    "exponent": (512, "<L"),
    "signature": (516, "384s"),
    "miscselect": (900, "<L"),
    "miscmask": (904, "<L"),
    "attributes": (928, "16s"),
    "attributemask": (944, "16s"),
    "enclavehash": (960, "32s"),
    "isvprodid": (1024, "<H"),
    "isvsvn": (1026, "<H"),
    "q1": (1040, "384s"),
    "q2": (1424, "384s"),
}


class SigstructError(EmClientError):
    """A SIGSTRUCT could not be read or has the wrong layout."""

    def __init__(self, message: str, path: Optional[Union[str, Path]] = None, **kwargs):
        super().__init__(message, code="SIGSTRUCT_ERROR", **kwargs)
        if path is not None:
            self.details["path"] = str(path)


@dataclass(frozen=True)
class Sigstruct:
    header: bytes
    vendor: int
    date: int
    header2: bytes
    swdefined: int
    modulus: bytes
    exponent: int
    signature: bytes
    miscselect: int
    miscmask: int
    attributes: bytes
    attributemask: bytes
    enclavehash: bytes
    isvprodid: int
    isvsvn: int
    q1: bytes
    q2: bytes

    @property
    def mrenclave(self) -> str:
        return self.enclavehash.hex()

    @property
    def mrsigner(self) -> str:
        return sha256_hex(self.modulus)


def parse_sigstruct(data: bytes) -> Sigstruct:
    """Decode a raw SIGSTRUCT.

    Raises:
        SigstructError: if ``data`` is not exactly 1808 bytes
    """
    if len(data) != SIGSTRUCT_SIZE:
        raise SigstructError(
            f"Invalid SIGSTRUCT size: expected {SIGSTRUCT_SIZE} bytes, got {len(data)}"
        )

    fields = {}
    for name, (offset, fmt) in SIGSTRUCT_FIELDS.items():
        (fields[name],) = struct.unpack_from(fmt, data, offset)
    return Sigstruct(**fields)


def read_sigstruct(path: Union[str, Path]) -> Sigstruct:
    """Read and decode a SIGSTRUCT file."""
    try:
        data = Path(path).read_bytes()
    except OSError as e:
        raise SigstructError(f"Failed reading SIGSTRUCT {path}: {e}", path=path, original_error=e) from e

    try:
        sigstruct = parse_sigstruct(data)
    except SigstructError as e:
        e.details["path"] = str(path)
        raise
    logger.debug(f"Parsed SIGSTRUCT {path}: mrenclave={sigstruct.mrenclave}")
    return sigstruct


def build_request_from_sigstruct(
    source: Union[str, Path, Sigstruct],
    app_id: Optional[UUID] = None,
) -> CreateBuildRequest:
    """Build a ``CreateBuildRequest`` identifying the enclave a SIGSTRUCT describes."""
    sigstruct = source if isinstance(source, Sigstruct) else read_sigstruct(source)
    return CreateBuildRequest(
        mrenclave=sigstruct.mrenclave,
        mrsigner=sigstruct.mrsigner,
        isvprodid=sigstruct.isvprodid,
        isvsvn=sigstruct.isvsvn,
        app_id=app_id,
    )
