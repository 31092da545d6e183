"""
Shared building blocks for Enclave Manager models.

All request and response models derive from :class:`EmModel`, which accepts
both Python field names and wire aliases, ignores unknown fields, and
serializes without ``None`` values.
"""

import base64
import binascii
from typing import Annotated, Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, PlainSerializer, PlainValidator


def _decode_byte_array(value: Any) -> bytes:
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    if isinstance(value, str):
        try:
            return base64.b64decode(value, validate=True)
        except binascii.Error as e:
            raise ValueError(f"Invalid base64 data: {e}") from e
    raise ValueError(f"Expected base64 string, got {type(value).__name__}")


def _encode_byte_array(value: bytes) -> str:
    return base64.b64encode(value).decode("ascii")


# Binary payloads travel as standard base64 strings.
ByteArray = Annotated[
    bytes,
    PlainValidator(_decode_byte_array),
    PlainSerializer(_encode_byte_array, return_type=str),
]


class EmModel(BaseModel):
    """Base class for all Enclave Manager DTOs."""

    model_config = ConfigDict(
        populate_by_name=True,
        extra="ignore",
    )

    def to_json_dict(self) -> Dict[str, Any]:
        """Wire representation: aliases applied, unset optionals dropped."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    def to_json(self, indent: Optional[int] = None) -> str:
        return self.model_dump_json(by_alias=True, exclude_none=True, indent=indent)
