"""Zone models."""

from typing import Optional
from uuid import UUID

from .base import EmModel


class Zone(EmModel):
    acct_id: UUID
    certificate: str
    zone_id: UUID
    name: str
    description: Optional[str] = None


class ZoneJoinToken(EmModel):
    token: Optional[str] = None


class AddZoneRequest(EmModel):
    name: Optional[str] = None
    description: Optional[str] = None
