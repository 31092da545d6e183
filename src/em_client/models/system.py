"""Authentication, version and audit models."""

from typing import List, Optional
from uuid import UUID

from .base import EmModel
from .common import SearchMetadata
from .enums import EventActionType, EventActorType, EventSeverity


class AuthResponse(EmModel):
    access_token: Optional[str] = None


class VersionResponse(EmModel):
    version: Optional[str] = None


class AuditLog(EmModel):
    log_id: UUID
    zone_id: Optional[UUID] = None
    severity: EventSeverity
    description: str
    timestamp: int
    action_type: EventActionType
    actor_type: EventActorType
    user_id: UUID
    user_name: str
    app_id: UUID
    app_name: str
    node_id: UUID
    node_name: str


class GetAuditLogsResponse(EmModel):
    metadata: Optional[SearchMetadata] = None
    items: List[AuditLog]
