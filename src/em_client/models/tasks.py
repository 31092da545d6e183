"""Approval task models."""

from typing import List, Optional
from uuid import UUID

from .base import EmModel
from .common import SearchMetadata
from .enums import ApprovalStatus, RequesterType, TaskStatusType, TaskType


class RequesterInfo(EmModel):
    user_id: Optional[UUID] = None
    user_name: Optional[str] = None
    app_id: Optional[UUID] = None
    app_name: Optional[str] = None
    requester_type: RequesterType


class ApprovalInfo(EmModel):
    user_id: UUID
    user_name: Optional[str] = None
    status: Optional[ApprovalStatus] = None


class TaskStatus(EmModel):
    created_at: int
    status_updated_at: int
    status: TaskStatusType


class Task(EmModel):
    task_id: UUID
    requester_info: RequesterInfo
    entity_id: UUID
    task_type: TaskType
    status: TaskStatus
    description: Optional[str] = None
    approvals: List[ApprovalInfo]
    domains_added: Optional[List[str]] = None
    domains_removed: Optional[List[str]] = None


class TaskResult(EmModel):
    """Outcome reference returned by operations that spawn a task."""
    task_id: Optional[UUID] = None
    certificate_id: Optional[UUID] = None
    node_id: Optional[UUID] = None
    task_type: Optional[TaskType] = None
    task_status: Optional[TaskStatus] = None
    build_id: Optional[UUID] = None


class TaskUpdateRequest(EmModel):
    status: ApprovalStatus


class GetAllTasksResponse(EmModel):
    metadata: Optional[SearchMetadata] = None
    items: List[Task]
