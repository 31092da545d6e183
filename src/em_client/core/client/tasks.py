"""Approval task endpoints."""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from em_client.models import (
    GetAllTasksResponse,
    Task,
    TaskResult,
    TaskStatusType,
    TaskType,
    TaskUpdateRequest,
)
from .base import BaseApiClient, path_segment


class TasksApi(ABC):
    """List tasks and approve or deny them."""

    @abstractmethod
    def get_all_tasks(
        self,
        task_type: Optional[TaskType] = None,
        status: Optional[TaskStatusType] = None,
        requester: Optional[str] = None,
        approver: Optional[str] = None,
        all_search: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        sort_by: Optional[str] = None,
        base_filters: Optional[str] = None,
    ) -> GetAllTasksResponse:
        pass

    @abstractmethod
    def get_task(self, task_id: UUID) -> Task:
        pass

    @abstractmethod
    def get_task_status(self, task_id: UUID) -> TaskResult:
        pass

    @abstractmethod
    def update_task(self, task_id: UUID, body: TaskUpdateRequest) -> TaskResult:
        pass


class TasksClient(BaseApiClient, TasksApi):

    def get_all_tasks(
        self,
        task_type: Optional[TaskType] = None,
        status: Optional[TaskStatusType] = None,
        requester: Optional[str] = None,
        approver: Optional[str] = None,
        all_search: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
        sort_by: Optional[str] = None,
        base_filters: Optional[str] = None,
    ) -> GetAllTasksResponse:
        params = {
            "task_type": task_type,
            "status": status,
            "requester": requester,
            "approver": approver,
            "all_search": all_search,
            "limit": limit,
            "offset": offset,
            "sort_by": sort_by,
            "base_filters": base_filters,
        }
        return self._request("GET", "/tasks", GetAllTasksResponse, params=params)

    def get_task(self, task_id: UUID) -> Task:
        return self._request("GET", f"/tasks/{path_segment(task_id)}", Task)

    def get_task_status(self, task_id: UUID) -> TaskResult:
        return self._request("GET", f"/tasks/status/{path_segment(task_id)}", TaskResult)

    def update_task(self, task_id: UUID, body: TaskUpdateRequest) -> TaskResult:
        return self._request("PATCH", f"/tasks/{path_segment(task_id)}", TaskResult, body=body)
