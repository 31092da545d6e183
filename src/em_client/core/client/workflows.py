"""
Workflow graph endpoints.

Draft graphs live under ``/workflows/draft/graphs`` and are edited in place.
Final graphs live under ``/workflows/final/graphs``; each update creates a
new immutable version addressed as ``{graph_id}/{version}``.
"""

from abc import ABC, abstractmethod
from typing import Optional
from uuid import UUID

from em_client.models import (
    CreateFinalWorkflowGraph,
    CreateWorkflowGraph,
    CreateWorkflowVersionRequest,
    FinalWorkflow,
    GetAllFinalWorkflowGraphsResponse,
    GetAllWorkflowGraphsResponse,
    UpdateWorkflowGraph,
    VersionInFinalWorkflow,
    WorkflowGraph,
)
from .base import NO_CONTENT, BaseApiClient, path_segment

DRAFT_GRAPHS = "/workflows/draft/graphs"
FINAL_GRAPHS = "/workflows/final/graphs"


class WorkflowApi(ABC):
    """Draft workflow graphs."""

    @abstractmethod
    def create_workflow_graph(self, body: CreateWorkflowGraph) -> WorkflowGraph:
        pass

    @abstractmethod
    def delete_workflow_graph(self, graph_id: UUID) -> None:
        pass

    @abstractmethod
    def get_all_workflow_graphs(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        all_search: Optional[str] = None,
        parent_graph_id: Optional[str] = None,
        sort_by: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> GetAllWorkflowGraphsResponse:
        pass

    @abstractmethod
    def get_workflow_graph(self, graph_id: UUID) -> WorkflowGraph:
        pass

    @abstractmethod
    def update_workflow_graph(self, graph_id: UUID, body: UpdateWorkflowGraph) -> WorkflowGraph:
        pass


class WorkflowFinalApi(ABC):
    """Immutable, versioned workflow graphs."""

    @abstractmethod
    def create_final_workflow_graph(self, body: CreateFinalWorkflowGraph) -> FinalWorkflow:
        pass

    @abstractmethod
    def delete_final_workflow_graph(self, graph_id: UUID, version: str) -> None:
        pass

    @abstractmethod
    def get_all_final_workflow_graphs(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        all_search: Optional[str] = None,
        sort_by: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> GetAllFinalWorkflowGraphsResponse:
        pass

    @abstractmethod
    def get_final_workflow_graph(self, graph_id: UUID, version: str) -> VersionInFinalWorkflow:
        pass

    @abstractmethod
    def get_full_final_workflow_graph(self, graph_id: UUID) -> FinalWorkflow:
        """Fetch a final workflow together with all of its versions."""

    @abstractmethod
    def update_final_workflow_graph(
        self, graph_id: UUID, body: CreateWorkflowVersionRequest
    ) -> VersionInFinalWorkflow:
        """Append a new version to a final workflow."""


class WorkflowClient(BaseApiClient, WorkflowApi):

    def create_workflow_graph(self, body: CreateWorkflowGraph) -> WorkflowGraph:
        return self._request("POST", DRAFT_GRAPHS, WorkflowGraph, body=body)

    def delete_workflow_graph(self, graph_id: UUID) -> None:
        self._request("DELETE", f"{DRAFT_GRAPHS}/{path_segment(graph_id)}", expected=NO_CONTENT)

    def get_all_workflow_graphs(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        all_search: Optional[str] = None,
        parent_graph_id: Optional[str] = None,
        sort_by: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> GetAllWorkflowGraphsResponse:
        params = {
            "name": name,
            "description": description,
            "all_search": all_search,
            "parent_graph_id": parent_graph_id,
            "sort_by": sort_by,
            "limit": limit,
            "offset": offset,
        }
        return self._request("GET", DRAFT_GRAPHS, GetAllWorkflowGraphsResponse, params=params)

    def get_workflow_graph(self, graph_id: UUID) -> WorkflowGraph:
        return self._request("GET", f"{DRAFT_GRAPHS}/{path_segment(graph_id)}", WorkflowGraph)

    def update_workflow_graph(self, graph_id: UUID, body: UpdateWorkflowGraph) -> WorkflowGraph:
        return self._request(
            "PUT", f"{DRAFT_GRAPHS}/{path_segment(graph_id)}", WorkflowGraph, body=body
        )


class WorkflowFinalClient(BaseApiClient, WorkflowFinalApi):

    def create_final_workflow_graph(self, body: CreateFinalWorkflowGraph) -> FinalWorkflow:
        return self._request("POST", FINAL_GRAPHS, FinalWorkflow, body=body)

    def delete_final_workflow_graph(self, graph_id: UUID, version: str) -> None:
        self._request(
            "DELETE",
            f"{FINAL_GRAPHS}/{path_segment(graph_id)}/{path_segment(version)}",
            expected=NO_CONTENT,
        )

    def get_all_final_workflow_graphs(
        self,
        name: Optional[str] = None,
        description: Optional[str] = None,
        all_search: Optional[str] = None,
        sort_by: Optional[str] = None,
        limit: Optional[int] = None,
        offset: Optional[int] = None,
    ) -> GetAllFinalWorkflowGraphsResponse:
        params = {
            "name": name,
            "description": description,
            "all_search": all_search,
            "sort_by": sort_by,
            "limit": limit,
            "offset": offset,
        }
        return self._request(
            "GET", FINAL_GRAPHS, GetAllFinalWorkflowGraphsResponse, params=params
        )

    def get_final_workflow_graph(self, graph_id: UUID, version: str) -> VersionInFinalWorkflow:
        return self._request(
            "GET",
            f"{FINAL_GRAPHS}/{path_segment(graph_id)}/{path_segment(version)}",
            VersionInFinalWorkflow,
        )

    def get_full_final_workflow_graph(self, graph_id: UUID) -> FinalWorkflow:
        return self._request("GET", f"{FINAL_GRAPHS}/{path_segment(graph_id)}", FinalWorkflow)

    def update_final_workflow_graph(
        self, graph_id: UUID, body: CreateWorkflowVersionRequest
    ) -> VersionInFinalWorkflow:
        return self._request(
            "POST",
            f"{FINAL_GRAPHS}/{path_segment(graph_id)}",
            VersionInFinalWorkflow,
            body=body,
        )
