"""
Workflow graph models.

Draft graphs are freely editable. Final graphs are immutable and versioned:
updating a final graph appends a new version.
"""

from typing import Any, Dict, List, Optional
from uuid import UUID

from pydantic import Field

from .base import EmModel
from .common import SearchMetadata
from .enums import WorkflowObjectType


class WorkflowObject(EmModel):
    name: str
    description: Optional[str] = None
    object_type: WorkflowObjectType = Field(alias="type")
    ref_id: Optional[str] = None


class WorkflowLink(EmModel):
    id: str
    port: Optional[str] = None


class WorkflowEdge(EmModel):
    source: WorkflowLink
    target: WorkflowLink


class WorkflowMetadata(EmModel):
    nodes: Optional[Dict[str, Any]] = None
    parent: Optional[UUID] = None
    parent_version: Optional[str] = None


class WorkflowGraph(EmModel):
    graph_id: UUID
    name: str
    description: Optional[str] = None
    creator_id: Optional[UUID] = None
    created_at: Optional[int] = None
    updated_at: Optional[int] = None
    objects: Dict[str, WorkflowObject]
    edges: Dict[str, WorkflowEdge]
    metadata: Optional[WorkflowMetadata] = None


class CreateWorkflowGraph(EmModel):
    name: str
    description: Optional[str] = None
    objects: Dict[str, WorkflowObject]
    edges: Dict[str, WorkflowEdge]
    metadata: Optional[WorkflowMetadata] = None


class UpdateWorkflowGraph(EmModel):
    # optimistic concurrency: the version the caller last saw
    version: Optional[int] = None
    name: str
    description: Optional[str] = None
    objects: Dict[str, WorkflowObject]
    edges: Dict[str, WorkflowEdge]
    metadata: Optional[WorkflowMetadata] = None


class GetAllWorkflowGraphsResponse(EmModel):
    metadata: Optional[SearchMetadata] = None
    items: List[WorkflowGraph]


class CreateWorkflowVersionRequest(EmModel):
    objects: Dict[str, WorkflowObject]
    edges: Dict[str, WorkflowEdge]
    metadata: Optional[WorkflowMetadata] = None


class VersionInFinalWorkflow(EmModel):
    version: str
    created_at: Optional[int] = None
    objects: Dict[str, WorkflowObject]
    edges: Dict[str, WorkflowEdge]
    metadata: Optional[WorkflowMetadata] = None


class FinalWorkflow(EmModel):
    graph_id: UUID
    name: str
    description: Optional[str] = None
    creator_id: Optional[UUID] = None
    created_at: Optional[int] = None
    updated_at: Optional[int] = None
    versions: Dict[str, VersionInFinalWorkflow]


class CreateFinalWorkflowGraph(EmModel):
    name: str
    description: Optional[str] = None
    contents: CreateWorkflowVersionRequest


class GetAllFinalWorkflowGraphsResponse(EmModel):
    metadata: Optional[SearchMetadata] = None
    items: List[FinalWorkflow]
