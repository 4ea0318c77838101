"""Pydantic models for catalog records and API payloads."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class TriggerType(str, Enum):
    COMPLEX = "Complex"
    WEBHOOK = "Webhook"
    MANUAL = "Manual"
    SCHEDULED = "Scheduled"


class Complexity(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class WorkflowSummary(BaseModel):
    """Catalog metadata for one workflow definition.

    `filename` is the external lookup key and is unique within a store.
    """

    model_config = ConfigDict(frozen=True)

    id: int = Field(gt=0)
    filename: str
    name: str
    active: bool
    description: str
    trigger_type: TriggerType
    complexity: Complexity
    node_count: int = Field(ge=0)
    integrations: tuple[str, ...] = ()
    tags: tuple[str, ...] = ()
    created_at: str
    updated_at: str


class AggregateStats(BaseModel):
    total: int
    active: int
    inactive: int
    triggers: dict[str, int]
    complexity: dict[str, int]
    total_nodes: int
    unique_integrations: int
    last_indexed: str


class WorkflowNode(BaseModel):
    name: str
    type: str
    position: tuple[int, int]


class ConnectionTarget(BaseModel):
    node: str
    type: str = "main"
    index: int = 0


class WorkflowDefinition(BaseModel):
    """Structural definition: ordered nodes plus an adjacency map.

    `connections` maps a source node name to its outputs, e.g.
    ``{"Start": {"main": [[{"node": "HTTP Request", "type": "main", "index": 0}]]}}``.
    """

    name: str
    active: bool
    nodes: list[WorkflowNode] = Field(default_factory=list)
    connections: dict[str, dict[str, list[list[ConnectionTarget]]]] = Field(
        default_factory=dict
    )


class WorkflowDetail(BaseModel):
    metadata: WorkflowSummary
    raw_json: WorkflowDefinition


class AppliedFilters(BaseModel):
    trigger: str
    complexity: str
    active_only: bool
