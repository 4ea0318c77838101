"""Catalog domain: records, the in-memory store and the read-only operations over it."""

from __future__ import annotations

from workflow_catalog.catalog.categories import CATEGORIES
from workflow_catalog.catalog.detail import DetailResolver
from workflow_catalog.catalog.models import (
    AggregateStats,
    Complexity,
    TriggerType,
    WorkflowDefinition,
    WorkflowDetail,
    WorkflowSummary,
)
from workflow_catalog.catalog.query import PagedResult, SearchCriteria, parse_criteria, search
from workflow_catalog.catalog.store import WorkflowNotFound, WorkflowStore, sample_store

__all__ = [
    "CATEGORIES",
    "AggregateStats",
    "Complexity",
    "DetailResolver",
    "PagedResult",
    "SearchCriteria",
    "TriggerType",
    "WorkflowDefinition",
    "WorkflowDetail",
    "WorkflowNotFound",
    "WorkflowStore",
    "WorkflowSummary",
    "parse_criteria",
    "sample_store",
    "search",
]
