"""Workflow Catalog.

A small read-only HTTP API over a catalog of automation workflow definitions:
- summary statistics
- filterable, paginated listing
- per-workflow detail, download and diagram
"""

__version__ = "0.1.0"

from workflow_catalog.catalog.store import WorkflowStore

__all__ = ["__version__", "WorkflowStore"]
