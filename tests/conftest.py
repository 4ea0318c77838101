"""Test configuration and fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from workflow_catalog.catalog.models import WorkflowSummary
from workflow_catalog.catalog.store import WorkflowStore, sample_store
from workflow_catalog.server.app import create_app
from workflow_catalog.server.config import CatalogSettings


@pytest.fixture
def store() -> WorkflowStore:
    """Provide the bundled three-workflow sample store."""
    return sample_store()


@pytest.fixture
def settings(tmp_path: Path) -> CatalogSettings:
    """Provide settings that do not depend on the working directory."""
    return CatalogSettings(CATALOG_STATIC_DIR=tmp_path / "static")


@pytest.fixture
def client(settings: CatalogSettings, store: WorkflowStore) -> TestClient:
    """Provide a test client over the sample store."""
    return TestClient(create_app(settings, store))


@pytest.fixture
def summary_factory() -> Callable[..., WorkflowSummary]:
    """Build a valid summary, overriding selected fields."""

    def make(**overrides: object) -> WorkflowSummary:
        base: dict[str, object] = {
            "id": 1,
            "filename": "wf.json",
            "name": "Workflow",
            "active": True,
            "description": "",
            "trigger_type": "Manual",
            "complexity": "low",
            "node_count": 1,
            "integrations": [],
            "tags": [],
            "created_at": "2024-01-01T00:00:00Z",
            "updated_at": "2024-01-01T00:00:00Z",
        }
        base.update(overrides)
        return WorkflowSummary.model_validate(base)

    return make
