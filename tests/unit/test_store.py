"""Unit tests for the in-memory workflow store."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from workflow_catalog.catalog.store import WorkflowNotFound, WorkflowStore, compute_stats


def test_sample_store_lookup(store: WorkflowStore) -> None:
    wf = store.get("openai_data_processing.json")

    assert wf.id == 2
    assert wf.name == "OpenAI Data Processing"
    assert "openai_data_processing.json" in store
    assert len(store) == 3


def test_missing_filename_raises(store: WorkflowStore) -> None:
    with pytest.raises(WorkflowNotFound) as excinfo:
        store.get("does_not_exist.json")

    assert excinfo.value.filename == "does_not_exist.json"
    assert excinfo.value.message == "Workflow not found"


def test_duplicate_filenames_are_rejected(summary_factory) -> None:
    with pytest.raises(ValueError, match="Duplicate workflow filename"):
        WorkflowStore([summary_factory(id=1), summary_factory(id=2)])


def test_sample_stats(store: WorkflowStore) -> None:
    stats = store.stats()

    assert stats.total == 3
    assert stats.active == 2
    assert stats.inactive == 1
    assert stats.active + stats.inactive == stats.total
    assert stats.triggers == {"Complex": 0, "Webhook": 1, "Manual": 1, "Scheduled": 1}
    assert stats.complexity == {"low": 1, "medium": 1, "high": 1}
    assert stats.total_nodes == 28
    assert stats.unique_integrations == 9
    assert stats.last_indexed


def test_stats_count_distinct_integrations(summary_factory) -> None:
    workflows = [
        summary_factory(id=1, filename="a.json", integrations=["Slack", "Slack"], node_count=2),
        summary_factory(
            id=2, filename="b.json", integrations=["Slack", "Gmail"], active=False, node_count=3
        ),
    ]

    stats = compute_stats(workflows, "2024-02-01T00:00:00+00:00")

    assert stats.unique_integrations == 2
    assert stats.total_nodes == 5
    assert sum(stats.triggers.values()) == stats.total
    assert sum(stats.complexity.values()) == stats.total
    assert stats.last_indexed == "2024-02-01T00:00:00+00:00"


def test_empty_store() -> None:
    store = WorkflowStore([], indexed_at="2024-02-01T00:00:00+00:00")

    stats = store.stats()
    assert stats.total == 0
    assert stats.active == 0
    assert stats.inactive == 0
    assert stats.unique_integrations == 0


def test_stored_summaries_cannot_be_mutated(store: WorkflowStore) -> None:
    wf = store.all()[0]

    assert wf.integrations == ("Telegram", "HTTP Request", "Function")
    assert isinstance(wf.tags, tuple)
    with pytest.raises(AttributeError):
        wf.integrations.append("Slack")  # type: ignore[attr-defined]
    with pytest.raises(ValidationError):
        wf.active = False  # type: ignore[misc]
    assert store.stats().unique_integrations == 9
