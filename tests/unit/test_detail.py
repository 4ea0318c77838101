"""Unit tests for detail, download and diagram resolution."""

from __future__ import annotations

import json

import pytest

from workflow_catalog.catalog.detail import DetailResolver, build_definition, render_diagram
from workflow_catalog.catalog.store import WorkflowNotFound, WorkflowStore


def test_build_definition_chains_integrations(store: WorkflowStore) -> None:
    definition = build_definition(store.get("telegram_webhook_automation.json"))

    assert definition.name == "Telegram Webhook Automation"
    assert definition.active is True
    assert [n.name for n in definition.nodes] == ["Start", "Telegram", "HTTP Request", "Function"]
    assert [n.type for n in definition.nodes] == [
        "n8n-nodes-base.start",
        "n8n-nodes-base.telegram",
        "n8n-nodes-base.httpRequest",
        "n8n-nodes-base.function",
    ]
    assert definition.nodes[0].position == (240, 300)
    assert definition.nodes[1].position == (460, 300)

    target = definition.connections["Start"]["main"][0][0]
    assert (target.node, target.type, target.index) == ("Telegram", "main", 0)
    assert "Function" not in definition.connections


def test_build_definition_suffixes_duplicate_names(summary_factory) -> None:
    summary = summary_factory(integrations=["HTTP Request", "HTTP Request", "Start"])

    names = [n.name for n in build_definition(summary).nodes]

    assert names == ["Start", "HTTP Request", "HTTP Request1", "Start1"]


def test_render_diagram_linear_chain(store: WorkflowStore) -> None:
    diagram = render_diagram(build_definition(store.get("telegram_webhook_automation.json")))

    assert diagram.splitlines() == [
        "graph TD",
        '    A["Start"] --> B["Telegram"]',
        '    B --> C["HTTP Request"]',
        '    C --> D["Function"]',
        '    D --> E["End"]',
        "    style A fill:#b3e0ff,stroke:#0066cc",
        "    style E fill:#ffb3b3,stroke:#cc0000",
    ]


def test_render_diagram_without_integrations(summary_factory) -> None:
    diagram = render_diagram(build_definition(summary_factory()))

    assert 'A["Start"] --> B["End"]' in diagram
    assert "style B fill:#ffb3b3,stroke:#cc0000" in diagram


def test_resolver_detail(store: WorkflowStore) -> None:
    detail = DetailResolver(store).get_detail("scheduled_backup_system.json")

    assert detail.metadata.filename == "scheduled_backup_system.json"
    assert detail.raw_json.name == "Scheduled Backup System"


def test_resolver_download_is_definition_only(store: WorkflowStore) -> None:
    body, suggested = DetailResolver(store).get_download("openai_data_processing.json")

    payload = json.loads(body.decode("utf-8"))
    assert suggested == "openai_data_processing.json"
    assert set(payload) == {"name", "active", "nodes", "connections"}
    assert payload["nodes"][1]["type"] == "n8n-nodes-base.openai"


@pytest.mark.parametrize("method", ["get_detail", "get_download", "get_diagram"])
def test_resolver_missing_filename(store: WorkflowStore, method: str) -> None:
    resolver = DetailResolver(store)

    with pytest.raises(WorkflowNotFound):
        getattr(resolver, method)("does_not_exist.json")


def test_render_diagram_quotes_mermaid_syntax(summary_factory) -> None:
    summary = summary_factory(integrations=["Google Sheets (v2)", "A|B", 'Say "hi" {x}'])

    lines = render_diagram(build_definition(summary)).splitlines()

    assert lines[1] == '    A["Start"] --> B["Google Sheets (v2)"]'
    assert lines[2] == '    B --> C["A|B"]'
    assert lines[3] == '    C --> D["Say #quot;hi#quot; {x}"]'
