"""In-memory workflow store.

The store owns the canonical, insertion-ordered sequence of workflow summaries
and the aggregate statistics computed over them. It is read-only once built;
callers receive the stored records and must not mutate them.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from datetime import UTC, datetime

from workflow_catalog.catalog.models import (
    AggregateStats,
    Complexity,
    TriggerType,
    WorkflowSummary,
)

logger = logging.getLogger(__name__)


def _utc_now_iso() -> str:
    return datetime.now(tz=UTC).isoformat()


@dataclass(frozen=True, slots=True)
class WorkflowNotFound(Exception):
    filename: str

    @property
    def message(self) -> str:
        return "Workflow not found"


def compute_stats(workflows: Sequence[WorkflowSummary], indexed_at: str) -> AggregateStats:
    """Derive aggregate statistics from the stored summaries.

    Every known trigger type and complexity bucket is listed (zero when unused),
    so both maps always sum to `total`.
    """

    triggers: Counter[str] = Counter({t.value: 0 for t in TriggerType})
    complexity: Counter[str] = Counter({c.value: 0 for c in Complexity})
    integrations: set[str] = set()
    active = 0
    total_nodes = 0

    for wf in workflows:
        triggers[wf.trigger_type.value] += 1
        complexity[wf.complexity.value] += 1
        integrations.update(wf.integrations)
        total_nodes += wf.node_count
        if wf.active:
            active += 1

    return AggregateStats(
        total=len(workflows),
        active=active,
        inactive=len(workflows) - active,
        triggers=dict(triggers),
        complexity=dict(complexity),
        total_nodes=total_nodes,
        unique_integrations=len(integrations),
        last_indexed=indexed_at,
    )


class WorkflowStore:
    """Read-only catalog of workflow summaries keyed by filename."""

    def __init__(
        self, workflows: Iterable[WorkflowSummary], *, indexed_at: str | None = None
    ) -> None:
        self._workflows: tuple[WorkflowSummary, ...] = tuple(workflows)
        self._by_filename: dict[str, WorkflowSummary] = {}
        for wf in self._workflows:
            if wf.filename in self._by_filename:
                raise ValueError(f"Duplicate workflow filename: {wf.filename}")
            self._by_filename[wf.filename] = wf

        self._stats = compute_stats(self._workflows, indexed_at or _utc_now_iso())
        logger.info(
            "Workflow store loaded",
            extra={
                "workflows": self._stats.total,
                "unique_integrations": self._stats.unique_integrations,
            },
        )

    def __len__(self) -> int:
        return len(self._workflows)

    def __contains__(self, filename: object) -> bool:
        return filename in self._by_filename

    def all(self) -> Sequence[WorkflowSummary]:
        return self._workflows

    def stats(self) -> AggregateStats:
        return self._stats

    def get(self, filename: str) -> WorkflowSummary:
        try:
            return self._by_filename[filename]
        except KeyError:
            raise WorkflowNotFound(filename) from None


SAMPLE_WORKFLOWS: tuple[dict[str, object], ...] = (
    {
        "id": 1,
        "filename": "telegram_webhook_automation.json",
        "name": "Telegram Webhook Automation",
        "active": True,
        "description": "Automated Telegram message processing with webhook triggers",
        "trigger_type": "Webhook",
        "complexity": "medium",
        "node_count": 8,
        "integrations": ["Telegram", "HTTP Request", "Function"],
        "tags": ["messaging", "automation"],
        "created_at": "2024-01-15T10:30:00Z",
        "updated_at": "2024-01-20T14:45:00Z",
    },
    {
        "id": 2,
        "filename": "openai_data_processing.json",
        "name": "OpenAI Data Processing",
        "active": False,
        "description": "AI-powered data analysis and processing workflow",
        "trigger_type": "Manual",
        "complexity": "high",
        "node_count": 15,
        "integrations": ["OpenAI", "Google Sheets", "PostgreSQL"],
        "tags": ["ai", "data-processing"],
        "created_at": "2024-01-10T09:15:00Z",
        "updated_at": "2024-01-18T16:20:00Z",
    },
    {
        "id": 3,
        "filename": "scheduled_backup_system.json",
        "name": "Scheduled Backup System",
        "active": True,
        "description": "Automated daily backup system for critical data",
        "trigger_type": "Scheduled",
        "complexity": "low",
        "node_count": 5,
        "integrations": ["Google Drive", "MySQL", "Email"],
        "tags": ["backup", "automation"],
        "created_at": "2024-01-05T08:00:00Z",
        "updated_at": "2024-01-22T12:30:00Z",
    },
)


def sample_store() -> WorkflowStore:
    """Build a fresh store over the bundled sample catalog."""

    return WorkflowStore(WorkflowSummary.model_validate(item) for item in SAMPLE_WORKFLOWS)
