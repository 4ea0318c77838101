"""Query engine for the workflow listing.

`parse_criteria` turns raw query-string values into a typed `SearchCriteria`
(never raising), and `search` applies it to the store's canonical sequence:
text match, trigger, complexity and active filters, then pagination.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import TypeVar

from pydantic import BaseModel

from workflow_catalog.catalog.models import (
    AppliedFilters,
    Complexity,
    TriggerType,
    WorkflowSummary,
)

ALL = "all"
DEFAULT_PAGE = 1
DEFAULT_PER_PAGE = 20
DEFAULT_MAX_PER_PAGE = 100

_TRUTHY = {"true", "1", "yes", "on"}

E = TypeVar("E", bound=Enum)


@dataclass(frozen=True, slots=True)
class Unmatched:
    """A filter value outside the known vocabulary. Matches no workflow."""

    raw: str


TriggerFilter = TriggerType | Unmatched | None
ComplexityFilter = Complexity | Unmatched | None


@dataclass(frozen=True, slots=True)
class SearchCriteria:
    text: str = ""
    trigger: TriggerFilter = None
    complexity: ComplexityFilter = None
    active_only: bool = False
    page: int = DEFAULT_PAGE
    per_page: int = DEFAULT_PER_PAGE


class PagedResult(BaseModel):
    workflows: list[WorkflowSummary]
    total: int
    page: int
    per_page: int
    pages: int
    query: str
    filters: AppliedFilters


def _positive_int(value: str | int | None, default: int) -> int:
    if value is None:
        return default
    try:
        parsed = int(str(value).strip())
    except ValueError:
        return default
    return parsed if parsed > 0 else default


def _enum_filter(value: str | None, enum_cls: type[E]) -> E | Unmatched | None:
    raw = value or ""
    if not raw or raw == ALL:
        return None
    try:
        return enum_cls(raw)
    except ValueError:
        return Unmatched(raw)


def _echo(value: Enum | Unmatched | None) -> str:
    if value is None:
        return ALL
    if isinstance(value, Unmatched):
        return value.raw
    return str(value.value)


def parse_criteria(
    q: str | None = None,
    trigger: str | None = None,
    complexity: str | None = None,
    active_only: str | bool | None = None,
    page: str | int | None = None,
    per_page: str | int | None = None,
    *,
    max_per_page: int = DEFAULT_MAX_PER_PAGE,
) -> SearchCriteria:
    """Coerce raw query-string values into search criteria.

    Missing, non-numeric or non-positive pagination values fall back to the
    defaults; `per_page` is capped at `max_per_page`.
    """

    if isinstance(active_only, bool):
        active = active_only
    else:
        active = (active_only or "").strip().lower() in _TRUTHY

    return SearchCriteria(
        text=q or "",
        trigger=_enum_filter(trigger, TriggerType),
        complexity=_enum_filter(complexity, Complexity),
        active_only=active,
        page=_positive_int(page, DEFAULT_PAGE),
        per_page=min(_positive_int(per_page, DEFAULT_PER_PAGE), max_per_page),
    )


def _matches_text(wf: WorkflowSummary, needle: str) -> bool:
    if needle in wf.name.lower() or needle in wf.description.lower():
        return True
    return any(needle in integration.lower() for integration in wf.integrations)


def _matches_value(actual: Enum, wanted: Enum | Unmatched | None) -> bool:
    if wanted is None:
        return True
    if isinstance(wanted, Unmatched):
        return False
    return actual == wanted


def search(workflows: Sequence[WorkflowSummary], criteria: SearchCriteria) -> PagedResult:
    """Filter and paginate `workflows`, preserving their order."""

    filtered: list[WorkflowSummary] = list(workflows)

    if criteria.text:
        needle = criteria.text.lower()
        filtered = [wf for wf in filtered if _matches_text(wf, needle)]
    filtered = [wf for wf in filtered if _matches_value(wf.trigger_type, criteria.trigger)]
    filtered = [wf for wf in filtered if _matches_value(wf.complexity, criteria.complexity)]
    if criteria.active_only:
        filtered = [wf for wf in filtered if wf.active]

    total = len(filtered)
    pages = math.ceil(total / criteria.per_page)
    offset = (criteria.page - 1) * criteria.per_page

    return PagedResult(
        workflows=filtered[offset : offset + criteria.per_page],
        total=total,
        page=criteria.page,
        per_page=criteria.per_page,
        pages=pages,
        query=criteria.text,
        filters=AppliedFilters(
            trigger=_echo(criteria.trigger),
            complexity=_echo(criteria.complexity),
            active_only=criteria.active_only,
        ),
    )
