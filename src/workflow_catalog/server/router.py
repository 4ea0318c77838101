"""Catalog REST API.

All routes are mounted under `/api`. Handlers are thin: they coerce query
parameters, call into `workflow_catalog.catalog` and translate lookup
failures into 404 responses.
"""

from __future__ import annotations

from typing import Annotated
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import Response

from workflow_catalog.catalog.categories import CATEGORIES
from workflow_catalog.catalog.detail import DetailResolver
from workflow_catalog.catalog.models import AggregateStats, WorkflowDetail
from workflow_catalog.catalog.query import PagedResult, parse_criteria, search
from workflow_catalog.catalog.store import WorkflowNotFound, WorkflowStore
from workflow_catalog.server.config import CatalogSettings

router = APIRouter()


def _settings(request: Request) -> CatalogSettings:
    settings = getattr(request.app.state, "settings", None)
    if not isinstance(settings, CatalogSettings):
        raise RuntimeError("Server settings not configured")
    return settings


def _store(request: Request) -> WorkflowStore:
    store = getattr(request.app.state, "store", None)
    if not isinstance(store, WorkflowStore):
        raise RuntimeError("Workflow store not configured")
    return store


def _resolver(store: Annotated[WorkflowStore, Depends(_store)]) -> DetailResolver:
    return DetailResolver(store)


StoreDep = Annotated[WorkflowStore, Depends(_store)]
ResolverDep = Annotated[DetailResolver, Depends(_resolver)]


def _not_found(exc: WorkflowNotFound) -> HTTPException:
    return HTTPException(status_code=404, detail=exc.message)


def _attachment(filename: str) -> str:
    # Same rule as starlette's FileResponse: RFC 5987 form unless the name is URL-safe.
    quoted = quote(filename)
    if quoted != filename:
        return f"attachment; filename*=utf-8''{quoted}"
    return f'attachment; filename="{filename}"'


@router.get("/stats", response_model=AggregateStats)
def get_stats(store: StoreDep) -> AggregateStats:
    return store.stats()


@router.get("/workflows", response_model=PagedResult)
def list_workflows(
    request: Request,
    store: StoreDep,
    q: str = "",
    trigger: str = "all",
    complexity: str = "all",
    active_only: str = "false",
    # Kept as raw strings so bad values fall back to defaults instead of a 422.
    page: str = "1",
    per_page: str = "20",
) -> PagedResult:
    criteria = parse_criteria(
        q=q,
        trigger=trigger,
        complexity=complexity,
        active_only=active_only,
        page=page,
        per_page=per_page,
        max_per_page=_settings(request).max_per_page,
    )
    return search(store.all(), criteria)


@router.get("/workflows/{filename}", response_model=WorkflowDetail)
def get_workflow(filename: str, resolver: ResolverDep) -> WorkflowDetail:
    try:
        return resolver.get_detail(filename)
    except WorkflowNotFound as e:
        raise _not_found(e) from e


@router.get("/workflows/{filename}/download")
def download_workflow(filename: str, resolver: ResolverDep) -> Response:
    try:
        body, suggested = resolver.get_download(filename)
    except WorkflowNotFound as e:
        raise _not_found(e) from e
    return Response(
        content=body,
        media_type="application/json",
        headers={"Content-Disposition": _attachment(suggested)},
    )


@router.get("/workflows/{filename}/diagram")
def get_diagram(filename: str, resolver: ResolverDep) -> dict[str, str]:
    try:
        return {"diagram": resolver.get_diagram(filename)}
    except WorkflowNotFound as e:
        raise _not_found(e) from e


@router.get("/categories")
def list_categories() -> dict[str, list[str]]:
    return {"categories": list(CATEGORIES)}
