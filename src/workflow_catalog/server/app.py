"""FastAPI app factory.

Endpoints are thin wrappers over the catalog store, query engine and detail
resolver. The store is injected into `app.state` so tests (or a future
persistence-backed store) can swap it without touching handlers.
"""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from workflow_catalog import __version__
from workflow_catalog.catalog.store import WorkflowStore, sample_store
from workflow_catalog.server.config import CatalogSettings
from workflow_catalog.server.router import router as catalog_router

logger = logging.getLogger(__name__)

# Status codes starlette raises itself when no route matches.
_ROUTING_MISSES = {404, 405}


def create_app(
    settings: CatalogSettings | None = None, store: WorkflowStore | None = None
) -> FastAPI:
    settings = settings or CatalogSettings()

    app = FastAPI(
        title="Workflow Catalog",
        version=__version__,
        description="Read-only REST API over a catalog of automation workflow definitions.",
        openapi_url="/api/openapi.json",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
    )

    app.state.settings = settings
    app.state.store = store if store is not None else sample_store()

    app.add_middleware(GZipMiddleware, minimum_size=1000)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.parsed_cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(catalog_router, prefix="/api")

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "healthy", "message": "Workflow Catalog API is running"}

    _install_error_handlers(app)
    _maybe_mount_static(app, settings)
    return app


def _install_error_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_error(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # Handlers raise HTTPException with a specific detail; routing misses carry
        # starlette's generic phrase and are normalized to a plain 404.
        if exc.status_code in _ROUTING_MISSES and exc.detail in {"Not Found", "Method Not Allowed"}:
            return JSONResponse(status_code=404, content={"detail": "Not found"})
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def internal_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception(
            "Unhandled error",
            extra={"method": request.method, "path": request.url.path},
        )
        return JSONResponse(status_code=500, content={"detail": "Internal server error"})


def _maybe_mount_static(app: FastAPI, settings: CatalogSettings) -> None:
    """Serve the catalog browser page from `static_dir`.

    If `index.html` is missing, `/` returns a short plain-text hint instead.
    """

    static_dir = Path(settings.static_dir)
    index = static_dir / "index.html"

    if static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=static_dir), name="static")

    @app.get("/", include_in_schema=False, response_model=None)
    def root() -> FileResponse | PlainTextResponse:
        if index.exists():
            return FileResponse(index)
        return PlainTextResponse(
            "Workflow Catalog API. See /api/docs for the endpoint reference.\n",
            status_code=200,
        )
