"""CLI entrypoint for the workflow catalog."""

from __future__ import annotations

import argparse
import json
import logging
import sys

import uvicorn
from pydantic import ValidationError

from workflow_catalog import __version__
from workflow_catalog.catalog.store import sample_store
from workflow_catalog.logging import configure_logging
from workflow_catalog.server.app import create_app
from workflow_catalog.server.config import CatalogSettings

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="workflow-catalog",
        description="Read-only HTTP API over a catalog of automation workflows",
    )
    parser.add_argument("--version", action="version", version=f"workflow-catalog {__version__}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default=None, help="Bind address (overrides CATALOG_HOST)")
    serve.add_argument("--port", type=int, default=None, help="Port to bind to (overrides PORT)")
    serve.add_argument("--reload", action="store_true", help="Enable uvicorn auto-reload")

    subparsers.add_parser("stats", help="Print aggregate statistics for the catalog as JSON")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        settings = CatalogSettings()
    except ValidationError as e:
        # Logging isn't configured yet; keep it simple and actionable.
        print("Configuration error (check your .env):", file=sys.stderr)
        print(e, file=sys.stderr)
        return 2

    configure_logging(settings.log_level)

    if args.command == "stats":
        print(json.dumps(sample_store().stats().model_dump(mode="json"), indent=2))
        return 0

    if args.command == "serve":
        host = args.host or settings.host
        port = args.port or settings.port
        logger.info("Starting server", extra={"host": host, "port": port})
        if args.reload:
            # Reload needs an import string; the factory re-reads settings itself.
            uvicorn.run(
                "workflow_catalog.server.app:create_app",
                factory=True,
                host=host,
                port=port,
                reload=True,
                log_config=None,
            )
        else:
            uvicorn.run(create_app(settings), host=host, port=port, log_config=None)
        return 0

    logger.error("Unknown command", extra={"command": args.command})
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
