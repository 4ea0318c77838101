#!/usr/bin/env python3
"""Programmatic catalog query example.

This demonstrates using the catalog components directly, without HTTP:

* build the sample store
* search it with the same parameters the `/api/workflows` endpoint accepts
* print the diagram for each match
"""

from __future__ import annotations

import argparse
from typing import Sequence

from workflow_catalog.catalog import DetailResolver, parse_criteria, sample_store, search
from workflow_catalog.logging import configure_logging
from workflow_catalog.server.config import CatalogSettings


def _parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Search the sample workflow catalog.")
    parser.add_argument("--q", default="", help="Free-text query (name, description, integrations)")
    parser.add_argument("--trigger", default="all", help='Trigger type, e.g. "Webhook" (optional)')
    parser.add_argument("--complexity", default="all", help='"low", "medium" or "high" (optional)')
    parser.add_argument("--active-only", action="store_true", help="Only active workflows")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = _parse_args(argv)

    settings = CatalogSettings()
    configure_logging(settings.log_level)

    store = sample_store()
    criteria = parse_criteria(
        q=args.q,
        trigger=args.trigger,
        complexity=args.complexity,
        active_only=args.active_only,
        max_per_page=settings.max_per_page,
    )
    result = search(store.all(), criteria)

    print(f"{result.total} matching workflow(s)")
    resolver = DetailResolver(store)
    for wf in result.workflows:
        print(f"\n{wf.name} ({wf.filename})")
        print(resolver.get_diagram(wf.filename))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
