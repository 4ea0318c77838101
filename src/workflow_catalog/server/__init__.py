"""FastAPI server adapter for the workflow catalog.

Design intent:
- Keep catalog logic in `workflow_catalog.catalog.*`
- Keep server-specific concerns (routing, CORS, error mapping) here
"""

from __future__ import annotations

__all__ = ["create_app"]

from workflow_catalog.server.app import create_app
