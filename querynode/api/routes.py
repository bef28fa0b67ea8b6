# ------------------------------------------------------------
# Module: querynode/api/routes.py
# Purpose: Compose and expose all v1 FastAPI routers.
# ------------------------------------------------------------

"""Central composition root for versioned API routing.

- `querynode.main` mounts this router under /v1.
- Keep inclusion order stable for deterministic OpenAPI tag order.
"""

from __future__ import annotations

from fastapi import APIRouter

from querynode.api.v1.health import router as health_router
from querynode.api.v1.query import router as query_router

router: APIRouter = APIRouter()

router.include_router(health_router, prefix="/health", tags=["health"])
router.include_router(query_router, prefix="/query", tags=["query"])
