# ------------------------------------------------------------
# Module: querynode/api/v1/health.py
# Purpose: Provide a lightweight readiness endpoint for the query node.
# ------------------------------------------------------------

"""Health check endpoint.

Details:
    - `/v1/health/ready` opens and closes an in-memory SQLite connection to
      prove the driver is usable.
    - Returns HTTP 200 with `{"status": "ready"}` when the probe passes.
    - Returns HTTP 503 with `{"status": "degraded"}` otherwise.
"""

import logging

from fastapi import APIRouter, Response

from querynode.engine.connection import open_connection

router: APIRouter = APIRouter()
log = logging.getLogger("querynode.api.health")


@router.get("/ready", include_in_schema=True)
def ready(res: Response) -> dict[str, str]:
    """Readiness probe endpoint.

    Example:
        GET /v1/health/ready → {"status": "ready"}
        (if failure) → 503 {"status": "degraded"}
    """
    try:
        with open_connection(":memory:") as con:
            con.execute("SELECT 1").fetchone()
        log.debug("ready check ok")
        return {"status": "ready"}
    except Exception:
        log.exception("ready check failed")
        res.status_code = 503
        return {"status": "degraded"}
