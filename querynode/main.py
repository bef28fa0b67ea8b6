# ------------------------------------------------------------
# Module: querynode/main.py
# Purpose: FastAPI application entry point for the query node.
# ------------------------------------------------------------

"""Build the FastAPI app: logging, lifespan, and the /v1 routers.

Run with:
    uvicorn querynode.main:app --port 8000
"""

from __future__ import annotations

from fastapi import FastAPI

from querynode.api.routes import router as v1_router
from querynode.core.lifespan import lifespan
from querynode.core.logging import configure_logging


def create_app() -> FastAPI:
    configure_logging()
    app = FastAPI(title="querynode", version="0.1.0", lifespan=lifespan)
    app.include_router(v1_router, prefix="/v1")
    return app


app = create_app()
