# ------------------------------------------------------------
# Module: querynode/core/lifespan.py
# Purpose: Manage FastAPI startup and shutdown lifecycle events.
# ------------------------------------------------------------

"""FastAPI lifespan context for startup and shutdown events.

Notes
-----
- No shared database state lives on the app: every request opens and closes
  its own SQLite connection. Startup only logs the effective configuration.
"""

import logging
import sqlite3
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI

from querynode.core.config import settings

logger = logging.getLogger("querynode.lifespan")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log startup/shutdown with elapsed time and the SQLite library version."""
    t0 = time.perf_counter()
    logger.info(
        "startup begin env=%s sqlite=%s continue_on_fail=%s",
        settings.APP_ENV,
        sqlite3.sqlite_version,
        settings.CONTINUE_ON_FAIL,
    )
    logger.info("startup ok duration_ms=%.1f", (time.perf_counter() - t0) * 1000)
    try:
        yield
    finally:
        logger.info("shutdown ok")
