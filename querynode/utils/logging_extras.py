# ------------------------------------------------------------
# Module: querynode/utils/logging_extras.py
# Purpose: Provide a helper for contextual logging with correlation IDs.
# ------------------------------------------------------------

"""Utility for creating logger adapters that attach contextual identifiers.

Notes
-----
- Use this helper when logs need to be correlated per batch.
- When `cid` is None, the adapter carries no extra metadata.
"""

import logging
import uuid


def new_cid() -> str:
    """Return a short random correlation id (8 hex chars)."""
    return uuid.uuid4().hex[:8]


def log_adapter(logger: logging.Logger, cid: str | None) -> logging.LoggerAdapter:
    """Return a `LoggerAdapter` that injects an optional correlation ID.

    Example
    -------
    >>> log = log_adapter(logging.getLogger(__name__), cid="abc123")
    >>> log.info("starting batch")
    """
    return logging.LoggerAdapter(logger, extra={"cid": cid} if cid else {})
