# ------------------------------------------------------------
# Module: querynode/engine/errors.py
# Purpose: Define typed query-node exceptions for clear per-request error handling.
# ------------------------------------------------------------

"""Exception types for the query engine.

Responsibilities
----------------
- Provide a base `QueryNodeError` for catch-all handling at the batch boundary.
- Reject malformed requests before any database work (`InvalidRequestError`).
- Surface bad argument payloads as `ArgumentParseError`.
- Surface SQLite prepare/execute failures as `QueryExecutionError`.
- Carry the failing input index for fail-fast batches (`ItemFailedError`).

Notes
-----
- Every error has a `context` dict. When an error already carries context,
  the batch runner only adds `item_index` to it instead of wrapping it.
"""

from __future__ import annotations

from typing import Any


class QueryNodeError(Exception):
    """Base class for query-node failures."""

    def __init__(self, message: str, *, context: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.context: dict[str, Any] = dict(context or {})


class InvalidRequestError(QueryNodeError):
    """Raised when the database path or query text is missing."""


class ArgumentParseError(QueryNodeError):
    """Raised when raw arguments are not a JSON object."""


class QueryExecutionError(QueryNodeError):
    """Raised when SQLite rejects or fails a statement."""


class ItemFailedError(QueryNodeError):
    """Raised in fail-fast mode; wraps the failure of one input item."""

    def __init__(self, message: str, *, item_index: int) -> None:
        super().__init__(message, context={"item_index": item_index})
        self.item_index = item_index
