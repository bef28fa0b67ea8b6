# ------------------------------------------------------------
# Module: querynode/engine/executor.py
# Purpose: Dispatch statements to row-fetch, mutation, or raw script execution.
# ------------------------------------------------------------

"""Execution modes over a live SQLite connection.

Summary:
    Picks one of three modes from the resolved query type and normalizes the
    driver's output into plain Python values.

Details:
    - SELECT: rows as dicts; several statements run on a small thread pool
      and come back in statement order.
    - INSERT/UPDATE/DELETE: `{changes, last_id}` from the cursor.
    - Anything else (CREATE, unmatched AUTO): script execution without
      parameter binding; returns a fixed status message.
    - Every driver failure becomes `QueryExecutionError` with the engine's
      message. The connection itself is owned by the caller.
"""

from __future__ import annotations

import logging
import sqlite3
import threading
from collections.abc import Mapping, Sequence
from concurrent.futures import ThreadPoolExecutor
from typing import Any

from querynode.core.config import settings

from .errors import QueryExecutionError
from .types import (
    MUTATION_TYPES,
    ExecutionResult,
    MutationResult,
    QueryType,
    Row,
    StatusMessage,
)

log = logging.getLogger("querynode.engine.executor")

# Driver errors plus int overflow on binding (raised outside sqlite3.Error).
ENGINE_ERRORS = (sqlite3.Error, OverflowError)


def fetch_all(con: sqlite3.Connection, sql: str, args: Mapping[str, Any]) -> list[Row]:
    """Run a row-returning statement and return every row as a dict."""
    try:
        cur = con.execute(sql, dict(args))
        rows = cur.fetchall()
    except ENGINE_ERRORS as e:
        raise QueryExecutionError(str(e), context={"statement": sql}) from e
    return [dict(r) for r in rows]


def fetch_many(
    con: sqlite3.Connection,
    statements: Sequence[str],
    bound: Sequence[Mapping[str, Any]],
) -> list[list[Row]]:
    """Run independent SELECT statements concurrently; keep statement order.

    Notes
    -----
    - All workers share the request's single connection; a lock guards each
      execute+fetch so the handle never sees interleaved cursors.
    - The pool is drained before returning or raising, so nothing runs
      after the caller starts closing the connection.
    """
    lock = threading.Lock()

    def _one(sql: str, args: Mapping[str, Any]) -> list[Row]:
        with lock:
            return fetch_all(con, sql, args)

    workers = max(1, min(settings.SELECT_MAX_WORKERS, len(statements)))
    with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="querynode-select") as pool:
        # map() yields in submission order regardless of completion order.
        return list(pool.map(_one, statements, bound))


def run_mutation(
    con: sqlite3.Connection,
    sql: str,
    args: Mapping[str, Any],
    resolved: QueryType = QueryType.INSERT,
) -> MutationResult:
    """Run an INSERT/UPDATE/DELETE and report affected rows and last rowid.

    Notes
    -----
    - `last_id` is the inserted rowid for INSERT and None otherwise; the
      driver's `lastrowid` is stale for UPDATE/DELETE.
    """
    try:
        cur = con.execute(sql, dict(args))
    except ENGINE_ERRORS as e:
        raise QueryExecutionError(str(e), context={"statement": sql}) from e

    last_id = cur.lastrowid if resolved is QueryType.INSERT else None
    return {"changes": cur.rowcount, "last_id": last_id}


def exec_raw(con: sqlite3.Connection, sql: str) -> StatusMessage:
    """Run one or more statements as a script; no binding, no rows."""
    try:
        con.executescript(sql)
    except ENGINE_ERRORS as e:
        raise QueryExecutionError(str(e), context={"statement": sql}) from e
    return {"message": settings.STATUS_MESSAGE}


def execute(
    con: sqlite3.Connection,
    resolved: QueryType,
    statements: Sequence[str],
    bound: Sequence[Mapping[str, Any]],
) -> ExecutionResult:
    """Dispatch to the execution mode for `resolved`.

    Args:
        con: Open connection owned by the caller.
        resolved: Output of the classifier (may still be AUTO).
        statements: One statement, or several for a split SELECT.
        bound: Bound arguments, one mapping per statement.
    """
    if len(statements) != len(bound):
        raise ValueError("statements and bound arguments must align")

    if resolved is QueryType.SELECT:
        if len(statements) > 1:
            log.debug("select fan-out statements=%d", len(statements))
            return fetch_many(con, statements, bound)
        return fetch_all(con, statements[0], bound[0])

    if resolved in MUTATION_TYPES:
        return run_mutation(con, statements[0], bound[0], resolved)

    return exec_raw(con, statements[0])
