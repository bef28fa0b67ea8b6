# ------------------------------------------------------------
# Module: querynode/engine/connection.py
# Purpose: Open one SQLite connection per request and always release it.
# ------------------------------------------------------------

"""Scoped SQLite connection for a single request.

Responsibilities
----------------
- Open the database file (created if missing) in autocommit mode.
- Return rows as `sqlite3.Row` so they convert to dicts by column name.
- Close the connection exactly once on every exit path.
- Wrap open failures (bad path, unreadable file) as `QueryExecutionError`.

Notes
-----
- `check_same_thread=False` lets split SELECT statements run on pool threads;
  the executor serializes access to the handle itself.
- `sqlite3.Connection` used as a context manager only manages transactions,
  so release is done explicitly here.
"""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager

from querynode.core.config import settings

from .errors import QueryExecutionError

log = logging.getLogger("querynode.engine.connection")


def connect(db_path: str, timeout: float | None = None) -> sqlite3.Connection:
    """Open a SQLite connection with dict-like rows and autocommit.

    Notes
    -----
    - `isolation_level=None` commits each statement as it runs; no call
      leaves an open transaction behind.
    - Callers must close the returned connection when done.
    """
    try:
        con = sqlite3.connect(
            db_path,
            timeout=settings.SQLITE_TIMEOUT_S if timeout is None else timeout,
            isolation_level=None,
            check_same_thread=False,
        )
    except sqlite3.Error as e:
        raise QueryExecutionError(str(e), context={"database_path": db_path}) from e
    con.row_factory = sqlite3.Row
    return con


@contextmanager
def open_connection(db_path: str, timeout: float | None = None) -> Iterator[sqlite3.Connection]:
    """Yield a connection for one request and close it afterwards.

    Example:
        >>> with open_connection(":memory:") as con:
        ...     con.execute("SELECT 1").fetchone()[0]
        1
    """
    con = connect(db_path, timeout)
    log.debug("sqlite open db=%s", db_path)
    try:
        yield con
    finally:
        try:
            con.close()
        except sqlite3.Error:
            log.warning("sqlite close failed db=%s", db_path, exc_info=True)
        else:
            log.debug("sqlite closed db=%s", db_path)
