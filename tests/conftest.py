# ------------------------------------------------------------
# Module: tests/conftest.py
# Purpose: Shared fixtures: temp database files, API client, connection spy.
# ------------------------------------------------------------
from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from querynode.engine import connection as connection_module
from querynode.main import app


@pytest.fixture
def db_path(tmp_path) -> str:
    """Path to a fresh (not yet created) SQLite file."""
    return str(tmp_path / "node.sqlite")


@pytest.fixture
def seeded_db(db_path) -> str:
    """Database with table t(id, name) holding three rows."""
    with connection_module.open_connection(db_path) as con:
        con.executescript(
            """
            CREATE TABLE t (id INTEGER PRIMARY KEY, name TEXT);
            INSERT INTO t (id, name) VALUES (1, 'alpha'), (2, 'beta'), (3, 'gamma');
            """
        )
    return db_path


@pytest.fixture
def client() -> TestClient:
    with TestClient(app) as c:
        yield c


class CountingConnection:
    """Proxy around a sqlite3 connection that counts close() calls."""

    def __init__(self, con):
        self._con = con
        self.closes = 0

    def __getattr__(self, name):
        return getattr(self._con, name)

    def close(self):
        self.closes += 1
        self._con.close()


@pytest.fixture
def opened(monkeypatch) -> list[CountingConnection]:
    """Record every connection opened through the engine."""
    real_connect = connection_module.connect
    conns: list[CountingConnection] = []

    def _spy(db_path, timeout=None):
        con = CountingConnection(real_connect(db_path, timeout))
        conns.append(con)
        return con

    monkeypatch.setattr(connection_module, "connect", _spy)
    return conns
