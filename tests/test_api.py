# ------------------------------------------------------------
# Module: tests/test_api.py
# Purpose: Ensure /v1/query and /v1/query/batch honor the wire contract.
# ------------------------------------------------------------
from __future__ import annotations


def test_health_ready_ok(client):
    r = client.get("/v1/health/ready")
    assert r.status_code == 200
    assert r.json() == {"status": "ready"}


def test_query_end_to_end(client, db_path):
    r = client.post("/v1/query", json={"database_path": db_path, "query": "CREATE TABLE t(id INTEGER)"})
    assert r.status_code == 200
    assert r.json() == {
        "items": [{"json": {"message": "Query executed successfully."}, "source_index": None}]
    }

    r = client.post(
        "/v1/query",
        json={"database_path": db_path, "query": "INSERT INTO t VALUES ($id)", "args": '{"$id": 1}'},
    )
    assert r.json()["items"][0]["json"] == {"changes": 1, "last_id": 1}

    r = client.post("/v1/query", json={"database_path": db_path, "query": "SELECT * FROM t"})
    assert r.json()["items"] == [{"json": [{"id": 1}], "source_index": None}]


def test_query_accepts_inline_args_and_lowercase_type(client, seeded_db):
    r = client.post(
        "/v1/query",
        json={
            "database_path": seeded_db,
            "query": "SELECT name FROM t WHERE id = $id",
            "query_type": "select",
            "args": {"$id": 3},
        },
    )
    assert r.status_code == 200
    assert r.json()["items"][0]["json"] == [{"name": "gamma"}]


def test_query_spread(client, seeded_db):
    r = client.post(
        "/v1/query",
        json={
            "database_path": seeded_db,
            "query": "SELECT id FROM t WHERE id = 1; SELECT id FROM t WHERE id > 1",
            "spread": True,
        },
    )
    assert [i["json"] for i in r.json()["items"]] == [
        {"items": [{"id": 1}]},
        {"items": [{"id": 2}, {"id": 3}]},
    ]


def test_blob_values_are_base64(client, db_path):
    r = client.post("/v1/query", json={"database_path": db_path, "query": "SELECT x'00ff' AS b"})
    assert r.json()["items"][0]["json"] == [{"b": "AP8="}]


def test_empty_query_is_400(client, db_path):
    r = client.post("/v1/query", json={"database_path": db_path, "query": ""})
    assert r.status_code == 400
    assert r.json()["detail"] == "No query provided."


def test_bad_args_is_400(client, db_path):
    r = client.post("/v1/query", json={"database_path": db_path, "query": "SELECT 1", "args": "{oops"})
    assert r.status_code == 400


def test_engine_error_is_422(client, db_path):
    r = client.post("/v1/query", json={"database_path": db_path, "query": "SELECT * FROM missing"})
    assert r.status_code == 422
    assert "no such table" in r.json()["detail"]


def test_unknown_fields_are_rejected(client, db_path):
    r = client.post("/v1/query", json={"database_path": db_path, "query": "SELECT 1", "limit": 5})
    assert r.status_code == 422


def test_batch_continue_on_fail(client, seeded_db):
    r = client.post(
        "/v1/query/batch",
        json={
            "continue_on_fail": True,
            "requests": [
                {"database_path": seeded_db, "query": "SELECT COUNT(*) AS n FROM t"},
                {"database_path": seeded_db, "query": "SELECT * FROM missing"},
                {"database_path": seeded_db, "query": "DELETE FROM t WHERE id = $id", "args": '{"$id": 2}'},
            ],
        },
    )
    assert r.status_code == 200
    items = r.json()["items"]
    assert [i["source_index"] for i in items] == [0, 1, 2]
    assert items[0]["json"] == [{"n": 3}]
    assert "no such table" in items[1]["json"]["error"]
    assert items[2]["json"] == {"changes": 1, "last_id": None}


def test_batch_fail_fast_reports_item_index(client, seeded_db):
    r = client.post(
        "/v1/query/batch",
        json={
            "continue_on_fail": False,
            "requests": [
                {"database_path": seeded_db, "query": "SELECT 1"},
                {"database_path": "", "query": "SELECT 1"},
            ],
        },
    )
    assert r.status_code == 422
    assert r.json()["detail"] == {"message": "No database path provided.", "item_index": 1}


def test_non_finite_argument_literal_is_400(client, seeded_db):
    r = client.post(
        "/v1/query",
        json={"database_path": seeded_db, "query": "SELECT $v AS v", "args": '{"$v": Infinity}'},
    )
    assert r.status_code == 400
    assert "not valid JSON" in r.json()["detail"]
