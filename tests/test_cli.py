import json

import pytest

from querynode.cli import main


def test_cli_single_query(db_path, capsys):
    assert main(["--db", db_path, "--query", "CREATE TABLE t(id INTEGER)"]) == 0
    assert main(["--db", db_path, "--query", "INSERT INTO t VALUES ($id)", "--args", '{"$id": 9}']) == 0
    capsys.readouterr()

    assert main(["--db", db_path, "--query", "SELECT * FROM t", "--type", "select"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert out == [{"json": [{"id": 9}], "source_index": 0}]


def test_cli_batch_file_continue_on_fail(tmp_path, seeded_db, capsys):
    batch = tmp_path / "batch.json"
    batch.write_text(
        json.dumps(
            [
                {"database_path": seeded_db, "query": "SELECT id FROM t", "spread": True},
                {"database_path": seeded_db, "query": "SELECT * FROM missing"},
            ]
        ),
        encoding="utf-8",
    )
    assert main(["--batch", str(batch), "--continue-on-fail"]) == 0
    out = json.loads(capsys.readouterr().out)
    assert [o["source_index"] for o in out] == [0, 0, 0, 1]
    assert out[0]["json"] == {"id": 1}
    assert "error" in out[3]["json"]


def test_cli_fail_fast_exit_code(seeded_db, capsys):
    assert main(["--db", seeded_db, "--query", "SELECT * FROM missing"]) == 1
    err = capsys.readouterr().err
    assert "item 0" in err
    assert "no such table" in err


def test_cli_requires_query_or_batch():
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 2


@pytest.mark.parametrize("payload", [{"query": "SELECT 1"}, [1], [{"query": "SELECT 1"}, "SELECT 2"]])
def test_cli_rejects_malformed_batch_file(tmp_path, capsys, payload):
    batch = tmp_path / "batch.json"
    batch.write_text(json.dumps(payload), encoding="utf-8")
    with pytest.raises(SystemExit) as exc:
        main(["--batch", str(batch)])
    assert exc.value.code == 2
    assert "batch" in capsys.readouterr().err
