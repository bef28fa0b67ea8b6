import pytest
from pydantic import ValidationError

from querynode.core.config import Settings


def test_defaults():
    s = Settings()
    assert s.CONTINUE_ON_FAIL is False
    assert s.SPREAD_FIELD == "items"
    assert s.STATUS_MESSAGE == "Query executed successfully."


def test_env_overrides_are_coerced(monkeypatch):
    monkeypatch.setenv("QUERYNODE_SELECT_MAX_WORKERS", "8")
    monkeypatch.setenv("QUERYNODE_CONTINUE_ON_FAIL", "true")
    monkeypatch.setenv("QUERYNODE_LOG_LEVEL", "debug")
    monkeypatch.setenv("SELECT_MAX_WORKERS", "2")

    s = Settings()
    assert s.SELECT_MAX_WORKERS == 8
    assert s.CONTINUE_ON_FAIL is True
    assert s.LOG_LEVEL == "DEBUG"


@pytest.mark.parametrize(
    "name, value",
    [
        ("QUERYNODE_SELECT_MAX_WORKERS", "0"),
        ("QUERYNODE_SQLITE_TIMEOUT_S", "-1"),
        ("QUERYNODE_SPREAD_FIELD", "  "),
        ("QUERYNODE_LOG_LEVEL", "LOUD"),
    ],
)
def test_invalid_overrides_fail_early(monkeypatch, name, value):
    monkeypatch.setenv(name, value)
    with pytest.raises(ValidationError):
        Settings()


def test_unknown_fields_are_forbidden():
    with pytest.raises(ValidationError):
        Settings(NOT_A_FIELD=1)
