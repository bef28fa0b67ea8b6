# ------------------------------------------------------------
# Module: querynode/api/v1/models.py
# Purpose: Public request/response contracts for the query API.
# ------------------------------------------------------------
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from querynode.core.config import settings
from querynode.engine.types import QueryType, Request


# JSON request for /v1/query:
# - Enforce strict contract (extra="forbid") to avoid silent field drift.
# - Empty path/query are accepted here and rejected by the engine, so the
#   HTTP and batch surfaces report the same error.
class QueryRequest(BaseModel):
    """One query to run against a SQLite file."""

    model_config = ConfigDict(extra="forbid")

    database_path: str
    query: str
    query_type: QueryType = QueryType.AUTO
    # JSON object string ('{"$id": 1}') or an inline object.
    args: str | dict[str, Any] = Field(default_factory=lambda: settings.DEFAULT_ARGS)
    spread: bool = False

    # Accept lower-case type names from hand-written clients.
    @field_validator("query_type", mode="before")
    @classmethod
    def _upper_type(cls, v: Any) -> Any:
        return v.upper() if isinstance(v, str) else v

    def to_request(self) -> Request:
        return Request(
            database_path=self.database_path,
            query=self.query,
            query_type=self.query_type,
            args=self.args,
            spread=self.spread,
        )


class BatchRequest(BaseModel):
    """Ordered list of queries; each item is processed independently."""

    model_config = ConfigDict(extra="forbid")

    requests: list[QueryRequest]
    # None → server default (settings.CONTINUE_ON_FAIL).
    continue_on_fail: bool | None = None


class OutputItem(BaseModel):
    """One output record on the wire."""

    json_: Any = Field(alias="json", serialization_alias="json")
    source_index: int | None = None

    model_config = ConfigDict(populate_by_name=True)


class QueryResponse(BaseModel):
    items: list[OutputItem]


class ItemError(BaseModel):
    """Fail-fast error body: message plus the failing input index."""

    message: str
    item_index: int | None = None
