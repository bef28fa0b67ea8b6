# ------------------------------------------------------------
# Module: querynode/engine/types.py
# Purpose: Shared request, result, and output record types for the query engine.
# ------------------------------------------------------------

"""Core data structures passed between engine stages.

Summary:
    Defines the immutable per-record `Request`, the resolved `QueryType`,
    the execution result shapes, and the `OutputRecord` emitted to callers.

Details:
    - `QueryType` is a wire enum; values are part of the public API.
    - `SqlValue` is the closed set of values SQLite binds and returns.
    - Rows are plain dicts keyed by column name, in column order.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any, TypedDict, Union


class QueryType(str, Enum):
    """Declared or resolved query category."""

    AUTO = "AUTO"
    CREATE = "CREATE"
    SELECT = "SELECT"
    INSERT = "INSERT"
    UPDATE = "UPDATE"
    DELETE = "DELETE"


MUTATION_TYPES = frozenset({QueryType.INSERT, QueryType.UPDATE, QueryType.DELETE})

# Values SQLite can bind or return; blobs come back as bytes.
SqlValue = Union[None, bool, int, float, str, bytes]
Row = dict[str, SqlValue]


class MutationResult(TypedDict):
    """Result of an INSERT/UPDATE/DELETE."""

    changes: int
    last_id: int | None


class StatusMessage(TypedDict):
    """Fixed acknowledgement for raw statement execution."""

    message: str


# rows | rows per statement | mutation | status
ExecutionResult = Union[list[Row], list[list[Row]], MutationResult, StatusMessage]


@dataclass(frozen=True)
class Request:
    """One input record's query parameters (immutable once read).

    Attributes:
        database_path: Path to the SQLite file (or ":memory:").
        query: SQL text using `$name` parameter markers.
        query_type: Declared type; `AUTO` asks the classifier.
        args: JSON object string (or parsed mapping) of `"$name"` keys to values.
        spread: Emit one output record per result element (SELECT only).
    """

    database_path: str
    query: str
    query_type: QueryType = QueryType.AUTO
    args: str | Mapping[str, Any] = "{}"
    spread: bool = False


@dataclass(frozen=True)
class OutputRecord:
    """One record emitted to the caller; `source_index` points at the input item."""

    json: Any
    source_index: int | None = None
