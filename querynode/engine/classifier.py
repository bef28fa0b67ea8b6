# ------------------------------------------------------------
# Module: querynode/engine/classifier.py
# Purpose: Resolve the query type from a declaration or keyword detection.
# ------------------------------------------------------------

"""Keyword-based query type resolution.

Summary:
    An explicit declaration always wins. `AUTO` is resolved by a
    case-insensitive substring search over the trimmed query text, in a fixed
    precedence order. No match leaves the type as `AUTO`, which the executor
    runs as a raw statement.

Details:
    - Pure function: no I/O, no logging side effects.
    - Substring search, not parsing: a keyword inside a comment, literal, or
      identifier still counts (e.g. `SELECT updated_at FROM t` is SELECT only
      because SELECT is checked first).
"""

from __future__ import annotations

from .types import QueryType

# Precedence matters; first hit wins.
KEYWORD_PRECEDENCE: tuple[QueryType, ...] = (
    QueryType.SELECT,
    QueryType.INSERT,
    QueryType.UPDATE,
    QueryType.DELETE,
    QueryType.CREATE,
)


def classify(declared: QueryType | str, query: str) -> QueryType:
    """Return the resolved query type for `query`.

    Example:
        >>> classify(QueryType.AUTO, "  insert into t select 1")
        <QueryType.SELECT: 'SELECT'>
        >>> classify("DELETE", "SELECT 1")
        <QueryType.DELETE: 'DELETE'>
    """
    declared = QueryType(declared)
    if declared is not QueryType.AUTO:
        return declared

    text = query.strip().upper()
    for candidate in KEYWORD_PRECEDENCE:
        if candidate.value in text:
            return candidate
    return QueryType.AUTO
