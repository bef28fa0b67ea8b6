# ------------------------------------------------------------
# Module: querynode/engine/shaper.py
# Purpose: Wrap execution results into output records, optionally spread.
# ------------------------------------------------------------

"""Result shaping for downstream consumers.

- Non-SELECT results, or SELECT without spread, become exactly one record.
- SELECT with spread emits one record per result element: a nested row list
  (split statements) is wrapped under `settings.SPREAD_FIELD`, anything else
  (a single row) is emitted as-is.
"""

from __future__ import annotations

from querynode.core.config import settings

from .types import ExecutionResult, OutputRecord, QueryType


def shape(
    resolved: QueryType,
    spread: bool,
    result: ExecutionResult,
    source_index: int | None = None,
) -> list[OutputRecord]:
    if resolved is not QueryType.SELECT or not spread:
        return [OutputRecord(json=result, source_index=source_index)]

    records: list[OutputRecord] = []
    for element in result:
        if isinstance(element, list):
            records.append(
                OutputRecord(json={settings.SPREAD_FIELD: element}, source_index=source_index)
            )
        else:
            records.append(OutputRecord(json=element, source_index=source_index))
    return records
