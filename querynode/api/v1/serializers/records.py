# ------------------------------------------------------------
# Module: querynode/api/v1/serializers/records.py
# Purpose: Shape engine output records into JSON-safe public payloads.
# ------------------------------------------------------------
from __future__ import annotations

import base64
from collections.abc import Iterable, Mapping
from typing import Any

from querynode.engine.types import OutputRecord


def to_jsonable(value: Any) -> Any:
    """Recursively convert SQLite values into JSON-safe values.

    Blobs (bytes) become base64 strings; mappings and lists are walked;
    everything else is returned unchanged.
    """
    if isinstance(value, (bytes, bytearray, memoryview)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, Mapping):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value


def to_record_payload(record: OutputRecord) -> dict:
    """Build the wire shape for one output record."""
    return {"json": to_jsonable(record.json), "source_index": record.source_index}


def to_items_payload(records: Iterable[OutputRecord]) -> dict:
    return {"items": [to_record_payload(r) for r in records]}
