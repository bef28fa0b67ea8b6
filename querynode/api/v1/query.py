# ------------------------------------------------------------
# Module: querynode/api/v1/query.py
# Purpose: Run one query or an ordered batch of queries against SQLite files.
# ------------------------------------------------------------

"""Expose the query engine over HTTP. Keeps the controller thin by
delegating classification, binding, execution, and shaping to the flow layer.

Responsibilities
----------------
- Validate request contracts and convert them to engine `Request`s.
- Map engine errors to stable HTTP status codes.
- Serialize output records (blobs as base64) into one response shape.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, HTTPException

from querynode.engine.errors import (
    ArgumentParseError,
    InvalidRequestError,
    QueryExecutionError,
    QueryNodeError,
)
from querynode.flow.orchestrator import process_request, run_batch

from .models import BatchRequest, ItemError, QueryRequest, QueryResponse
from .serializers.records import to_items_payload

router = APIRouter()
log = logging.getLogger("querynode.api.query")


# POST /v1/query → run one request; errors map to 400/422/500.
@router.post("", response_model=QueryResponse)
def run_query(req: QueryRequest) -> dict:
    try:
        records = process_request(req.to_request())
    # Input/validation errors → 400; engine rejections → 422.
    except (InvalidRequestError, ArgumentParseError) as e:
        raise HTTPException(status_code=400, detail=str(e)) from e
    except QueryExecutionError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    except Exception:
        log.exception("query_failed db=%s", req.database_path)
        raise HTTPException(status_code=500, detail="query_failed")
    return to_items_payload(records)


# POST /v1/query/batch → run items in order under the chosen failure policy.
@router.post("/batch", response_model=QueryResponse)
def run_query_batch(req: BatchRequest) -> dict:
    try:
        records = run_batch(
            [r.to_request() for r in req.requests],
            continue_on_fail=req.continue_on_fail,
        )
    except QueryNodeError as e:
        # Fail-fast: report which item stopped the batch.
        raise HTTPException(
            status_code=422,
            detail=ItemError(message=e.message, item_index=e.context.get("item_index")).model_dump(),
        ) from e
    except Exception:
        log.exception("batch_failed size=%d", len(req.requests))
        raise HTTPException(status_code=500, detail="batch_failed")
    return to_items_payload(records)
