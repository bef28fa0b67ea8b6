# ------------------------------------------------------------
# Module: querynode/flow/orchestrator.py
# Purpose: Single entry point to run one request or a batch end-to-end
#          (validate → classify → bind → execute → shape).
# ------------------------------------------------------------

"""Run query requests through the engine stages.

Responsibilities
----------------
- Reject empty database paths and queries before touching SQLite.
  Only the empty string counts; a blank query runs as a raw statement.
- Parse arguments, classify, split, and bind per statement.
- Hold exactly one connection per request, released on every exit path.
- Apply the batch failure policy (continue-on-failure or fail-fast).
- Log one perf line per request with status and duration.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Iterable

from querynode.core.config import settings
from querynode.engine import arguments
from querynode.engine.classifier import classify
from querynode.engine.connection import open_connection
from querynode.engine.errors import InvalidRequestError, ItemFailedError
from querynode.engine.executor import execute
from querynode.engine.shaper import shape
from querynode.engine.types import OutputRecord, Request
from querynode.utils.logging_extras import log_adapter, new_cid

log = logging.getLogger("querynode.flow.orchestrator")


def _ms_since(t0_ns: int) -> float:
    return (time.perf_counter_ns() - t0_ns) / 1_000_000.0


def _validate(request: Request) -> None:
    if not request.database_path:
        raise InvalidRequestError("No database path provided.")
    if not request.query:
        raise InvalidRequestError("No query provided.")


def process_request(request: Request, source_index: int | None = None) -> list[OutputRecord]:
    """Execute one request and return its shaped output records.

    Steps
    -----
    1) Validate path and query (no connection is opened on failure).
    2) Classify, translate `$` markers, and parse the argument object.
    3) Split SELECT text into statements and bind arguments per statement.
    4) Open the connection, execute, close.
    5) Shape the result (spread applies to SELECT only).

    Raises
    ------
    InvalidRequestError, ArgumentParseError, QueryExecutionError
    """
    _validate(request)

    resolved = classify(request.query_type, request.query)
    query = arguments.translate_query(request.query)
    args = arguments.parse_arguments(request.args)

    statements = arguments.split_statements(query, resolved)
    bound = arguments.bind_all(args, statements)

    t0 = time.perf_counter_ns()
    with open_connection(request.database_path) as con:
        result = execute(con, resolved, statements, bound)
    # Failures are reported once, by the caller.
    log.debug(
        "execute ok type=%s statements=%d item=%s exec_ms=%.3f",
        resolved.value,
        len(statements),
        source_index,
        _ms_since(t0),
    )

    return shape(resolved, request.spread, result, source_index=source_index)


def run_batch(
    requests: Iterable[Request],
    *,
    continue_on_fail: bool | None = None,
    cid: str | None = None,
) -> list[OutputRecord]:
    """Process requests in order and collect every output record.

    Parameters
    ----------
    requests : Iterable[Request]
        Input items; each is processed independently and in order.
    continue_on_fail : bool | None
        True → a failed item emits `{"error": message}` and the batch goes on.
        False → the first failure aborts the batch. None → settings default.
    cid : str | None
        Correlation id for log lines; generated when omitted.

    Raises
    ------
    ItemFailedError
        Fail-fast mode, when the failing error carried no context.
    QueryNodeError
        Fail-fast mode, the caught error with `item_index` added to its context.
    """
    if continue_on_fail is None:
        continue_on_fail = settings.CONTINUE_ON_FAIL
    cid = cid or new_cid()
    blog = log_adapter(log, cid)

    out: list[OutputRecord] = []
    for index, request in enumerate(requests):
        t0 = time.perf_counter_ns()
        status = "ok"
        err: Exception | None = None
        try:
            out.extend(process_request(request, source_index=index))
        except Exception as e:
            status = "error"
            err = e
            if continue_on_fail:
                message = str(e) or "Unknown error"
                out.append(OutputRecord(json={"error": message}, source_index=index))
                continue
            context = getattr(e, "context", None)
            if isinstance(context, dict) and context:
                # Keep the caught error and its context; only add the index.
                context["item_index"] = index
                raise
            raise ItemFailedError(str(e) or "Unknown error", item_index=index) from e
        finally:
            dur_ms = _ms_since(t0)
            level = logging.WARNING if dur_ms > settings.EXECUTION_SLA_MS else logging.INFO
            blog.log(
                level,
                "perf event=request cid=%s item=%d status=%s dur_ms=%.3f%s",
                cid,
                index,
                status,
                dur_ms,
                "" if not err else f" err={type(err).__name__}:{err}",
            )
    return out
