# ------------------------------------------------------------
# Module: querynode/cli.py
# Purpose: CLI to run one query or a JSON batch file against SQLite.
# ------------------------------------------------------------

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

from querynode.api.v1.serializers.records import to_record_payload
from querynode.core.logging import configure_logging
from querynode.engine.errors import QueryNodeError
from querynode.engine.types import QueryType, Request
from querynode.flow.orchestrator import run_batch


def _load_batch(path: Path) -> list[Request]:
    """Read a JSON list of request objects (same keys as the HTTP API)."""
    items = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(items, list):
        raise ValueError(f"batch file must hold a JSON list: {path}")
    requests = []
    for i, item in enumerate(items):
        if not isinstance(item, dict):
            raise ValueError(f"batch item {i} must be a JSON object, got {type(item).__name__}")
        requests.append(
            Request(
                database_path=item.get("database_path", ""),
                query=item.get("query", ""),
                query_type=QueryType(str(item.get("query_type", "AUTO")).upper()),
                args=item.get("args", "{}"),
                spread=bool(item.get("spread", False)),
            )
        )
    return requests


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="querynode",
        description="Run parameterized SQL against a SQLite database file.",
    )
    ap.add_argument("--db", help="Path to the SQLite database file.")
    ap.add_argument("--query", help="SQL text; use $name for parameters.")
    ap.add_argument(
        "--type",
        default="AUTO",
        choices=[t.value for t in QueryType],
        type=str.upper,
        help="Query type (default: detect from the SQL).",
    )
    ap.add_argument("--args", default="{}", help='JSON object, e.g. \'{"$id": 1}\'.')
    ap.add_argument("--spread", action="store_true", help="One output record per result element.")
    ap.add_argument(
        "--batch",
        type=Path,
        help="JSON file with a list of request objects (overrides --db/--query).",
    )
    ap.add_argument(
        "--continue-on-fail",
        action="store_true",
        help="Emit an error record for a failed item instead of aborting.",
    )
    return ap


def main(argv: list[str] | None = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    # Preconditions: either a batch file or a single query.
    # `ap.error(...)` raises SystemExit(2).
    if args.batch is None and args.query is None:
        ap.error("Provide --query (with --db) or --batch.")

    configure_logging(stream=sys.stderr)

    if args.batch is not None:
        try:
            requests = _load_batch(args.batch)
        except (OSError, ValueError) as e:
            ap.error(str(e))
    else:
        requests = [
            Request(
                database_path=args.db or "",
                query=args.query,
                query_type=QueryType(args.type),
                args=args.args,
                spread=args.spread,
            )
        ]

    try:
        records = run_batch(requests, continue_on_fail=args.continue_on_fail)
    except QueryNodeError as e:
        print(
            f"error: item {e.context.get('item_index')}: {e.message}",
            file=sys.stderr,
        )
        return 1

    print(json.dumps([to_record_payload(r) for r in records], indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
