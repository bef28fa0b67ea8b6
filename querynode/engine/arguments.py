# ------------------------------------------------------------
# Module: querynode/engine/arguments.py
# Purpose: Translate parameter sigils, parse raw arguments, and split/bind statements.
# ------------------------------------------------------------

"""Argument normalization for named-parameter binding.

Summary:
    Callers write `$name` markers in SQL and `"$name"` keys in the argument
    object. SQLite's Python driver binds named parameters by the name after
    the leading marker character, so the query text is rewritten to `@name`
    and argument keys lose their `$`. Both sides are rewritten the same way so
    keys and markers stay aligned.

Details:
    - `normalize` keeps only keys that occur as a plain substring of the
      statement text. This is not boundary-aware: key `id` is kept for a
      statement mentioning `@user_id`. Callers rely on this behavior.
    - Splitting applies to SELECT only; other types always run the full text.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from .errors import ArgumentParseError
from .types import QueryType

CALLER_SIGIL = "$"
ENGINE_SIGIL = "@"


def translate_query(query: str) -> str:
    """Rewrite every `$` in the query text to SQLite's `@` marker."""
    return query.replace(CALLER_SIGIL, ENGINE_SIGIL)


def translate_key(key: str) -> str:
    """Strip every `$` from an argument key."""
    return key.replace(CALLER_SIGIL, "")


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON.
    raise ValueError(f"invalid literal {name}")


def parse_arguments(raw: str | Mapping[str, Any]) -> dict[str, Any]:
    """Parse a JSON object string into an argument dict with translated keys.

    Raises:
        ArgumentParseError: if `raw` is not valid JSON or not a JSON object.

    Example:
        >>> parse_arguments('{"$id": 1, "name": "x"}')
        {'id': 1, 'name': 'x'}
    """
    if isinstance(raw, Mapping):
        parsed: Any = raw
    else:
        try:
            parsed = json.loads(raw, parse_constant=_reject_constant)
        except (TypeError, ValueError) as e:
            raise ArgumentParseError(f"Arguments are not valid JSON: {e}") from e

    if not isinstance(parsed, Mapping):
        raise ArgumentParseError(
            f"Arguments must be a JSON object, got {type(parsed).__name__}"
        )

    # Later keys win when two keys collapse to the same name ("$a" and "a").
    return {translate_key(str(k)): v for k, v in parsed.items()}


def normalize(arguments: Mapping[str, Any], statement: str) -> dict[str, Any]:
    """Return the subset of `arguments` whose key occurs in `statement`."""
    return {k: v for k, v in arguments.items() if k in statement}


def split_statements(query: str, resolved: QueryType) -> list[str]:
    """Split a SELECT on `;` into independent statements.

    Notes
    -----
    - Fragments are trimmed; empty fragments (e.g. after a trailing `;`) drop.
    - A single remaining fragment means no split: the full text is returned.
    - Non-SELECT types always yield `[query]`, even with several `;` parts.
    - Semicolons inside string literals also split (known limitation).
    """
    if resolved is not QueryType.SELECT:
        return [query]
    fragments = [f.strip() for f in query.split(";") if f.strip()]
    if len(fragments) > 1:
        return fragments
    return [query]


def bind_all(arguments: Mapping[str, Any], statements: list[str]) -> list[dict[str, Any]]:
    """Filter `arguments` independently for each statement."""
    return [normalize(arguments, s) for s in statements]
