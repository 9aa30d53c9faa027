"""Free-text and tag search over a specification's operation list.

Operations arrive from :meth:`~apisample.lookup.base.OperationLookup.get_api_operations`
either wrapped in an ``{"operations": [...]}`` object or as a bare array.
:func:`normalize_operations` accepts both shapes, :func:`filter_operations`
applies the case-insensitive predicate, and :func:`render_search_results`
produces the pretty-printed JSON returned to callers.

Matching never fails on odd input: missing ``summary``/``description`` are
treated as empty strings and a missing or non-list ``tags`` field as no tags.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any, Optional

from apisample.sampling.formatting import collapse_integral_floats


def normalize_operations(payload: Any) -> list[Any]:  # noqa: ANN401
    """Extract the operation list from a decoded lookup payload.

    Returns:
        ``payload["operations"]`` when it is a list, *payload* itself when it
        is a list, otherwise an empty list.
    """
    if isinstance(payload, Mapping) and isinstance(payload.get("operations"), list):
        return payload["operations"]
    if isinstance(payload, list):
        return payload
    return []


def filter_operations(
    operations: list[Any],
    query: str,
    tag: Optional[str] = None,
) -> list[dict[str, Any]]:
    """Return the operations matching *query* and, if given, *tag*.

    An operation matches the query when the lowercased query is a substring
    of its lowercased summary, description, or any of its tags. When *tag* is
    given, the operation must also carry that tag (case-insensitive, exact).

    Args:
        operations: Operation summaries; non-dict entries are skipped.
        query: Free-text search term.
        tag: Optional tag filter.

    Returns:
        The matching operations, unchanged and in their original order.

    Example::

        >>> ops = [{"summary": "Get payment", "tags": ["Payments"]}]
        >>> filter_operations(ops, "PAYMENT")
        [{'summary': 'Get payment', 'tags': ['Payments']}]
    """
    needle = query.lower()
    wanted_tag = tag.lower() if tag else None

    matches: list[dict[str, Any]] = []
    for operation in operations:
        if not isinstance(operation, Mapping):
            continue

        summary = _lower_text(operation.get("summary"))
        description = _lower_text(operation.get("description"))
        tags = _lower_tags(operation.get("tags"))

        matches_query = (
            needle in summary
            or needle in description
            or any(needle in t for t in tags)
        )
        matches_tag = wanted_tag in tags if wanted_tag else True

        if matches_query and matches_tag:
            matches.append(operation)
    return matches


def render_search_results(operations: list[dict[str, Any]]) -> str:
    """Pretty-print *operations* as a JSON array with 2-space indentation.

    Integral floats are written as integers, as in request bodies.
    """
    return json.dumps(collapse_integral_floats(operations), indent=2, ensure_ascii=False)


def _lower_text(value: Any) -> str:  # noqa: ANN401
    if value is None:
        return ""
    return str(value).lower()


def _lower_tags(value: Any) -> list[str]:  # noqa: ANN401
    if not isinstance(value, list):
        return []
    return [t.lower() for t in value if isinstance(t, str)]
