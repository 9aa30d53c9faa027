"""Tests for apisample.search."""

from __future__ import annotations

import json
from typing import Any

import pytest

from apisample.search import filter_operations, normalize_operations, render_search_results

OPERATIONS: list[dict[str, Any]] = [
    {
        "method": "GET",
        "path": "/payments/{paymentId}",
        "summary": "Get payment",
        "description": "Retrieve payment by identifier",
        "tags": ["Payments"],
    },
    {
        "method": "GET",
        "path": "/accounts",
        "summary": "List accounts",
        "description": "Retrieve accounts",
        "tags": ["Accounts", "Finance"],
    },
]


class TestNormalizeOperations:
    def test_wrapped(self) -> None:
        assert normalize_operations({"operations": OPERATIONS}) == OPERATIONS

    def test_bare_array(self) -> None:
        assert normalize_operations(OPERATIONS) == OPERATIONS

    @pytest.mark.parametrize(
        "payload", [{"operations": "x"}, {"items": []}, "text", 3, None]
    )
    def test_other_shapes_are_empty(self, payload: Any) -> None:
        assert normalize_operations(payload) == []


class TestFilterOperations:
    def test_matches_summary_case_insensitively(self) -> None:
        assert filter_operations(OPERATIONS, "PAYMENT") == [OPERATIONS[0]]

    def test_matches_description(self) -> None:
        assert filter_operations(OPERATIONS, "identifier") == [OPERATIONS[0]]

    def test_matches_tag_substring(self) -> None:
        assert filter_operations(OPERATIONS, "fin") == [OPERATIONS[1]]

    def test_tag_filter_is_exact_and_case_insensitive(self) -> None:
        assert filter_operations(OPERATIONS, "account", tag="finance") == [OPERATIONS[1]]
        assert filter_operations(OPERATIONS, "account", tag="Fin") == []

    def test_tag_filter_excludes_otherwise_matching(self) -> None:
        assert filter_operations(OPERATIONS, "retrieve", tag="Payments") == [OPERATIONS[0]]

    def test_empty_query_matches_everything(self) -> None:
        assert filter_operations(OPERATIONS, "") == OPERATIONS

    def test_empty_tag_means_no_tag_filter(self) -> None:
        assert filter_operations(OPERATIONS, "retrieve", tag="") == OPERATIONS

    def test_no_match(self) -> None:
        assert filter_operations(OPERATIONS, "refund") == []

    def test_missing_fields_are_tolerated(self) -> None:
        operations = [
            {"path": "/bare"},
            {"summary": None, "description": None, "tags": "Payments"},
            {"summary": "Ping", "tags": [None, 3, "Health"]},
        ]
        assert filter_operations(operations, "health") == [operations[2]]
        assert filter_operations(operations, "") == operations

    def test_non_dict_entries_are_skipped(self) -> None:
        assert filter_operations(["payment", None, OPERATIONS[0]], "payment") == [OPERATIONS[0]]

    def test_results_are_unchanged_and_ordered(self) -> None:
        result = filter_operations(OPERATIONS, "retrieve")
        assert result == OPERATIONS
        assert result[0] is OPERATIONS[0]


class TestRenderSearchResults:
    def test_pretty_printed(self) -> None:
        text = render_search_results([{"summary": "Get payment"}])
        assert text == '[\n  {\n    "summary": "Get payment"\n  }\n]'

    def test_empty(self) -> None:
        assert render_search_results([]) == "[]"

    def test_non_ascii_kept(self) -> None:
        text = render_search_results([{"summary": "Zahlung überweisen"}])
        assert "überweisen" in text
        assert json.loads(text) == [{"summary": "Zahlung überweisen"}]

    def test_integral_floats_written_as_integers(self) -> None:
        text = render_search_results([{"x-rank": 2.0, "x-weight": 0.5}])
        assert '"x-rank": 2,' in text
        assert '"x-weight": 0.5' in text
