"""Tests for apisample.lookup.local and create_lookup."""

from __future__ import annotations

import asyncio
import json
from pathlib import Path

import pytest

from apisample.exceptions import UpstreamLookupFailure
from apisample.lookup import HttpOperationLookup, LocalSpecLookup, create_lookup
from apisample.models import GlobalConfig, LookupConfig


class TestLocalSpecLookup:
    def test_get_api_operations(self, payments_spec_path: Path) -> None:
        text = asyncio.run(LocalSpecLookup().get_api_operations(str(payments_spec_path)))
        payload = json.loads(text)
        assert [op["operationId"] for op in payload["operations"]] == [
            "listPayments",
            "createPayment",
            "getPayment",
            "listAccounts",
        ]

    def test_get_api_operation_details(self, payments_spec_path: Path) -> None:
        text = asyncio.run(
            LocalSpecLookup().get_api_operation_details(
                str(payments_spec_path), "post", "/payments"
            )
        )
        document = json.loads(text)
        assert document["method"] == "POST"
        assert document["servers"][0]["url"] == "https://api.example.com/v1"
        assert document["parameters"][0]["name"] == "Idempotency-Key"

    def test_unknown_operation(self, payments_spec_path: Path) -> None:
        with pytest.raises(UpstreamLookupFailure, match="Operation DELETE /payments not found"):
            asyncio.run(
                LocalSpecLookup().get_api_operation_details(
                    str(payments_spec_path), "delete", "/payments"
                )
            )

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(UpstreamLookupFailure, match="not found"):
            asyncio.run(LocalSpecLookup().get_api_operations(str(tmp_path / "nope.yaml")))

    def test_swagger_document_rejected(self, tmp_path: Path) -> None:
        path = tmp_path / "legacy.json"
        path.write_text('{"swagger": "2.0", "paths": {}}')
        with pytest.raises(UpstreamLookupFailure, match="Swagger 2.0 is not supported"):
            asyncio.run(LocalSpecLookup().get_api_operations(str(path)))


class TestCreateLookup:
    def test_local_by_default(self) -> None:
        assert isinstance(create_lookup(GlobalConfig()), LocalSpecLookup)

    def test_remote_when_url_configured(self) -> None:
        config = GlobalConfig(lookup=LookupConfig(url="https://lookup.example.com"))
        assert isinstance(create_lookup(config), HttpOperationLookup)


REPORTS_YAML = """\
openapi: 3.0.3
info:
  title: Reports
  version: "1"
paths:
  /reports:
    get:
      summary: List reports
      parameters:
        - name: from
          in: query
          example: 2024-01-31
          schema:
            type: string
            format: date
        - name: X-Sent-At
          in: header
          schema:
            type: string
            format: date-time
            example: 2024-01-31T10:15:00Z
"""


class TestYamlDates:
    def test_unquoted_dates_stay_strings(self, tmp_path: Path) -> None:
        path = tmp_path / "reports.yaml"
        path.write_text(REPORTS_YAML)

        text = asyncio.run(
            LocalSpecLookup().get_api_operation_details(str(path), "GET", "/reports")
        )

        parameters = json.loads(text)["parameters"]
        assert parameters[0]["example"] == "2024-01-31"
        assert parameters[1]["schema"]["example"] == "2024-01-31T10:15:00Z"

    def test_sample_request_with_date_examples(self, tmp_path: Path) -> None:
        from apisample.sampling import build_sample_request

        path = tmp_path / "reports.yaml"
        path.write_text(REPORTS_YAML)
        text = asyncio.run(
            LocalSpecLookup().get_api_operation_details(str(path), "GET", "/reports")
        )

        assert build_sample_request(text, "GET", "/reports") == (
            "curl -X GET 'https://api.mastercard.com/reports?from=2024-01-31'"
            " -H 'X-Sent-At: 2024-01-31T10:15:00Z'"
        )
