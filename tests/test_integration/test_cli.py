"""End-to-end CLI tests against the payments fixture spec."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from apisample import __version__
from apisample.app import app
from apisample.config import load_global_config


@pytest.fixture
def run(cli_runner, isolated_config: Path, payments_spec_path: Path):
    """Invoke the CLI in plain, quiet mode against the payments spec."""

    def _run(*args: str, spec: bool = True):
        base = ["--plain", "--quiet"]
        if spec:
            base += ["--spec", str(payments_spec_path)]
        return cli_runner.invoke(app, [*base, *args])

    return _run


class TestSample:
    def test_inherited_and_overridden_parameters(self, run) -> None:
        result = run("sample", "GET", "/payments/{paymentId}")
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == (
            "curl -X GET 'https://api.example.com/v1/payments/string?verbose=true'"
            " -H 'X-Request-Id: req-1'"
        )

    def test_json_body(self, run) -> None:
        result = run("sample", "post", "/payments")
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == (
            "curl -X POST 'https://api.example.com/v1/payments'"
            " -H 'Idempotency-Key: abc-123' -H 'Content-Type: application/json'"
            " -d '{\"amount\":0,\"currency\":\"EUR\",\"metadata\":{}}'"
        )

    def test_defaults_and_enums_in_query(self, run) -> None:
        result = run("sample", "GET", "/payments")
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == (
            "curl -X GET 'https://api.example.com/v1/payments?limit=20&status=PENDING'"
        )

    def test_unknown_operation(self, run) -> None:
        result = run("sample", "DELETE", "/payments")
        assert result.exit_code == 6
        assert "Operation DELETE /payments not found" in result.output

    def test_missing_spec(self, run) -> None:
        result = run("sample", "GET", "/payments", spec=False)
        assert result.exit_code == 2
        assert "No API specification configured" in result.output

    def test_spec_from_environment(
        self, run, payments_spec_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("APISAMPLE_SPEC", str(payments_spec_path))
        result = run("sample", "GET", "/accounts", spec=False)
        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "curl -X GET 'https://accounts.example.com/accounts'"


class TestSearch:
    def test_query(self, run) -> None:
        result = run("search", "payment")
        assert result.exit_code == 0, result.output
        ids = [op["operationId"] for op in json.loads(result.stdout)]
        assert ids == ["listPayments", "createPayment", "getPayment"]

    def test_query_and_tag(self, run) -> None:
        result = run("search", "account", "--tag", "Finance")
        assert result.exit_code == 0, result.output
        assert [op["path"] for op in json.loads(result.stdout)] == ["/accounts"]

    def test_no_match(self, run) -> None:
        result = run("search", "refund")
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout) == []

    def test_unreadable_spec(self, run, tmp_path: Path) -> None:
        broken = tmp_path / "broken.json"
        broken.write_text("{")
        result = run("--spec", str(broken), "search", "x", spec=False)
        assert result.exit_code == 6
        assert "Invalid JSON" in result.output


class TestTools:
    def test_with_spec(self, run) -> None:
        result = run("tools")
        assert result.exit_code == 0, result.output
        assert result.stdout.splitlines() == [
            "Method\tName\tArguments",
            "search-api-operations\tSearch API Operations\tquery, tag",
            "generate-api-sample-request\tGenerate API Sample Request\tmethod, path",
        ]

    def test_without_spec(self, run) -> None:
        result = run("tools", spec=False)
        assert result.exit_code == 0, result.output
        assert "apiSpecificationPath, query, tag" in result.stdout


class TestConfigCommands:
    def test_set_show_reset(self, run) -> None:
        result = run("config", "set", "lookup.timeout", "10", spec=False)
        assert result.exit_code == 0, result.output
        assert load_global_config().lookup.timeout == 10.0

        result = run("config", "show", spec=False)
        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["lookup"]["timeout"] == 10.0

        result = run("config", "reset", "--force", spec=False)
        assert result.exit_code == 0, result.output
        assert load_global_config().lookup.timeout == 30.0

    def test_set_spec_path_is_used(self, run, payments_spec_path: Path) -> None:
        run("config", "set", "api_specification_path", str(payments_spec_path), spec=False)
        result = run("sample", "GET", "/accounts", spec=False)
        assert result.exit_code == 0, result.output
        assert "accounts.example.com" in result.stdout

    def test_unknown_key(self, run) -> None:
        result = run("config", "set", "lookup.retries", "3", spec=False)
        assert result.exit_code == 2
        assert "Unknown config key" in result.output

    def test_invalid_value(self, run) -> None:
        result = run("config", "set", "lookup.verify_ssl", "sometimes", spec=False)
        assert result.exit_code == 2
        assert "Validation error" in result.output


def test_version(cli_runner) -> None:
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert f"apisample {__version__}" in result.output


def test_configured_output_format(
    cli_runner, isolated_config: Path, payments_spec_path: Path
) -> None:
    cli_runner.invoke(app, ["--quiet", "config", "set", "output.format", "json"])
    result = cli_runner.invoke(app, ["--quiet", "--spec", str(payments_spec_path), "tools"])
    assert result.exit_code == 0, result.output
    records = json.loads(result.stdout)
    assert records[0] == {
        "Method": "search-api-operations",
        "Name": "Search API Operations",
        "Arguments": "query, tag",
    }
