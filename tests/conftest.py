"""Shared test fixtures for apisample.

Provides reusable fixtures for loading spec fixtures, creating isolated
config environments, managing output state, faking the operation lookup,
and running CLI commands. These fixtures are automatically discovered by
pytest and available to all test modules without explicit imports.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import pytest

from apisample.lookup.base import OperationLookup
from apisample.output import reset_output


FIXTURES_DIR = Path(__file__).parent / "fixtures"


# ---------------------------------------------------------------------------
# Auto-reset global output state between tests
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def _reset_output_between_tests() -> None:
    """Reset the global OutputManager after every test.

    The OutputManager caches references to sys.stdout/sys.stderr at
    creation time. When Typer's CliRunner redirects those streams during
    a test and the test finishes, the cached references become stale.
    Resetting forces a fresh manager to be created on next use.
    """
    yield
    reset_output()


# ---------------------------------------------------------------------------
# Spec fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def payments_raw() -> dict[str, Any]:
    """Load the raw payments spec dict."""
    with open(FIXTURES_DIR / "payments.json") as f:
        return json.load(f)


@pytest.fixture
def payments_spec_path(tmp_path: Path) -> Path:
    """Copy the payments spec into tmp_path and return its path."""
    spec_path = tmp_path / "payments.json"
    spec_path.write_text((FIXTURES_DIR / "payments.json").read_text())
    return spec_path


@pytest.fixture
def payment_operation() -> dict[str, Any]:
    """An operation document with path, query, and header params plus a JSON body.

    None of the values carries an explicit example, so every value must be
    synthesised.
    """
    return {
        "servers": [{"url": "https://api.example.com"}],
        "path": "/payments/{paymentId}",
        "parameters": [
            {"name": "paymentId", "in": "path", "schema": {"type": "string"}},
            {"name": "verbose", "in": "query", "schema": {"type": "boolean"}},
            {"name": "X-Auth", "in": "header", "schema": {"type": "string"}},
        ],
        "requestBody": {
            "content": {
                "application/json": {
                    "schema": {
                        "type": "object",
                        "properties": {"amount": {"type": "number"}},
                    },
                },
            },
        },
    }


# ---------------------------------------------------------------------------
# Lookup fake
# ---------------------------------------------------------------------------


class FakeLookup(OperationLookup):
    """In-memory lookup that records calls and returns canned text.

    Set ``error`` to make every call raise it.
    """

    def __init__(
        self,
        operations: str = "[]",
        details: str = "{}",
        error: Optional[Exception] = None,
    ) -> None:
        self.operations = operations
        self.details = details
        self.error = error
        self.calls: list[tuple[Any, ...]] = []

    async def get_api_operations(self, api_specification_path: str) -> str:
        self.calls.append(("operations", api_specification_path))
        if self.error is not None:
            raise self.error
        return self.operations

    async def get_api_operation_details(
        self, api_specification_path: str, method: str, path: str
    ) -> str:
        self.calls.append(("details", api_specification_path, method, path))
        if self.error is not None:
            raise self.error
        return self.details


@pytest.fixture
def fake_lookup() -> FakeLookup:
    return FakeLookup()


# ---------------------------------------------------------------------------
# Config isolation fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Isolate configuration to a temporary directory.

    Sets XDG_CONFIG_HOME and XDG_DATA_HOME to subdirectories of tmp_path so
    that tests never touch real user config, clears all APISAMPLE_*
    environment variables, and changes the working directory to tmp_path.

    Returns:
        The tmp_path root directory for additional file creation.
    """
    monkeypatch.setattr("apisample.config._is_xdg_platform", lambda: True)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path / "data"))

    for var in ["APISAMPLE_SPEC", "APISAMPLE_LOOKUP_URL"]:
        monkeypatch.delenv(var, raising=False)

    monkeypatch.chdir(tmp_path)
    return tmp_path


# ---------------------------------------------------------------------------
# CLI runner fixture
# ---------------------------------------------------------------------------


@pytest.fixture
def cli_runner():
    """Typer CLI test runner."""
    from typer.testing import CliRunner

    return CliRunner()
