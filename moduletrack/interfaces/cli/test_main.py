"""Tests for the CLI commands against an in-memory stub server."""

from __future__ import annotations

import json
import logging
from collections.abc import Generator
from unittest.mock import MagicMock, patch

import httpx
import pytest
from typer.testing import CliRunner

from moduletrack.adapters.mockapi import MockAPIClient

from .main import app, build_client

runner = CliRunner()


class StubServer:
    """Minimal mockapi.io look-alike keeping records in a dict."""

    def __init__(self, records: list[dict] | None = None) -> None:
        self.records = {r["id"]: dict(r) for r in records or []}
        self.next_id = len(self.records) + 1
        self.fail_with: int | None = None
        self.calls: list[tuple[str, str]] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path.removeprefix("/api/tgcc").strip("/")
        self.calls.append((request.method, path))
        if self.fail_with:
            return httpx.Response(self.fail_with)

        if request.method == "GET" and not path:
            return httpx.Response(200, json=list(self.records.values()))
        if request.method == "POST" and not path:
            record = {"id": str(self.next_id), **json.loads(request.content)}
            self.next_id += 1
            self.records[record["id"]] = record
            return httpx.Response(201, json=record)
        if path not in self.records:
            return httpx.Response(404, json="Not found")
        if request.method == "GET":
            return httpx.Response(200, json=self.records[path])
        if request.method == "PUT":
            self.records[path].update(json.loads(request.content))
            return httpx.Response(200, json=self.records[path])
        if request.method == "DELETE":
            return httpx.Response(200, json=self.records.pop(path))
        return httpx.Response(405)


@pytest.fixture
def server() -> StubServer:
    """Stub server with a small catalogue."""
    return StubServer(
        [
            {"id": "1", "nom": "Introduction à React", "duree": 10},
            {"id": "2", "nom": "Docker", "duree": 20},
            {"id": "3", "nom": "React avancé", "duree": 15},
        ]
    )


@pytest.fixture(autouse=True)
def stub_client(server: StubServer) -> Generator[MagicMock, None, None]:
    """Route every CLI client to the stub server."""

    def build(api_url: str | None = None) -> MockAPIClient:
        return MockAPIClient(
            base_url="https://stub.mockapi.io/api/tgcc",
            transport=httpx.MockTransport(server),
        )

    with patch("moduletrack.interfaces.cli.main.build_client", side_effect=build) as factory:
        yield factory


@pytest.fixture(autouse=True)
def root_log_level() -> Generator[None, None, None]:
    """Restore the root logger level changed by the CLI callback."""
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def test_list_sorted_by_name() -> None:
    """Test list prints every module."""
    result = runner.invoke(app, ["list"])

    assert result.exit_code == 0
    assert "Docker" in result.output
    assert "Introduction à React" in result.output
    assert "3 / 3 modules" in result.output


def test_list_with_search() -> None:
    """Test list filters on the search term."""
    result = runner.invoke(app, ["list", "--search", "react", "--sort", "duree", "--desc"])

    assert result.exit_code == 0
    assert "Docker" not in result.output
    assert "2 / 3 modules" in result.output
    assert result.output.index("React avancé") < result.output.index("Introduction à React")


def test_list_without_match() -> None:
    """Test an empty projection prints a notice."""
    result = runner.invoke(app, ["list", "--search", "kubernetes"])

    assert result.exit_code == 0
    assert "Aucun module trouvé" in result.output


def test_list_server_error(server: StubServer) -> None:
    """Test remote failures exit 1 with the localized message."""
    server.fail_with = 500
    result = runner.invoke(app, ["list"])

    assert result.exit_code == 1
    assert "récupération des modules" in result.output


def test_show_module() -> None:
    """Test show prints one module."""
    result = runner.invoke(app, ["show", "2"])

    assert result.exit_code == 0
    assert "Docker" in result.output


def test_show_missing_module() -> None:
    """Test show on an unknown id fails cleanly."""
    result = runner.invoke(app, ["show", "99"])

    assert result.exit_code == 1
    assert "Erreur HTTP: 404" in result.output


def test_add_module(server: StubServer) -> None:
    """Test add creates the module on the server."""
    result = runner.invoke(app, ["add", "  Kubernetes  ", "24"])

    assert result.exit_code == 0
    assert "Succès" in result.output
    assert server.records["4"] == {"id": "4", "nom": "Kubernetes", "duree": 24}


def test_add_invalid_module_makes_no_call(server: StubServer) -> None:
    """Test validation errors are printed and nothing is sent."""
    result = runner.invoke(app, ["add", "--", "AB", "-5"])

    assert result.exit_code == 1
    assert "au moins 3 caractères" in result.output
    assert "nombre positif" in result.output
    assert server.calls == []


def test_update_module(server: StubServer) -> None:
    """Test update changes only the given field."""
    result = runner.invoke(app, ["update", "2", "--duree", "25"])

    assert result.exit_code == 0
    assert server.records["2"] == {"id": "2", "nom": "Docker", "duree": 25}


def test_delete_module_with_confirmation(server: StubServer) -> None:
    """Test delete asks before removing."""
    result = runner.invoke(app, ["delete", "1"], input="y\n")

    assert result.exit_code == 0
    assert "1" not in server.records


def test_delete_module_aborted(server: StubServer) -> None:
    """Test declining the confirmation keeps the module."""
    result = runner.invoke(app, ["delete", "1"], input="n\n")

    assert result.exit_code == 1
    assert "1" in server.records


def test_stats() -> None:
    """Test stats prints totals."""
    result = runner.invoke(app, ["stats"])

    assert result.exit_code == 0
    assert "45h" in result.output
    assert "20h" in result.output


def test_version() -> None:
    """Test version command."""
    result = runner.invoke(app, ["version"])

    assert result.exit_code == 0
    assert "ModuleTrack v" in result.output


def test_stats_float_durations(server: StubServer) -> None:
    """Test fractional hours are printed without float noise."""
    server.records = {
        "1": {"id": "1", "nom": "Git", "duree": 0.1},
        "2": {"id": "2", "nom": "Docker", "duree": 0.2},
    }
    result = runner.invoke(app, ["stats"])

    assert result.exit_code == 0
    assert "0.3h" in result.output
    assert "0.30000000000000004" not in result.output


# --- Global options ---


def test_api_url_option(stub_client: MagicMock) -> None:
    """Test --api-url reaches the client factory."""
    result = runner.invoke(app, ["--api-url", "https://other.mockapi.io/api", "list"])

    assert result.exit_code == 0
    stub_client.assert_called_once_with("https://other.mockapi.io/api")


def test_api_url_not_kept_between_runs(stub_client: MagicMock) -> None:
    """Test a later invocation without --api-url falls back to settings."""
    runner.invoke(app, ["--api-url", "https://other.mockapi.io/api", "list"])
    runner.invoke(app, ["list"])

    assert stub_client.call_args_list[-1].args == (None,)


def test_build_client_url() -> None:
    """Test the factory prefers the given URL over settings."""
    assert build_client("https://other.mockapi.io/api/").base_url == "https://other.mockapi.io/api"
    assert build_client().base_url.startswith("https://")


def test_verbose_enables_debug_logging() -> None:
    """Test -v lowers the root level on every run, not only the first."""
    runner.invoke(app, ["version"])
    assert logging.getLogger().level != logging.DEBUG

    result = runner.invoke(app, ["-v", "version"])

    assert result.exit_code == 0
    assert logging.getLogger().level == logging.DEBUG
