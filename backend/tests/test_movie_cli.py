"""Tests for the Typer-based movie search CLI."""
from __future__ import annotations

import importlib
import json
import sys
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient
from typer.testing import CliRunner

PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from backend.movie_api import create_app  # noqa: E402
from backend.movie_api.settings import MovieApiSettings  # noqa: E402
from backend.movie_cli import client as client_module  # noqa: E402

cli_app_module = importlib.import_module("backend.movie_cli.app")
cli_app = cli_app_module.app

SAMPLE_CATALOG = """\
SCI-FI
1. Blade Runner
   - watch_sources: https://zoro.rpmplay.xyz/br https://short.icu/br
2. Blade Runner 2049
   - watch: Z1 (br2049)
HORROR
3. The Thing
"""


@pytest.fixture()
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def catalog_file(tmp_path: Path) -> Path:
    path = tmp_path / "movies_data.txt"
    path.write_text(SAMPLE_CATALOG, encoding="utf-8")
    return path


@pytest.fixture()
def cli_client(catalog_file: Path):
    """Provide a TestClient and patch the CLI HTTP client factory."""

    settings = MovieApiSettings(catalog_path=str(catalog_file))
    test_client = TestClient(create_app(settings=settings))

    original_factory = client_module.create_client
    original_app_factory = cli_app_module.create_client

    def _factory(base_url: str, *, timeout: float = 10.0, transport: Any = None):  # type: ignore[override]
        return test_client

    client_module.create_client = _factory  # type: ignore[assignment]
    cli_app_module.create_client = _factory  # type: ignore[assignment]

    yield test_client

    client_module.create_client = original_factory  # type: ignore[assignment]
    cli_app_module.create_client = original_app_factory  # type: ignore[assignment]


def test_cli_health_command_outputs_status(runner: CliRunner, cli_client: TestClient) -> None:
    result = runner.invoke(cli_app, ["health"])

    assert result.exit_code == 0
    assert "\"status\": \"ok\"" in result.output


def test_cli_search_prints_matches(runner: CliRunner, cli_client: TestClient) -> None:
    result = runner.invoke(cli_app, ["search", "blade runner"])

    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert [match["title"] for match in payload["matches"]] == [
        "Blade Runner",
        "Blade Runner 2049",
    ]
    assert payload["matches"][0]["preferred_watch"] == "https://short.icu/br"


def test_cli_search_can_post_body(runner: CliRunner, cli_client: TestClient) -> None:
    result = runner.invoke(cli_app, ["search", "the thing", "--post"])

    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload["matches"][0]["section"] == "HORROR"


def test_cli_search_without_matches_is_not_an_error(
    runner: CliRunner, cli_client: TestClient
) -> None:
    result = runner.invoke(cli_app, ["search", "nosferatu"])

    assert result.exit_code == 0
    assert json.loads(result.output)["message"] == "No matches found."


def test_cli_search_exits_non_zero_on_server_error(runner: CliRunner, tmp_path: Path) -> None:
    settings = MovieApiSettings(catalog_path=str(tmp_path / "absent.txt"))
    test_client = TestClient(create_app(settings=settings))

    original_factory = cli_app_module.create_client
    cli_app_module.create_client = lambda base_url, **_: test_client  # type: ignore[assignment]
    try:
        result = runner.invoke(cli_app, ["search", "anything"])
    finally:
        cli_app_module.create_client = original_factory  # type: ignore[assignment]

    assert result.exit_code == 1


def test_cli_catalog_metrics(runner: CliRunner, cli_client: TestClient) -> None:
    result = runner.invoke(cli_app, ["catalog", "metrics"])

    assert result.exit_code == 0
    payload = json.loads(result.output)
    assert payload["total"] == 3
    assert payload["section_counts"] == {"SCI-FI": 2, "HORROR": 1}


def test_cli_catalog_inspect_parses_local_file(runner: CliRunner, catalog_file: Path) -> None:
    result = runner.invoke(cli_app, ["catalog", "inspect", str(catalog_file), "--section", "SCI-FI"])

    assert result.exit_code == 0
    entries = json.loads(result.output)
    assert [entry["index"] for entry in entries] == [1, 2]
    assert entries[0]["watch_urls"] == ["https://zoro.rpmplay.xyz/br", "https://short.icu/br"]
    assert entries[1]["preferred_watch"] is None


def test_cli_catalog_inspect_with_provider_tokens(runner: CliRunner, catalog_file: Path) -> None:
    result = runner.invoke(cli_app, ["catalog", "inspect", str(catalog_file), "--provider-tokens"])

    assert result.exit_code == 0
    entries = json.loads(result.output)
    assert entries[1]["preferred_watch"] == "https://zoro.rpmplay.xyz/br2049"
