"""Command line interface for the movie search API."""
from __future__ import annotations

import json
from dataclasses import asdict
from pathlib import Path
from typing import Any, Optional

import httpx
import typer

from backend.catalog import default_registry, enrich_entries, parse_catalog

from .client import create_client


DEFAULT_API_BASE = "http://localhost:8000"

app = typer.Typer(help="Search the movie catalog through the movie search API.")
catalog_app = typer.Typer(help="Inspect the movie catalog.")
app.add_typer(catalog_app, name="catalog")


def _api_base_option() -> typer.Option:
    return typer.Option(
        DEFAULT_API_BASE,
        "--api-base",
        help="Base URL for the movie search API.",
        show_default=True,
        envvar="MOVIE_SEARCH_API_BASE",
    )


def _echo_json(payload: Any) -> None:
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))


def _echo_response(response: httpx.Response, *, allowed: tuple[int, ...] = ()) -> None:
    """Print a JSON response body, exiting non-zero on unexpected statuses."""

    try:
        payload = response.json()
    except ValueError:
        payload = {"status_code": response.status_code, "body": response.text}

    if response.is_success or response.status_code in allowed:
        _echo_json(payload)
        return

    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False), err=True)
    raise typer.Exit(code=1)


@app.command()
def health(api_base: str = _api_base_option()) -> None:
    """Call the /health endpoint and pretty-print the response."""

    with create_client(api_base) as client:
        response = client.get("/health")
        _echo_response(response)


@app.command()
def search(
    name: str = typer.Argument(..., help="Movie title to look up."),
    post: bool = typer.Option(
        False,
        "--post/--get",
        help="Send the title as a JSON body instead of a query parameter.",
        show_default=True,
    ),
    api_base: str = _api_base_option(),
) -> None:
    """Search the catalog for NAME and print the ranked matches."""

    with create_client(api_base) as client:
        if post:
            response = client.post("/movie", json={"name": name})
        else:
            response = client.get("/movie", params={"name": name})
        # 404 is the service's "no matches" outcome, not a failure.
        _echo_response(response, allowed=(404,))


@catalog_app.command("metrics")
def catalog_metrics(api_base: str = _api_base_option()) -> None:
    """Display aggregate catalog statistics."""

    with create_client(api_base) as client:
        response = client.get("/catalog/metrics")
        _echo_response(response)


@catalog_app.command("inspect")
def inspect_catalog(
    path: Path = typer.Argument(
        ...,
        exists=True,
        dir_okay=False,
        readable=True,
        help="Plain-text catalog file to parse.",
    ),
    section: Optional[str] = typer.Option(None, help="Only print entries from this section."),
    provider_tokens: bool = typer.Option(
        False,
        "--provider-tokens/--no-provider-tokens",
        help="Build watch links from provider shorthand when no link is found.",
        show_default=True,
    ),
) -> None:
    """Parse a local catalog file and print its enriched entries."""

    entries = enrich_entries(
        parse_catalog(path.read_text(encoding="utf-8")),
        providers=default_registry if provider_tokens else None,
    )
    if section is not None:
        entries = tuple(entry for entry in entries if entry.section == section)

    _echo_json([asdict(entry) for entry in entries])
