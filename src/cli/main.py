"""CLI de prueba del cliente Notion (Typer + Rich).

Por qué existe:
- Permite verificar token y permisos contra la API real sin escribir código.
- Cada comando llama exactamente a una operación de `NotionClient`.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Callable

import typer
from rich.console import Console

from adapters.notion_client import NotionAPIError, NotionClient, NotionParseError
from cli.ui_components import (
    USAGE_TEXT,
    build_api_error_hints,
    build_headers_table,
    print_banner,
)
from core.config import ClientSettings

app = typer.Typer(no_args_is_help=True, help="Smoke test commands for the Notion API client.")

_console = Console()


def _parse_json_option(value: str | None, *, name: str) -> Any:
    if value is None:
        return None
    try:
        return json.loads(value)
    except json.JSONDecodeError as exc:
        raise typer.BadParameter(f"{name} must be valid JSON: {exc}") from exc


def _client(ctx: typer.Context) -> NotionClient:
    return ctx.obj["client"]


def _call(action: Callable[[], Any]) -> None:
    """Ejecuta una operación y muestra el JSON o el error."""

    try:
        data = action()
    except NotionAPIError as exc:
        _console.print(f"[red]{exc}[/red]")
        _console.print(build_api_error_hints())
        raise typer.Exit(code=1) from exc
    except NotionParseError as exc:
        _console.print(f"[red]Invalid JSON in response:[/red] {exc}")
        raise typer.Exit(code=1) from exc
    except Exception as exc:
        _console.print(f"[red]{type(exc).__name__}:[/red] {exc}")
        raise typer.Exit(code=1) from exc

    _console.print_json(data=data)


@app.callback()
def main(
    ctx: typer.Context,
    token: str | None = typer.Option(None, "--token", help="Notion token (overrides NOTION_CLIENT_NOTION_TOKEN)."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    settings = ClientSettings()
    if token is not None:
        settings = settings.model_copy(update={"notion_token": token})

    client = NotionClient.from_settings(settings)
    ctx.obj = {"settings": settings, "client": client}
    ctx.call_on_close(client.close)


@app.command()
def headers(ctx: typer.Context) -> None:
    """Show the configured request headers (token masked)."""

    print_banner(_console)
    _console.print(build_headers_table(_client(ctx).headers))


@app.command(name="get-page")
def get_page(
    ctx: typer.Context,
    page_id: str | None = typer.Argument(None, help="Page id (defaults to NOTION_CLIENT_SAMPLE_PAGE_ID)."),
) -> None:
    """Fetch a page and print it as JSON."""

    page_id = page_id or ctx.obj["settings"].sample_page_id
    if not page_id:
        raise typer.BadParameter("page_id is required")
    _call(lambda: _client(ctx).get_page(page_id))


@app.command(name="create-page")
def create_page(
    ctx: typer.Context,
    parent_id: str = typer.Argument(..., help="Parent database id."),
    properties: str = typer.Option("{}", "--properties", help="Properties as JSON."),
) -> None:
    """Create a page inside a database."""

    props = _parse_json_option(properties, name="--properties")
    _call(lambda: _client(ctx).create_page(parent_id, props))


@app.command(name="update-page")
def update_page(
    ctx: typer.Context,
    page_id: str = typer.Argument(..., help="Page id."),
    properties: str = typer.Option("{}", "--properties", help="Properties as JSON."),
) -> None:
    """Update the properties of a page."""

    props = _parse_json_option(properties, name="--properties")
    _call(lambda: _client(ctx).update_page(page_id, props))


@app.command(name="query-database")
def query_database(
    ctx: typer.Context,
    database_id: str = typer.Argument(..., help="Database id."),
    query_filter: str | None = typer.Option(None, "--filter", help="Filter as JSON."),
    page_size: int = typer.Option(10, "--page-size", min=1, help="Results per page."),
) -> None:
    """Query a database (single page of results)."""

    parsed_filter = _parse_json_option(query_filter, name="--filter")
    _call(lambda: _client(ctx).query_database(database_id, query_filter=parsed_filter, page_size=page_size))


@app.command()
def usage() -> None:
    """Print a short library usage example."""

    _console.print(USAGE_TEXT, highlight=False)


def run() -> None:
    app()
