"""
Query composer CLI - inspect listing parameters and query listing endpoints

Usage:
    query-composer --help
    query-composer params parse "filter[status]=draft&sort=views"
    query-composer params build --filter status=draft --filter tags=a --filter tags=b
    query-composer listing fetch /articles --filter status=published --sort views
    query-composer headline published_at isFeatured
    query-composer config show
"""

import json
from urllib.parse import parse_qsl, urlencode

import httpx
import typer
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from query_composer.api.dependencies import ListingParams, parse_listing_params
from query_composer.core.config import settings
from query_composer.core.logging_config import configure_logging
from query_composer.utils.text import headline

app = typer.Typer(help="Query composer listing tools")
console = Console()

DEFAULT_BASE_URL = "http://localhost:8000"


# ============================================================================
# Query Strings
# ============================================================================

def build_listing_query(
    filters: list[str] | None = None,
    search: str | None = None,
    sort: str | None = None,
    direction: str | None = None,
    page: int | None = None,
    per_page: int | None = None,
) -> list[tuple[str, str]]:
    """
    Build query string pairs for a listing request.

    Filters are ``name=value`` strings. A name given once becomes
    ``filter[name]``; a repeated name becomes ``filter[name][]`` per value.

    Raises:
        typer.BadParameter: If a filter has no ``=``
    """
    grouped: dict[str, list[str]] = {}
    for item in filters or []:
        name, sep, value = item.partition("=")
        if not sep or not name:
            raise typer.BadParameter(f"Filter must look like name=value, got {item!r}")
        grouped.setdefault(name, []).append(value)

    pairs: list[tuple[str, str]] = []
    for name, values in grouped.items():
        if len(values) == 1:
            pairs.append((f"{settings.FILTER_PARAM}[{name}]", values[0]))
        else:
            pairs.extend((f"{settings.FILTER_PARAM}[{name}][]", value) for value in values)

    optional = [
        (settings.SEARCH_PARAM, search),
        (settings.SORT_PARAM, sort),
        (settings.DIRECTION_PARAM, direction),
        (settings.PAGE_PARAM, page),
        (settings.PER_PAGE_PARAM, per_page),
    ]
    pairs.extend((key, str(value)) for key, value in optional if value is not None)
    return pairs


# ============================================================================
# Pretty Printing
# ============================================================================

def print_json(data):
    """Pretty print JSON data."""
    syntax = Syntax(json.dumps(data, indent=2, default=str), "json", theme="monokai")
    console.print(syntax)


def print_params(params: ListingParams):
    """Print parsed listing parameters as tables."""
    table = Table(title="Filters")
    table.add_column("Name", style="cyan")
    table.add_column("Value")
    for name, value in params.filters.items():
        table.add_row(name, ", ".join(value) if isinstance(value, list) else str(value))
    console.print(table)

    options = Table(title="Listing")
    options.add_column("Parameter", style="cyan")
    options.add_column("Value")
    for field in ("search", "sort", "direction", "page", "per_page"):
        value = getattr(params, field)
        options.add_row(field, "" if value is None else str(value))
    console.print(options)


def print_response(response: httpx.Response):
    """Pretty print HTTP response."""
    status_color = "green" if 200 <= response.status_code < 300 else "red"
    console.print(f"\n[{status_color}]Status:[/{status_color}] {response.status_code}")

    try:
        data = response.json()
    except ValueError:
        console.print(f"\n[yellow]Response:[/yellow]\n{response.text}")
        return

    console.print("\n[yellow]Response:[/yellow]")
    print_json(data)


# ============================================================================
# Parameter Commands
# ============================================================================

params_app = typer.Typer(help="Listing parameter commands")
app.add_typer(params_app, name="params")


@params_app.command()
def parse(
    query_string: str = typer.Argument(..., help="Query string, with or without a leading '?'"),
    as_json: bool = typer.Option(False, "--json", help="Print JSON instead of tables"),
):
    """Show how a query string is read into listing parameters."""
    pairs = parse_qsl(query_string.lstrip("?"), keep_blank_values=True)
    params = parse_listing_params(pairs)

    if as_json:
        print_json(params.model_dump())
    else:
        print_params(params)


@params_app.command()
def build(
    filters: list[str] = typer.Option(None, "--filter", "-f", help="name=value, repeat for lists"),
    search: str = typer.Option(None, "--search", "-s"),
    sort: str = typer.Option(None, "--sort"),
    direction: str = typer.Option(None, "--direction", "-d"),
    page: int = typer.Option(None, "--page"),
    per_page: int = typer.Option(None, "--per-page"),
):
    """Print the query string for a set of listing parameters."""
    pairs = build_listing_query(filters, search, sort, direction, page, per_page)
    typer.echo(urlencode(pairs))


# ============================================================================
# Listing Commands
# ============================================================================

listing_app = typer.Typer(help="Listing endpoint commands")
app.add_typer(listing_app, name="listing")


@listing_app.command()
def fetch(
    path: str = typer.Argument(..., help="Listing endpoint path, e.g. /articles"),
    filters: list[str] = typer.Option(None, "--filter", "-f", help="name=value, repeat for lists"),
    search: str = typer.Option(None, "--search", "-s"),
    sort: str = typer.Option(None, "--sort"),
    direction: str = typer.Option(None, "--direction", "-d"),
    page: int = typer.Option(None, "--page"),
    per_page: int = typer.Option(None, "--per-page"),
    base_url: str = typer.Option(DEFAULT_BASE_URL, "--url"),
):
    """Request a listing endpoint with the given parameters."""
    pairs = build_listing_query(filters, search, sort, direction, page, per_page)

    with httpx.Client(base_url=base_url) as client:
        response = client.get(path, params=pairs)
        print_response(response)


# ============================================================================
# Utility Commands
# ============================================================================

@app.command("headline")
def headline_command(values: list[str] = typer.Argument(..., help="Names to humanize")):
    """Show the labels derived from column names."""
    for value in values:
        typer.echo(f"{value} -> {headline(value)}")


config_app = typer.Typer(help="Configuration commands")
app.add_typer(config_app, name="config")


@config_app.command("show")
def show_config():
    """Show the effective settings."""
    table = Table(title="Settings")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    for key, value in settings.model_dump().items():
        table.add_row(key, str(value))
    console.print(table)


@app.callback()
def main():
    """
    Query composer CLI

    Inspect how listing parameters are parsed and query listing endpoints.
    """
    configure_logging()


if __name__ == "__main__":
    app()
