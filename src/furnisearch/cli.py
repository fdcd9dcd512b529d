"""Command line interface for furnisearch."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List

import typer
from rich.console import Console
from rich.table import Table

from furnisearch.catalog import CatalogError, load_catalog
from furnisearch.config import AppConfig
from furnisearch.index.search import search as run_search
from furnisearch.index.suggest import suggest as run_suggest
from furnisearch.models import CatalogItem

console = Console()
app = typer.Typer(help="furnisearch - product search for the furniture catalog")


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _check_limit(limit: int) -> int:
    if limit < 1:
        raise typer.BadParameter("must be at least 1", param_hint="--limit")
    return limit


def _load(config: AppConfig) -> List[CatalogItem]:
    resolved = config.resolve_catalog_path(Path.cwd())
    try:
        return load_catalog(resolved)
    except CatalogError as exc:
        raise typer.BadParameter(str(exc)) from exc


@app.command()
def search(
    query: str = typer.Argument(..., help="Query text"),
    catalog: Path = typer.Option(None, "--catalog", help="Catalog JSON file"),
    limit: int = typer.Option(AppConfig().max_results, help="Number of results to display"),
    show_score: bool = typer.Option(False, "--show-score", help="Show relevance scores"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Search the catalog and print ranked products."""
    _setup_logging(verbose)
    config = AppConfig(catalog_path=catalog, max_results=_check_limit(limit), debug=show_score)
    items = _load(config)

    results = run_search(query, items, limit=config.max_results)
    if not results:
        console.print("[yellow]No matches found.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Product")
    table.add_column("Category")
    table.add_column("Subcategory")
    if config.debug:
        table.add_column("Score")

    for result in results:
        name = result.item.name
        if result.item.is_new:
            name = f"{name} [green](new)[/green]"
        row = [name, result.item.category, result.item.subcategory]
        if config.debug:
            row.append(f"{result.score:g}")
        table.add_row(*row)

    console.print(table)


@app.command()
def suggest(
    partial: str = typer.Argument(..., help="Partial query"),
    catalog: Path = typer.Option(None, "--catalog", help="Catalog JSON file"),
    limit: int = typer.Option(AppConfig().max_suggestions, help="Maximum suggestions"),
) -> None:
    """Suggest catalog words completing a partial query."""
    config = AppConfig(catalog_path=catalog, max_suggestions=_check_limit(limit))
    items = _load(config)

    suggestions = run_suggest(partial, items, limit=config.max_suggestions)
    if not suggestions:
        console.print("[yellow]No suggestions.[/yellow]")
        return
    for term in suggestions:
        console.print(term)


@app.command()
def web(
    host: str = typer.Option("127.0.0.1", help="Host interface"),
    port: int = typer.Option(8000, help="Server port"),
    catalog: Path = typer.Option(None, "--catalog", help="Catalog JSON file"),
    debug: bool = typer.Option(False, "--debug", help="Include scores in API responses"),
) -> None:
    """Start the search API."""
    try:
        import uvicorn
    except ImportError as exc:  # pragma: no cover - defensive
        raise typer.BadParameter(
            "uvicorn is not installed. Install the web extras with \"python -m pip install '.[web]'\""
        ) from exc

    from furnisearch.web.app import configure, app as web_app

    config = AppConfig(catalog_path=catalog, debug=debug)
    resolved = config.resolve_catalog_path(Path.cwd())
    if resolved is not None and not resolved.exists():
        console.print(f"[yellow]Warning: catalog not found at {resolved}, searches will fail.[/yellow]")
    configure(config)

    console.print(f"Starting search API on http://{host}:{port} (catalog: {resolved or 'bundled'})")
    uvicorn.run(
        web_app,
        host=host,
        port=port,
        reload=False,
        log_level="info",
    )


def main() -> None:
    app()
