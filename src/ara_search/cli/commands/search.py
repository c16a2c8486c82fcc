"""
CLI commands for the full-page search and the command palette.
"""

import sys
from typing import Optional

import click
from loguru import logger

from ...exceptions import ConfigurationError
from ...search.indexer import build_corpus
from ...surfaces.global_search import GlobalSearch
from ...surfaces.palette import CommandPalette
from .common import echo_json, echo_rows, get_catalog


@click.command(name="search")
@click.argument("query")
@click.option("--type", "type_filter", default="all",
              help="Result tab: all, domain, acr or registry")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON")
@click.pass_context
def search(ctx: click.Context, query: str, type_filter: str, as_json: bool):
    """
    Search domains, controls and registry entries.
    
    Matching is case-insensitive substring containment; an empty query
    returns nothing.
    """
    catalog = get_catalog(ctx)
    corpus = build_corpus(catalog.domains, catalog.controls, catalog.registry)
    page = GlobalSearch(corpus, initial_query=query)
    
    try:
        page.set_type_filter(type_filter)
    except ConfigurationError as e:
        logger.error(str(e))
        sys.exit(1)
    
    rows = [page.row(record) for record in page.results]
    if as_json:
        echo_json({
            "query": page.query,
            "total": page.total,
            "counts": {t.label: n for t, n in page.counts.items()},
            "results": rows,
        })
        return
    
    if not rows:
        click.echo(f"No results found for “{query}”.")
        return
    click.echo("  ".join(page.tabs()))
    echo_rows(rows)


@click.command(name="palette")
@click.argument("query", required=False, default="")
@click.option("--down", default=0, type=int, help="Press ArrowDown N times")
@click.option("--up", default=0, type=int, help="Press ArrowUp N times (after --down)")
@click.option("--enter", is_flag=True, help="Press Enter to commit the selection")
@click.option("--json", "as_json", is_flag=True, help="Emit JSON")
@click.pass_context
def palette(ctx: click.Context, query: str, down: int, up: int, enter: bool, as_json: bool):
    """
    Simulate the command palette: open, type QUERY, navigate, commit.
    
    With no QUERY the idle preview of the page catalog is shown.
    """
    catalog = get_catalog(ctx)
    corpus = build_corpus(
        catalog.domains, catalog.controls, catalog.registry, catalog.static_pages
    )
    committed = []
    cmd = CommandPalette(corpus, navigate=committed.append)
    
    cmd.open()
    cmd.set_query(query)
    for _ in range(down):
        cmd.handle_key("ArrowDown")
    for _ in range(up):
        cmd.handle_key("ArrowUp")
    
    rows = [cmd.row(record) for record in cmd.results]
    selected = cmd.selected_index
    url: Optional[str] = cmd.handle_key("Enter") if enter else None
    
    if as_json:
        echo_json({
            "query": query,
            "status": cmd.status.value,
            "selectedIndex": selected,
            "shown": len(rows),
            "total": cmd.view.total,
            "results": rows,
            "navigatedTo": url,
        })
        return
    
    if not rows:
        click.echo(f"No results found for “{query}”")
    else:
        click.echo(cmd.view.summary())
        echo_rows(rows, selected=selected)
    if url:
        click.echo(f"-> {url}")
