"""
Helpers shared by the CLI commands: catalog loading and output.
"""

import json
import sys
from typing import Any, Dict, Iterable, Optional

import click
from loguru import logger

from ...catalog import Catalog, load_catalog
from ...exceptions import FixtureLoadError


def get_catalog(ctx: click.Context) -> Catalog:
    """Load the catalog once per invocation; exit on fixture errors."""
    obj = ctx.ensure_object(dict)
    if "catalog" not in obj:
        try:
            obj["catalog"] = load_catalog(obj.get("data_dir"))
        except FixtureLoadError as e:
            logger.error(f"Could not load fixtures: {e}")
            sys.exit(1)
    return obj["catalog"]


def echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload, indent=2, default=str))


def echo_rows(rows: Iterable[Dict[str, Optional[str]]], selected: Optional[int] = None) -> None:
    """Print result rows as `[Type] title  (meta)` followed by url and description."""
    for i, row in enumerate(rows):
        marker = ">" if selected == i else " "
        meta = f"  ({row['meta']})" if row.get("meta") else ""
        click.echo(f"{marker} [{row['type']}] {row['title']}{meta}")
        click.echo(f"    {row['url']}")
        if row.get("description"):
            click.echo(f"    {row['description']}")
