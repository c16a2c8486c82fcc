"""Main CLI entry point for ara-search."""

from pathlib import Path
from typing import Optional

import click

from .. import __version__
from ..utils.logger import setup_logger
from .commands.controls import list_controls, show_control
from .commands.registry import list_registry, verify
from .commands.search import palette, search


@click.group()
@click.version_option(version=__version__)
@click.option("--data-dir", type=click.Path(exists=True, file_okay=False), default=None,
              help="Directory with the JSON fixture collections")
@click.option("--log-level", default=None, help="Log level (DEBUG, INFO, WARNING, ...)")
@click.pass_context
def cli(ctx: click.Context, data_dir: Optional[str], log_level: Optional[str]):
    """ARA Standard search: domains, controls and the certification registry."""
    setup_logger(level=log_level or "WARNING")
    ctx.ensure_object(dict)
    ctx.obj["data_dir"] = Path(data_dir) if data_dir else None


# Register commands
for command in (search, palette, list_controls, show_control, list_registry, verify):
    cli.add_command(command)


if __name__ == "__main__":
    cli()
