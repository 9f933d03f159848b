#!/usr/bin/env python3
"""
ministore CLI

Main entrypoint for the ministore command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from ..logging_config import setup_logging
from .commands import replay

app = typer.Typer(
    name="ministore",
    help="Predictable state container tools",
    add_completion=False,
)

console = Console()

app.command(name="replay")(replay.replay_command)


@app.command()
def version():
    """Show version information."""
    from .. import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]ministore[/bold]", f"v{__version__}")
    console.print(table)


def main():
    """Main entrypoint."""
    setup_logging()
    app()


if __name__ == "__main__":
    main()
