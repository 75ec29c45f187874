#!/usr/bin/env python3
"""
Outpost CLI - Helm values encoding

Main entrypoint for the outpost command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from cli.commands import encode, functions
from outpost.config import Settings
from outpost.logging_config import setup_logging

app = typer.Typer(
    name="outpost",
    help="Encode configuration values to YAML with null omission",
    add_completion=False,
)

console = Console()

app.command("encode")(encode.encode_command)
app.command("functions")(functions.functions_command)


@app.callback()
def _configure():
    setup_logging(Settings.from_env())


@app.command()
def version():
    """Show version information."""
    from cli import __version__
    from outpost import __version__ as core_version

    table = Table(show_header=False, box=None)
    table.add_row("[bold]Outpost CLI[/bold]", f"v{__version__}")
    table.add_row("Encoder", f"v{core_version}")

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
