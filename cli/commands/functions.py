"""
Functions command: list the functions the provider exposes
"""

import json

import typer
from rich.console import Console
from rich.table import Table

from outpost.provider import OutpostProvider

console = Console()


def functions_command(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    List provider functions.

    Examples:
        outpost functions
        outpost functions --json
    """
    provider = OutpostProvider.default()

    if json_output:
        print(json.dumps({"functions": provider.as_function_specs()}, indent=2))
        return

    table = Table(title="Outpost Functions")
    table.add_column("Name", style="green")
    table.add_column("Parameters", style="cyan")
    table.add_column("Returns", style="yellow")
    table.add_column("Summary")

    for fn in provider.functions():
        d = fn.definition()
        params = ", ".join(f"{p.name} ({p.type})" for p in d.parameters)
        table.add_row(d.name, params, d.return_type, d.summary)

    console.print(table)
