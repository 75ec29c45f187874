"""
Encode command: read a JSON/YAML document, write Helm values YAML
"""

import json
import sys
from decimal import Decimal
from pathlib import Path
from typing import Any, Optional

import typer
import yaml
from rich.console import Console
from rich.markup import escape

from outpost.config import Settings
from outpost.core import MAX_DEPTH_LIMIT, EncodeError, from_native
from outpost.functions import FUNCTION_NAME, HelmValuesEncodeFunction
from outpost.provider import OutpostProvider

err_console = Console(stderr=True)


def _detect_format(path: Optional[str], fmt: str) -> str:
    if fmt != "auto":
        return fmt
    if path and Path(path).suffix.lower() == ".json":
        return "json"
    return "yaml"


def _load(text: str, fmt: str) -> Any:
    if fmt == "json":
        # Keep full precision; the encoder decides int/float/decimal itself.
        return json.loads(text, parse_float=Decimal)
    return yaml.safe_load(text)


def encode_command(
    path: Optional[str] = typer.Argument(
        None,
        help="Input document (JSON or YAML). Reads stdin when omitted or '-'",
    ),
    fmt: str = typer.Option(
        "auto",
        "--format",
        "-f",
        help="Input format: auto, json or yaml",
    ),
    max_depth: Optional[int] = typer.Option(
        None,
        "--max-depth",
        min=1,
        max=MAX_DEPTH_LIMIT,
        help="Maximum nesting depth (default: OUTPOST_MAX_DEPTH or 64)",
    ),
    sort_sets: bool = typer.Option(
        False,
        "--sort-sets",
        help="Sort set elements for reproducible output",
    ),
):
    """
    Encode a document to YAML, dropping nulls and emptied containers.

    Examples:
        outpost encode values.json
        cat values.yaml | outpost encode
        outpost encode values.json --sort-sets
    """
    fmt = fmt.lower()
    if fmt not in ("auto", "json", "yaml"):
        err_console.print(f"[red]Error:[/red] unknown format {escape(fmt)}")
        raise typer.Exit(2)

    try:
        if path is None or path == "-":
            text = sys.stdin.read()
        else:
            text = Path(path).read_text(encoding="utf-8")
    except OSError as e:
        err_console.print(f"[red]Error: cannot read input:[/red] {escape(str(e))}")
        raise typer.Exit(2)

    settings = Settings.from_env()
    if max_depth is None:
        max_depth = settings.max_depth

    fmt = _detect_format(path, fmt)
    try:
        data = _load(text, fmt)
    except RecursionError:
        # The JSON and YAML parsers recurse per nesting level.
        err_console.print(f"[red]Error:[/red] input nesting exceeds maximum depth of {max_depth}")
        raise typer.Exit(1)
    except (ValueError, yaml.YAMLError) as e:
        err_console.print(f"[red]Error: invalid {fmt.upper()}:[/red] {escape(str(e))}")
        raise typer.Exit(2)

    try:
        value = from_native(data, max_depth=max_depth)
    except EncodeError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        raise typer.Exit(1)

    function = HelmValuesEncodeFunction(
        max_depth=max_depth,
        sort_sets=sort_sets or settings.sort_sets,
    )
    provider = OutpostProvider(functions=[function])
    result = provider.call(FUNCTION_NAME, [value])

    if not result.ok:
        err_console.print(f"[red]Error:[/red] {escape(str(result.error))}")
        raise typer.Exit(1)

    typer.echo(result.result, nl=False)
