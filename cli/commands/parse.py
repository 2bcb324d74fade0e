"""
Parse command: show the typed value of one telemetry token
"""

import json
import math
from typing import Any

import typer
from rich.console import Console
from rich.markup import escape
from rich.tree import Tree

from encoder.core import Array, ParseError, Value, parse, type_name

console = Console()


def _json_safe(obj: Any) -> Any:
    """Non-finite floats become "inf" / "-inf" / "nan" strings (not valid JSON numbers)."""
    if isinstance(obj, list):
        return [_json_safe(item) for item in obj]
    if isinstance(obj, float) and not math.isfinite(obj):
        return repr(obj)
    return obj


def _add_value(parent: Tree, value: Value) -> None:
    if isinstance(value, Array):
        branch = parent.add(f"[bold cyan]Array[/bold cyan] [dim]({len(value)})[/dim]")
        for item in value:
            _add_value(branch, item)
    else:
        parent.add(f"[green]{type_name(value)}[/green] {escape(repr(value.to_python()))}")


def parse_command(
    text: str = typer.Argument(..., help="Value token, e.g. '[1, \"a\", [true]]'"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Parse a telemetry value token and print its typed structure.

    Examples:
        mission-encoder parse 42
        mission-encoder parse '[1, "hello, world!", [2]]'
        mission-encoder parse '[[1,2],[3,4]]' --json
    """
    try:
        value = parse(text)
    except ParseError as e:
        if json_output:
            print(json.dumps({"error": type(e).__name__, "token": e.token}))
        else:
            console.print(f"[red]Error:[/red] {type(e).__name__}: {escape(e.token)!r}")
        raise typer.Exit(2)

    if json_output:
        print(json.dumps({"type": type_name(value), "value": _json_safe(value.to_python())}, allow_nan=False))
        return

    root = Tree(f"[bold]{escape(text)}[/bold]")
    _add_value(root, value)
    console.print(root)
