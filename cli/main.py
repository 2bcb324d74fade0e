#!/usr/bin/env python3
"""
Mission Encoder CLI

Main entrypoint for the mission-encoder command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from cli.commands import encode, parse
from encoder.logging_config import setup_logging

app = typer.Typer(
    name="mission-encoder",
    help="Typed telemetry parsing and replay blob encoding",
    add_completion=False,
)

console = Console()

app.command(name="parse")(parse.parse_command)
app.command(name="encode")(encode.encode_command)


@app.callback()
def configure():
    """Configure logging from MISSION_ENCODER_LOG_LEVEL / MISSION_ENCODER_LOG_FORMAT."""
    setup_logging()


@app.command()
def version():
    """Show version information."""
    from cli import __version__
    from encoder import __version__ as encoder_version
    from encoder.blob import FORMAT_VERSION

    table = Table(show_header=False, box=None)
    table.add_row("[bold]Mission Encoder CLI[/bold]", f"v{__version__}")
    table.add_row("Encoder", f"v{encoder_version}")
    table.add_row("Blob format", str(FORMAT_VERSION))

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
