"""
Encode command: telemetry event file -> replay blob
"""

import json
from typing import Dict, Optional

import typer
from rich.console import Console
from rich.table import Table

from encoder.blob import BlobStore, FileBlobStore, ReplayBlob, S3BlobStore
from encoder.core import BlobStoreError, TelemetryError
from encoder.telemetry import read_events

console = Console()


def _event_counts(blob: ReplayBlob) -> Dict[str, int]:
    counts: Dict[str, int] = {}
    for event in blob.events:
        counts[event.kind.name] = counts.get(event.kind.name, 0) + 1
    return counts


def encode_command(
    events_file: str = typer.Argument(..., help="Telemetry file, one [seconds, kind] per line"),
    out_dir: str = typer.Option(
        ".",
        "--out-dir",
        "-o",
        envvar="MISSION_ENCODER_OUTPUT_DIR",
        help="Directory for the blob file (named after the replay id)",
    ),
    s3_bucket: Optional[str] = typer.Option(None, "--s3-bucket", help="Store blob in this S3 bucket"),
    s3_prefix: str = typer.Option("replays", "--s3-prefix", help="S3 key prefix"),
    s3_endpoint: Optional[str] = typer.Option(None, "--s3-endpoint", help="S3 endpoint URL (MinIO, localstack)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Build a replay blob from telemetry events and store it.

    Examples:
        mission-encoder encode mission.events
        mission-encoder encode mission.events --out-dir /var/replays
        mission-encoder encode mission.events --s3-bucket replays --json
    """
    try:
        with open(events_file, "r", encoding="utf-8") as f:
            events = list(read_events(f))

        blob = ReplayBlob.create()
        blob.extend(events)

        store: BlobStore
        if s3_bucket:
            store = S3BlobStore(bucket=s3_bucket, prefix=s3_prefix, endpoint_url=s3_endpoint)
        else:
            store = FileBlobStore(out_dir)
        result = blob.save(store)

    except FileNotFoundError:
        if json_output:
            print(json.dumps({"error": "Events file not found", "path": events_file}))
        else:
            console.print(f"[red]Error: Events file not found:[/red] {events_file}")
        raise typer.Exit(2)
    except (TelemetryError, BlobStoreError, OSError, UnicodeDecodeError) as e:
        if json_output:
            print(json.dumps({"error": str(e)}))
        else:
            console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(2)

    counts = _event_counts(blob)

    if json_output:
        print(
            json.dumps(
                {
                    "success": True,
                    "replay_id": str(blob.replay_id),
                    "mission_id": str(blob.mission_id),
                    "history_id": str(blob.history_id),
                    "events": len(blob),
                    "size": result.size,
                    "location": result.location,
                    "event_counts": counts,
                },
                indent=2,
            )
        )
        return

    console.print(f"[green]✓ Encoded {len(blob)} events[/green]")
    console.print(f"  Replay ID: [cyan]{blob.replay_id}[/cyan]")
    console.print(f"  Mission ID: [cyan]{blob.mission_id}[/cyan]")
    console.print(f"  History ID: [cyan]{blob.history_id}[/cyan]")
    console.print(f"  Size: {result.size} bytes")
    console.print(f"  Location: [yellow]{result.location}[/yellow]")

    if counts:
        table = Table(title="Event Counts")
        table.add_column("Event Kind", style="green")
        table.add_column("Count", style="cyan", justify="right")
        for kind in sorted(counts.keys()):
            table.add_row(kind, str(counts[kind]))
        console.print(table)
