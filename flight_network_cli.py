"""Mini README: Entry point CLI for Flightnet.

This script exposes a Typer CLI that starts the FastAPI control panel and
runs quick network queries against a saved snapshot file. Settings come
from ``FLIGHTNET_`` environment variables when options are omitted.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
import uvicorn

from flightnet.configuration import get_settings
from flightnet.logging_utils import configure_root_logger
from flightnet.network import Metric, build_demo_network, find_path, summarise_path
from flightnet.persistence import SnapshotError, load_network, save_network

cli = typer.Typer(help="Build, search and serve flight networks.")


def _snapshot_path(snapshot: Optional[Path]) -> Path:
    return snapshot or get_settings().snapshot_path


def _load(snapshot: Optional[Path]):
    path = _snapshot_path(snapshot)
    try:
        return load_network(path, cruise_speed_kmh=get_settings().cruise_speed_kmh)
    except FileNotFoundError:
        typer.echo(f"No snapshot found at {path}.", err=True)
        raise typer.Exit(code=2)
    except SnapshotError as error:
        typer.echo(f"Snapshot {path} is invalid: {error}", err=True)
        raise typer.Exit(code=2)


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI control panel using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger()

    # Browsers cannot open the 0.0.0.0 / :: bind-all addresses directly.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        f"Starting Flightnet on {effective_host}:{effective_port}.\n"
        f"API docs at http://{browser_host}:{effective_port}/docs"
    )
    uvicorn.run(
        "flightnet.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


@cli.command()
def search(
    start: str = typer.Argument(..., help="Departure airport code."),
    end: str = typer.Argument(..., help="Arrival airport code."),
    metric: str = typer.Option("cost", help="Edge weight: 'cost' or 'distance'."),
    direct_only: bool = typer.Option(False, "--direct-only", help="Only accept a direct flight."),
    snapshot: Optional[Path] = typer.Option(None, help="Snapshot file to search."),
) -> None:
    """Print the best path between two airports."""

    try:
        chosen = Metric.from_str(metric)
    except ValueError as error:
        raise typer.BadParameter(str(error), param_hint="--metric") from error
    network = _load(snapshot)
    path = find_path(network, start, end, chosen, direct_only)
    if path is None:
        typer.echo("No route found.")
        raise typer.Exit(code=1)
    for route in path:
        typer.echo(str(route))
    typer.echo(summarise_path(path).describe())


@cli.command()
def airports(
    snapshot: Optional[Path] = typer.Option(None, help="Snapshot file to read."),
) -> None:
    """List the airports stored in a snapshot."""

    network = _load(snapshot)
    for airport in sorted(network.list_airports(), key=lambda a: a.code):
        typer.echo(f"{airport}  [{airport.latitude}, {airport.longitude}]")


@cli.command("seed-demo")
def seed_demo(
    snapshot: Optional[Path] = typer.Option(None, help="Snapshot file to write."),
) -> None:
    """Write the demo network to a snapshot file."""

    network = build_demo_network(cruise_speed_kmh=get_settings().cruise_speed_kmh)
    path = save_network(network, _snapshot_path(snapshot))
    typer.echo(f"Wrote demo network ({len(network)} airports) to {path}")


if __name__ == "__main__":
    cli()
