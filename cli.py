"""CLI commands for the RSVP dashboard."""

import asyncio
from pathlib import Path
from uuid import UUID

import typer

from src.dashboard.dtos import (
    EventNotFoundError,
    UnauthorizedEventAccessError,
    UnsupportedExportFormatError,
)
from src.dashboard.orchestrator import DashboardOrchestrator
from src.dashboard.repository.read_models import ResponseStore, SqlResponseStore

app = typer.Typer(help="CLI commands for the RSVP dashboard")


def get_store() -> ResponseStore:
    return SqlResponseStore()


def _fail(message: str) -> None:
    typer.secho(message, fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


@app.command()
def summary(
    event_id: UUID = typer.Argument(..., help="Event to summarize"),
    host: str = typer.Option(..., "--host", help="Email of the event host"),
):
    """Print the RSVP summary and headline analytics of an event."""
    orchestrator = DashboardOrchestrator(get_store())
    try:
        # Typer doesn't support async directly, so use asyncio.run
        snapshot = asyncio.run(orchestrator.get_dashboard(event_id, host))
    except EventNotFoundError:
        _fail(f"Event {event_id} not found")
    except UnauthorizedEventAccessError:
        _fail(f"Event {event_id} does not belong to {host}")

    counts = snapshot.summary
    analytics = snapshot.analytics
    typer.secho(f"{snapshot.event.name} ({snapshot.event.date:%Y-%m-%d})", fg=typer.colors.GREEN)
    typer.secho(
        f"Responses: {counts.total_responses}/{counts.total_invites} ({counts.response_rate}%)",
        fg=typer.colors.BLUE,
    )
    typer.echo(f"Attending: {counts.attending}")
    typer.echo(f"Not attending: {counts.not_attending}")
    typer.echo(f"Maybe: {counts.maybe}")
    typer.echo(f"Total guests: {counts.total_guests}")
    typer.echo(f"Pending: {counts.pending_responses}")
    if analytics.peak_response_day:
        typer.secho(
            f"Peak day: {analytics.peak_response_day}, peak hour: {analytics.peak_response_hour}",
            fg=typer.colors.CYAN,
        )


@app.command()
def export(
    event_id: UUID = typer.Argument(..., help="Event to export"),
    host: str = typer.Option(..., "--host", help="Email of the event host"),
    export_format: str = typer.Option("csv", "--format", "-f", help="csv, json or excel"),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="File to write; defaults to the generated filename in the current directory",
    ),
):
    """Export the dashboard of an event to a file."""
    orchestrator = DashboardOrchestrator(get_store())
    try:
        result = asyncio.run(orchestrator.export_dashboard(event_id, export_format, host))
    except UnsupportedExportFormatError:
        _fail("Format must be csv, json, or excel")
    except EventNotFoundError:
        _fail(f"Event {event_id} not found")
    except UnauthorizedEventAccessError:
        _fail(f"Event {event_id} does not belong to {host}")

    target = output or Path(result.filename)
    target.write_text(result.content, encoding="utf-8")
    typer.secho(f"Exported {event_id} to {target}", fg=typer.colors.GREEN)


@app.command()
def host_analytics(
    host: str = typer.Option(..., "--host", help="Email of the host"),
):
    """List the RSVP summary of every event of a host."""
    orchestrator = DashboardOrchestrator(get_store())
    events = asyncio.run(orchestrator.get_host_analytics(host))

    if not events:
        typer.secho(f"No events found for {host}", fg=typer.colors.YELLOW)
        return

    for item in events:
        typer.secho(f"{item.event_name} ({item.event_date:%Y-%m-%d})", fg=typer.colors.GREEN)
        typer.echo(
            f"  {item.total_responses}/{item.total_invites} responses ({item.response_rate}%), "
            f"{item.attending} attending, {item.total_guests} guests"
        )


if __name__ == "__main__":
    app()
