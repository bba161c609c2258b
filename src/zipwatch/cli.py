"""CLI interface using Typer."""

from __future__ import annotations

import json
import logging
from typing import Annotated

import typer
from rich.console import Console
from rich.table import Table

from zipwatch import __version__
from zipwatch.config import ZipwatchConfig
from zipwatch.errors import InvalidInput
from zipwatch.report import Report, Section, build_report

app = typer.Typer(
    name="zipwatch",
    help="Weather alerts, earthquakes, flood likelihood and long-term hazards by ZIP code.",
    add_completion=False,
)
console = Console()

_LIKELIHOOD_STYLE = {
    "High": "[red]High[/red]",
    "Moderate": "[dark_orange]Moderate[/dark_orange]",
    "Low": "[green]Low[/green]",
    "Unknown": "[dim]Unknown[/dim]",
}


def _version_callback(value: bool) -> None:
    if value:
        console.print(f"zipwatch {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            help="Show version and exit.",
            callback=_version_callback,
            is_eager=True,
        ),
    ] = None,
) -> None:
    """zipwatch: hazard lookup for U.S. ZIP codes."""


def _print_placeholder(title: str, section: Section) -> bool:
    """Print the empty state or error for a section. False if it has data."""
    if section.status == "ok":
        return False
    style = "red" if section.status == "error" else "dim"
    console.print(f"\n[bold]{title}[/bold]")
    console.print(f"[{style}]{section.message}[/{style}]")
    return True


def _render_alerts(section: Section) -> None:
    if _print_placeholder("Weather Alerts", section):
        return
    table = Table(title="Weather Alerts", title_justify="left")
    table.add_column("Alert", style="bold")
    table.add_column("Severity")
    table.add_column("Expires", style="dim")
    table.add_column("Source", style="dim")
    for alert in section.data["alerts"]:
        table.add_row(
            alert["title"], alert["severity"], alert["expiresTime"] or "-", alert["source"]
        )
    console.print()
    console.print(table)


def _render_quakes(section: Section) -> None:
    if _print_placeholder("Recent Earthquakes", section):
        return
    table = Table(title="Recent Earthquakes (100 km, 72 h)", title_justify="left")
    table.add_column("Mag", justify="right", style="red")
    table.add_column("Place", style="bold")
    table.add_column("Time (UTC)", style="dim")
    for quake in section.data["quakes"]:
        mag = quake["magnitude"]
        table.add_row(
            f"{mag:.1f}" if mag is not None else "-", quake["place"], quake["occurredAt"] or "-"
        )
    console.print()
    console.print(table)


def _render_flood(section: Section) -> None:
    if _print_placeholder("Flood Insurance Likelihood", section):
        return
    data = section.data
    console.print("\n[bold]Flood Insurance Likelihood[/bold]")
    console.print(_LIKELIHOOD_STYLE.get(data["likelihood"], data["likelihood"]))
    console.print(data["rationale"])
    console.print(f"[dim]{data['disclaimer']}[/dim]")


def _render_hazards(section: Section) -> None:
    if _print_placeholder("Long-term Hazards", section):
        return
    table = Table(title="Long-term Hazards", title_justify="left")
    table.add_column("Hazard", style="bold")
    table.add_column("Score", justify="right", style="red")
    table.add_column("Why")
    for hazard in section.data["hazards"]:
        table.add_row(hazard["name"].replace("_", " "), str(hazard["score"]), hazard["rationale"])
    console.print()
    console.print(table)


def _render(report: Report) -> None:
    header = f"ZIP {report.zip_code}"
    for section in report.sections.values():
        data = section.data or {}
        if data.get("city"):
            header = f"ZIP {report.zip_code}: {data['city']}, {data.get('state', '')}".rstrip(", ")
            break
    console.print(f"[bold underline]{header}[/bold underline]")

    _render_alerts(report.sections["alerts"])
    _render_quakes(report.sections["quakes"])
    _render_flood(report.sections["flood"])
    _render_hazards(report.sections["hazards"])


@app.command()
def lookup(
    zip_code: Annotated[str, typer.Argument(help="5-digit U.S. ZIP code.")],
    as_json: Annotated[
        bool, typer.Option("--json", help="Print the raw report as JSON."),
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Enable verbose logging."),
    ] = False,
) -> None:
    """Look up all hazard sections for a ZIP code."""
    log_level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=log_level,
        format="%(message)s",
        handlers=[logging.StreamHandler()],
    )

    try:
        report = build_report(zip_code, ZipwatchConfig())
    except InvalidInput as exc:
        console.print(f"[red]Invalid ZIP code:[/red] {exc}")
        raise typer.Exit(code=2) from None

    if as_json:
        typer.echo(json.dumps(report.to_dict(), indent=2))
    else:
        _render(report)

    failed = [name for name, s in report.sections.items() if s.status == "error"]
    if len(failed) == len(report.sections):
        raise typer.Exit(code=1)


@app.command()
def serve(
    host: Annotated[str, typer.Option("--host", help="Bind address.")] = "127.0.0.1",
    port: Annotated[int, typer.Option("--port", "-p", help="Bind port.")] = 8000,
) -> None:
    """Run the HTTP API."""
    import uvicorn

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    uvicorn.run("zipwatch.api:app", host=host, port=port)
