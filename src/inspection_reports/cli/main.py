"""CLI for inspection-reports: list / overview / export commands."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from inspection_reports.core.config import AppSettings
from inspection_reports.exceptions import InspectionReportError
from inspection_reports.formatters import FORMATS, get_formatter
from inspection_reports.logging_config import setup_logging
from inspection_reports.models import Capability
from inspection_reports.persistence import (
    IReportSource,
    MemoryReportSource,
    RestReportSource,
    build_backend_client,
)
from inspection_reports.reporting.renderer import rating_hex
from inspection_reports.services import ReportService

app = typer.Typer(name="inspection-reports", help="Inspection report listing and export")
console = Console()


def _load_source(data_file: Optional[Path], settings: AppSettings) -> IReportSource:
    """JSON snapshot when *data_file* is given, otherwise the hosted backend."""
    if data_file is None:
        return RestReportSource(build_backend_client(settings.backend), settings.backend)
    raw = json.loads(data_file.read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise typer.BadParameter(f"Expected a JSON object in {data_file}")
    return MemoryReportSource.from_payload(raw)


def _build_service(data_file: Optional[Path], verbose: bool) -> tuple[ReportService, AppSettings]:
    settings = AppSettings()
    if verbose:
        settings.observability.log_level = "DEBUG"
    setup_logging(settings.observability)
    source = _load_source(data_file, settings)
    # Whoever can run this CLI already holds the data; exports are allowed.
    return ReportService(source, Capability(can_export=True), settings), settings


def _rating(rating: str) -> str:
    return f"[{rating_hex(rating)}]{escape(rating)}[/]"


@app.command("list")
def list_reports(
    premise_id: int = typer.Argument(..., help="Premise identifier"),
    data_file: Optional[Path] = typer.Option(None, "--data", help="JSON snapshot instead of the backend"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """List a premise's inspection reports, most recent first."""
    try:
        service, _ = _build_service(data_file, verbose)
        premise, result = service.load_reports(premise_id)
    except InspectionReportError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    console.print(f"[bold]{escape(premise.name)}[/bold] - {escape(premise.address)}")
    console.print(f"{len(result.reports)} inspections\n")

    table = Table(title="Inspection Reports")
    table.add_column("ID", style="cyan")
    table.add_column("Date", style="green")
    table.add_column("Time")
    table.add_column("Inspector")
    table.add_column("Overall")
    table.add_column("Sites", justify="right")
    table.add_column("Areas", max_width=60)

    for report in result.reports:
        areas = ", ".join(f"{name}: {entry.rating}" for name, entry in report.areas.items())
        table.add_row(
            str(report.id),
            report.date,
            escape(f"{report.time_in} - {report.time_out}"),
            escape(report.inspector_name),
            _rating(report.overall_rating),
            str(report.sites_visited),
            escape(areas),
        )

    console.print(table)


@app.command()
def overview(
    search: Optional[str] = typer.Option(None, "--search", "-s", help="Filter premises by name or address"),
    data_file: Optional[Path] = typer.Option(None, "--data", help="JSON snapshot instead of the backend"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Show every premise with its last visit and status."""
    try:
        service, _ = _build_service(data_file, verbose)
        summaries = service.premise_overview(search=search)
    except InspectionReportError as exc:
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    table = Table(title="Premises")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Address")
    table.add_column("Last Visit")
    table.add_column("Status")
    table.add_column("Cleaner")
    table.add_column("Reports", justify="right")

    for summary in summaries:
        table.add_row(
            str(summary.premise.id),
            escape(summary.premise.name),
            escape(summary.premise.address),
            summary.last_visit,
            summary.status.value,
            escape(summary.cleaner),
            str(summary.report_count),
        )

    console.print(table)


@app.command()
def export(
    premise_id: int = typer.Argument(..., help="Premise identifier"),
    report_id: int = typer.Argument(..., help="Inspection report identifier"),
    fmt: str = typer.Option("pdf", "--format", "-f", help=f"One of: {', '.join(FORMATS)}"),
    output: Optional[Path] = typer.Option(None, help="Output path (default: <output_dir>/Report_<id>.<ext>)"),
    data_file: Optional[Path] = typer.Option(None, "--data", help="JSON snapshot instead of the backend"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Export one inspection report to a file."""
    if fmt not in FORMATS:
        raise typer.BadParameter(f"Unknown format {fmt!r}; expected one of {', '.join(FORMATS)}")

    try:
        service, settings = _build_service(data_file, verbose)
        formatter = get_formatter(fmt, settings)
        data = service.export_bytes(premise_id, report_id, formatter)
    except (InspectionReportError, ImportError) as exc:
        # ImportError: the format's optional extra (reportlab for pdf) is missing.
        console.print(f"[red]{escape(str(exc))}[/red]")
        raise typer.Exit(code=1) from exc

    path = output or settings.export.output_dir / f"Report_{report_id}.{formatter.extension}"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    console.print(f"[green]Report saved to {path}[/green] ({formatter.content_type})")


if __name__ == "__main__":
    app()
