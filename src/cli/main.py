"""etax-reprint command line.

The CLI only translates arguments into a `ReprintRequest`, renders output
with Rich and maps failures to a non-zero exit. The flow itself lives in
`core.services.reprint_pipeline`.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from adapters.json_exporter import export_records_json
from cli.ui_components import build_records_table, format_record_line
from core.config import AppSettings
from core.domain.models import DocumentRecord
from core.errors import EtaxError
from core.services.reprint_pipeline import PipelineHooks, ReprintRequest, run_reprint

app = typer.Typer(
    add_completion=False,
    help="Retrieve e-Tax invoice records for a taxpayer and download them as a ZIP bundle.",
)

_console = Console()
_err_console = Console(stderr=True)


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=_err_console, show_path=False)],
        force=True,
    )


@app.command()
def fetch(
    tax_id: str = typer.Argument(..., help="Tax identification number."),
    filename: Optional[str] = typer.Argument(
        None,
        help="Custom filename for the downloaded ZIP (optional).",
    ),
    since: str = typer.Option(
        "",
        "--since",
        "-S",
        metavar="YYYY-MM-DD",
        help="Start date of the search (default: today).",
    ),
    until: str = typer.Option(
        "",
        "--until",
        "-U",
        metavar="YYYY-MM-DD",
        help="End date of the search (default: today).",
    ),
    no_download: bool = typer.Option(
        False,
        "--no-download",
        help="Only search and print the matched documents; skip the ZIP download.",
    ),
    export_json: Optional[Path] = typer.Option(
        None,
        "--export-json",
        help="Also write the matched records to this JSON file.",
    ),
    table: bool = typer.Option(
        True,
        "--table/--no-table",
        help="Show a summary table of the matched records.",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Search the reprint list for TAX_ID and download the documents as a ZIP."""

    _setup_logging(verbose)
    settings = AppSettings()

    def _on_record(record: DocumentRecord) -> None:
        _console.print(format_record_line(record), markup=False, highlight=False, soft_wrap=True)

    def _on_searched(count: int) -> None:
        if count:
            _console.print(f"[cyan]Found {count} document(s).[/cyan]")
        else:
            _console.print("[yellow]No documents matched the search window.[/yellow]")

    def _on_saved(path: Path) -> None:
        _console.print(f"[green]Zip file downloaded successfully.[/green] {escape(str(path))}", soft_wrap=True)

    request = ReprintRequest(
        tax_id=tax_id,
        since=since,
        until=until,
        download=not no_download,
        filename=filename,
    )
    hooks = PipelineHooks(record=_on_record, searched=_on_searched, saved=_on_saved)

    try:
        result = asyncio.run(run_reprint(request, settings=settings, hooks=hooks))
        if export_json is not None:
            export_records_json(
                records=result.records,
                date_range=result.date_range,
                tax_id=tax_id,
                output_path=export_json,
            )
    except (EtaxError, OSError) as exc:
        _err_console.print(f"[red]Error:[/red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=1) from exc

    if table and result.records:
        _console.print(build_records_table(result.records))
    if export_json is not None:
        _console.print(f"[green]Exported records to:[/green] {escape(str(export_json))}", soft_wrap=True)


def run() -> None:
    app()


if __name__ == "__main__":
    run()
