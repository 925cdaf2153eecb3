"""
Backup commands: import, export and dataset statistics.
"""
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table
from sqlmodel import Session

from daylio_dashboard.core.config import settings
from daylio_dashboard.core.database import engine, init_db
from daylio_dashboard.core.exceptions import BackupImportError, StorageError
from daylio_dashboard.core.logging_config import setup_logging
from daylio_dashboard.core.time_utils import from_epoch_ms
from daylio_dashboard.services.export_service import ExportService
from daylio_dashboard.services.import_service import ImportService
from daylio_dashboard.services.storage_service import StorageService

console = Console()


def _open_session() -> Session:
    setup_logging(settings.log_level)
    init_db(engine)
    return Session(engine)


def import_backup(
    file_path: Annotated[Path, typer.Argument(help="Daylio backup (.daylio, base64 text or JSON)")],
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Skip confirmation")] = False,
):
    """Replace the stored dataset with a backup file."""
    if not file_path.exists():
        console.print(f"[red]File not found: {file_path}[/red]")
        raise typer.Exit(code=1)

    with _open_session() as session:
        if StorageService(session).is_populated() and not yes:
            typer.confirm("This replaces all stored entries. Continue?", abort=True)
        try:
            summary = ImportService(session).import_backup_file(file_path)
        except (BackupImportError, StorageError) as e:
            console.print(f"[red]Import failed:[/red] {e.message}")
            raise typer.Exit(code=1) from e

    table = Table(title="Import complete")
    table.add_column("Records")
    table.add_column("Count", justify="right")
    for name, count in summary.as_counts().items():
        table.add_row(name.replace("_imported", "").replace("_", " "), str(count))
    console.print(table)
    for warning in summary.warnings:
        console.print(f"[yellow]warning:[/yellow] {warning}")


def export_backup(
    output: Annotated[
        Optional[Path],
        typer.Argument(help="Destination file (default: daylio_export_<date>.daylio)"),
    ] = None,
):
    """Write the stored dataset to a base64 backup file."""
    with _open_session() as session:
        service = ExportService(session)
        destination = output or Path(service.export_filename())
        try:
            service.write_backup_file(destination)
        except StorageError as e:
            console.print(f"[red]Export failed:[/red] {e.message}")
            raise typer.Exit(code=1) from e
    console.print(f"[green]Backup written to {destination}[/green]")


def stats():
    """Show counts and date range of the stored dataset."""
    with _open_session() as session:
        result = StorageService(session).summary_metadata()
    if not result.success:
        console.print(f"[red]Could not read the store:[/red] {result.error}")
        raise typer.Exit(code=1)

    metadata = result.data
    table = Table(title="Stored dataset")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    table.add_row("Entries", str(metadata.number_of_entries))
    table.add_row("Moods", str(metadata.number_of_moods))
    table.add_row("Tags", str(metadata.number_of_tags))
    for label, value in (("Oldest entry", metadata.oldest_entry), ("Newest entry", metadata.newest_entry)):
        table.add_row(label, from_epoch_ms(value).strftime("%Y-%m-%d %H:%M") if value is not None else "-")
    console.print(table)
