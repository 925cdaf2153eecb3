"""
Main CLI application using Typer.

Entry point: python -m daylio_dashboard.cli
CLI Name: daylio-admin
"""
import typer

from daylio_dashboard import __version__ as app_version
from daylio_dashboard.cli.commands import backup, server

app = typer.Typer(
    name="daylio-admin",
    help="Daylio Dashboard admin CLI - import, export and serve a Daylio backup",
)


@app.command()
def version():
    """Show CLI version information."""
    typer.echo(f"Daylio Dashboard CLI version {app_version}")


# Register commands
app.command("import")(backup.import_backup)
app.command("export")(backup.export_backup)
app.command("stats")(backup.stats)
app.command("serve")(server.serve)
