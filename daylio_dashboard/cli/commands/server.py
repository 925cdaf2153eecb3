"""
Development server command.
"""
from typing import Annotated, Optional

import typer
import uvicorn

from daylio_dashboard.core.config import settings


def serve(
    host: Annotated[Optional[str], typer.Option(help="Bind address")] = None,
    port: Annotated[Optional[int], typer.Option(help="Bind port")] = None,
    reload: Annotated[bool, typer.Option(help="Reload on code changes")] = False,
):
    """Run the HTTP API with uvicorn."""
    uvicorn.run(
        "daylio_dashboard.main:app",
        host=host or settings.host,
        port=port or settings.port,
        reload=reload,
        log_level=settings.log_level.lower(),
    )
