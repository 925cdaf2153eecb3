"""
FastAPI application.
"""
from contextlib import asynccontextmanager

from fastapi import FastAPI

from daylio_dashboard import __version__
from daylio_dashboard.api.v1.api import api_router
from daylio_dashboard.core.config import settings
from daylio_dashboard.core.database import init_db
from daylio_dashboard.core.logging_config import log_info, setup_logging


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging(settings.log_level)
    init_db()
    log_info(f"{settings.app_name} {__version__} started")
    yield


def create_app() -> FastAPI:
    application = FastAPI(title=settings.app_name, version=__version__, lifespan=lifespan)
    application.include_router(api_router)
    return application


app = create_app()
