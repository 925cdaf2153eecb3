"""
Health endpoint.
"""
from fastapi import APIRouter

from daylio_dashboard import __version__
from daylio_dashboard.api.dependencies import SessionDep
from daylio_dashboard.services.storage_service import StorageService

router = APIRouter(tags=["health"])


@router.get("/health")
async def health(session: SessionDep):
    return {
        "status": "ok",
        "version": __version__,
        "populated": StorageService(session).is_populated(),
    }
