"""
API v1 router.
"""
from fastapi import APIRouter

from daylio_dashboard.api.v1.endpoints import backup, dashboard, entries, health

api_router = APIRouter()

# Include all endpoint routers
api_router.include_router(dashboard.router)
api_router.include_router(entries.router)
api_router.include_router(backup.router)
api_router.include_router(health.router)
