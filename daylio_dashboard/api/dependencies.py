"""
Shared endpoint dependencies.
"""
from typing import Annotated

from fastapi import Depends, HTTPException, status
from sqlmodel import Session

from daylio_dashboard.core.database import get_session
from daylio_dashboard.core.logging_config import log_error
from daylio_dashboard.data_transfer.daylio import DaylioBackup
from daylio_dashboard.services.storage_service import StorageService

SessionDep = Annotated[Session, Depends(get_session)]


def get_loaded_dataset(session: SessionDep) -> DaylioBackup:
    """Read the full dataset fresh for this request, entries newest first."""
    result = StorageService(session).load_dataset()
    if not result.success:
        log_error(f"Failed to load dataset: {result.error}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=result.error,
        )
    return result.data


DatasetDep = Annotated[DaylioBackup, Depends(get_loaded_dataset)]
