"""
Entry creation endpoint.
"""
from typing import Any, Dict

from fastapi import APIRouter, Body, status
from fastapi.responses import JSONResponse

from daylio_dashboard.api.dependencies import SessionDep
from daylio_dashboard.core.exceptions import StorageError, ValidationError
from daylio_dashboard.core.logging_config import log_error
from daylio_dashboard.services.entry_service import EntryService

router = APIRouter(prefix="/api/entries", tags=["entries"])


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    responses={
        400: {"description": "Invalid entry data"},
        500: {"description": "Entry could not be stored"},
    },
)
async def create_entry(
    session: SessionDep,
    payload: Dict[str, Any] = Body(...),
):
    """
    Create an entry from ``{mood, datetime, note?, note_title?, tags?}``.

    ``datetime`` is epoch milliseconds; the response carries the stored
    calendar fields and the new id.
    """
    service = EntryService(session)
    try:
        entry = service.create_entry(payload)
    except ValidationError as e:
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": e.message})
    except StorageError as e:
        log_error(e)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to create entry", "details": e.message},
        )
    return entry.model_dump(by_alias=True)
