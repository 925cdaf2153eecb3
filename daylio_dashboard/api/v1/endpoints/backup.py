"""
Backup import and export endpoints.
"""
from fastapi import APIRouter, File, HTTPException, UploadFile, status
from fastapi.responses import Response

from daylio_dashboard.api.dependencies import SessionDep
from daylio_dashboard.core.exceptions import BackupImportError, StorageError
from daylio_dashboard.core.logging_config import log_error
from daylio_dashboard.schemas.result import ImportResultSummary
from daylio_dashboard.services.export_service import ExportService
from daylio_dashboard.services.import_service import ImportService

router = APIRouter(prefix="/api", tags=["backup"])


@router.get(
    "/export",
    response_class=Response,
    responses={500: {"description": "Store could not be read"}},
)
async def export_backup(session: SessionDep):
    """Download the stored dataset as a base64 Daylio backup."""
    service = ExportService(session)
    try:
        content = service.export_backup()
    except StorageError as e:
        log_error(e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=e.message,
        ) from e
    return Response(
        content=content,
        media_type="application/octet-stream",
        headers={
            "Content-Disposition": f'attachment; filename="{service.export_filename()}"'
        },
    )


@router.post(
    "/import",
    response_model=ImportResultSummary,
    responses={
        400: {"description": "File is not a valid Daylio backup"},
        500: {"description": "Import failed; previous data kept"},
    },
)
async def import_backup(session: SessionDep, file: UploadFile = File(...)):
    """Replace the stored dataset with an uploaded backup."""
    payload = await file.read()
    service = ImportService(session)
    try:
        return service.import_backup(payload)
    except BackupImportError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.message,
        ) from e
    except StorageError as e:
        log_error(e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=e.message,
        ) from e
