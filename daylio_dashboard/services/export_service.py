"""
Export service for producing Daylio backup files.
"""
from pathlib import Path

from sqlmodel import Session

from daylio_dashboard.core.exceptions import StorageError
from daylio_dashboard.core.logging_config import log_info
from daylio_dashboard.core.time_utils import utc_now
from daylio_dashboard.data_transfer.daylio import DaylioBackup, DaylioBackupParser
from daylio_dashboard.services.storage_service import StorageService

EXPORT_FILENAME_TEMPLATE = "daylio_export_{date}.daylio"


class ExportService:
    """Service for creating backup exports."""

    def __init__(self, session: Session):
        self.session = session
        self.storage = StorageService(session)

    def build_export(self) -> DaylioBackup:
        """
        Build the backup document from the store, entries by id.

        Raises:
            StorageError: If the store cannot be read
        """
        result = self.storage.export_dataset()
        if not result.success:
            raise StorageError(result.error or "Export failed")
        return result.data

    def export_backup(self) -> str:
        """Return the stored dataset as base64 backup text."""
        backup = self.build_export()
        log_info("Exporting backup", entries=len(backup.day_entries))
        return DaylioBackupParser.encode(backup)

    def write_backup_file(self, file_path: Path) -> Path:
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(self.export_backup(), encoding="ascii")
        log_info(f"Backup written to {file_path}")
        return file_path

    @staticmethod
    def export_filename() -> str:
        return EXPORT_FILENAME_TEMPLATE.format(date=utc_now().strftime("%Y_%m_%d"))
