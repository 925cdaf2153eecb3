"""
Import service for loading Daylio backups into the store.
"""
from pathlib import Path

from sqlmodel import Session

from daylio_dashboard.core.exceptions import StorageError
from daylio_dashboard.core.logging_config import log_info, log_warning
from daylio_dashboard.data_transfer.daylio import DaylioBackup, DaylioBackupParser
from daylio_dashboard.schemas.result import ImportResultSummary
from daylio_dashboard.services.storage_service import StorageService


class ImportService:
    """Service for importing backups."""

    def __init__(self, session: Session):
        """
        Initialize import service.

        Args:
            session: Database session
        """
        self.session = session
        self.storage = StorageService(session)

    def import_backup(self, payload: str | bytes) -> ImportResultSummary:
        """
        Parse a backup payload and replace the stored dataset with it.

        Args:
            payload: Base64 backup text, plain JSON, or a ZIP archive's bytes

        Returns:
            ImportResultSummary with per-entity counts

        Raises:
            BackupImportError: If the payload is not a valid backup
            StorageError: If the store rejects the import (previous data is kept)
        """
        backup = DaylioBackupParser.parse(payload)
        return self.import_dataset(backup)

    def import_backup_file(self, file_path: Path) -> ImportResultSummary:
        """
        Import a backup file from disk.

        Raises:
            FileNotFoundError: If the file doesn't exist
            BackupImportError: If the file is not a valid backup
            StorageError: If the store rejects the import
        """
        log_info(f"Importing backup file {file_path}")
        backup = DaylioBackupParser.parse_file(file_path)
        return self.import_dataset(backup)

    def import_dataset(self, backup: DaylioBackup) -> ImportResultSummary:
        result = self.storage.import_dataset(backup)
        if not result.success:
            raise StorageError(result.error or "Import failed")

        summary: ImportResultSummary = result.data
        summary.warnings.extend(self._reference_warnings(backup))
        for warning in summary.warnings:
            log_warning(warning)
        return summary

    @staticmethod
    def _reference_warnings(backup: DaylioBackup) -> list[str]:
        """Report dangling references; the store does not enforce them."""
        warnings = []
        group_ids = {group.id for group in backup.tag_groups}
        tag_ids = {tag.id for tag in backup.tags}
        mood_ids = {mood.id for mood in backup.custom_moods}

        for tag in backup.tags:
            if tag.id_tag_group is not None and tag.id_tag_group not in group_ids:
                warnings.append(f"Tag {tag.id} references unknown tag group {tag.id_tag_group}")
        for entry in backup.day_entries:
            if entry.mood not in mood_ids:
                warnings.append(f"Entry {entry.id} references unknown mood {entry.mood}")
            unknown_tags = [tag_id for tag_id in entry.tags if tag_id not in tag_ids]
            if unknown_tags:
                warnings.append(f"Entry {entry.id} references unknown tags {unknown_tags}")
        return warnings
