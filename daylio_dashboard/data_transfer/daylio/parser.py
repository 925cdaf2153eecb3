"""
Daylio backup parser.

A backup is base64 text wrapping UTF-8 JSON. The app exports that text
directly; the phone app wraps it in a ZIP archive as ``backup.daylio``.
Both forms are accepted, as is plain JSON.
"""
import base64
import binascii
import io
import json
import zipfile
from pathlib import Path
from typing import Any, Dict

from pydantic import ValidationError as PydanticValidationError

from daylio_dashboard.core.exceptions import BackupImportError
from daylio_dashboard.core.logging_config import log_info

from .models import DaylioBackup

BACKUP_MEMBER_NAME = "backup.daylio"


class DaylioBackupParser:
    """Decode and encode Daylio backup payloads."""

    @staticmethod
    def decode_text(payload: str | bytes) -> Dict[str, Any]:
        """
        Decode a backup payload to its JSON document.

        Raises:
            BackupImportError: If the payload is not base64 of a UTF-8 JSON object
        """
        raw = payload.encode("utf-8") if isinstance(payload, str) else payload
        raw = b"".join(raw.split())
        if not raw:
            raise BackupImportError("Backup file is empty")

        if raw.startswith(b"{"):
            json_bytes = raw
        else:
            try:
                json_bytes = base64.b64decode(raw, validate=True)
            except (binascii.Error, ValueError) as e:
                raise BackupImportError(f"Invalid base64 in backup file: {e}") from e

        try:
            data = json.loads(json_bytes.decode("utf-8"))
        except UnicodeDecodeError as e:
            raise BackupImportError(f"Backup is not valid UTF-8: {e}") from e
        except json.JSONDecodeError as e:
            raise BackupImportError(f"Invalid JSON in backup file: {e}") from e

        if not isinstance(data, dict):
            raise BackupImportError("Backup JSON must be an object")
        return data

    @staticmethod
    def validate(data: Dict[str, Any]) -> DaylioBackup:
        try:
            return DaylioBackup.model_validate(data)
        except PydanticValidationError as e:
            raise BackupImportError(f"Backup does not match the Daylio format: {e}") from e

    @classmethod
    def parse(cls, payload: str | bytes) -> DaylioBackup:
        """Decode and validate a backup payload (base64, JSON or ZIP bytes)."""
        if isinstance(payload, bytes) and zipfile.is_zipfile(io.BytesIO(payload)):
            payload = cls._read_zip_member(payload)
        backup = cls.validate(cls.decode_text(payload))
        log_info(
            "Parsed Daylio backup",
            version=backup.version,
            entries=len(backup.day_entries),
            moods=len(backup.custom_moods),
            tags=len(backup.tags),
        )
        return backup

    @classmethod
    def parse_file(cls, file_path: Path) -> DaylioBackup:
        """
        Read and parse a backup file.

        Raises:
            FileNotFoundError: If the file doesn't exist
            BackupImportError: If the content is not a valid backup
        """
        if not file_path.exists():
            raise FileNotFoundError(f"File not found: {file_path}")
        return cls.parse(file_path.read_bytes())

    @staticmethod
    def encode(backup: DaylioBackup) -> str:
        """Serialize a backup to base64 text."""
        document = json.dumps(backup.to_backup_dict(), ensure_ascii=False)
        return base64.b64encode(document.encode("utf-8")).decode("ascii")

    @staticmethod
    def _read_zip_member(payload: bytes) -> bytes:
        try:
            with zipfile.ZipFile(io.BytesIO(payload)) as archive:
                names = archive.namelist()
                if BACKUP_MEMBER_NAME not in names:
                    raise BackupImportError(
                        f"Archive does not contain {BACKUP_MEMBER_NAME}"
                    )
                return archive.read(BACKUP_MEMBER_NAME)
        except zipfile.BadZipFile as e:
            raise BackupImportError(f"Corrupt backup archive: {e}") from e
