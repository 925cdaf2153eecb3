"""
Entry service for creating journal entries from the dashboard form.
"""
import math
from typing import Any, Mapping

from pydantic import ValidationError as PydanticValidationError
from sqlmodel import Session

from daylio_dashboard.core.exceptions import StorageError, ValidationError
from daylio_dashboard.core.logging_config import log_info, log_warning
from daylio_dashboard.core.time_utils import decompose_epoch_ms
from daylio_dashboard.data_transfer.daylio import DaylioEntry
from daylio_dashboard.services.storage_service import StorageService

# Entries created here are stored in UTC.
LOCAL_TIME_ZONE_OFFSET = 0


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_epoch_ms(value: Any) -> int:
    """Coerce a JSON number or numeric string to integer epoch milliseconds."""
    if _is_number(value):
        number = float(value)
    elif isinstance(value, str):
        try:
            number = float(value.strip())
        except ValueError:
            raise ValidationError("datetime must be a valid number") from None
    else:
        raise ValidationError("datetime must be a valid number")

    if not math.isfinite(number):
        raise ValidationError("datetime must be a valid number")
    return int(number)


class EntryService:
    """Service class for entry creation."""

    def __init__(self, session: Session):
        self.session = session
        self.storage = StorageService(session)

    @staticmethod
    def validate_payload(payload: Mapping[str, Any]) -> DaylioEntry:
        """
        Validate a new-entry request and decompose its datetime.

        Checks run in a fixed order so each request reports one error.

        Raises:
            ValidationError: With a message naming the offending field
        """
        mood = payload.get("mood")
        if mood is None:
            raise ValidationError("mood is required")

        datetime_value = payload.get("datetime")
        if not datetime_value:
            raise ValidationError("datetime is required")

        tags = payload.get("tags", [])
        if not isinstance(tags, list):
            raise ValidationError("tags must be an array")

        datetime_ms = parse_epoch_ms(datetime_value)
        try:
            calendar = decompose_epoch_ms(datetime_ms)
        except OverflowError:
            raise ValidationError("datetime must be a valid number") from None

        try:
            return DaylioEntry(
                **calendar,
                datetime=datetime_ms,
                time_zone_offset=LOCAL_TIME_ZONE_OFFSET,
                mood=mood,
                note_title=payload.get("note_title") or "",
                note=payload.get("note") or "",
                tags=tags,
            )
        except PydanticValidationError as e:
            field = ".".join(str(part) for part in e.errors()[0]["loc"])
            raise ValidationError(f"{field} is invalid") from e

    def create_entry(self, payload: Mapping[str, Any]) -> DaylioEntry:
        """
        Validate, decompose and store a new entry.

        Returns:
            The stored entry, including its new id

        Raises:
            ValidationError: If the request is malformed (nothing is stored)
            StorageError: If the store rejects the insert
        """
        try:
            entry = self.validate_payload(payload)
        except ValidationError as e:
            log_warning(f"Rejected new entry: {e.message}")
            raise

        result = self.storage.insert_entry(
            {
                "minute": entry.minute,
                "hour": entry.hour,
                "day": entry.day,
                "month": entry.month,
                "year": entry.year,
                "datetime": entry.datetime,
                "timeZoneOffset": entry.time_zone_offset,
                "mood": entry.mood,
                "noteTitle": entry.note_title,
                "note": entry.note,
                "tags": entry.tags,
            }
        )
        if not result.success:
            raise StorageError(result.error or "Failed to create entry")

        entry.id = result.data
        log_info("Entry stored", entry_id=entry.id, mood=entry.mood)
        return entry
