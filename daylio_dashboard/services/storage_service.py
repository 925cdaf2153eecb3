"""
Storage service for the Daylio dataset.

Owns every read and write against the relational store. Public methods
never raise: they return a StorageResult carrying either the data or the
error message of the failure.
"""
from typing import Any, List, Mapping, Optional

from pydantic import ValidationError as PydanticValidationError
from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, col, delete, func, select

from daylio_dashboard.core.config import settings
from daylio_dashboard.core.logging_config import log_error, log_info
from daylio_dashboard.core.time_utils import utc_now_ms
from daylio_dashboard.data_transfer.daylio import (
    DaylioBackup,
    DaylioEntry,
    DaylioMetadata,
    DaylioMood,
    DaylioTag,
    DaylioTagGroup,
)
from daylio_dashboard.models import DatasetInfo, Entry, Mood, Tag, TagGroup
from daylio_dashboard.schemas.result import (
    ImportResultSummary,
    StorageResult,
    SummaryMetadata,
)

REQUIRED_ENTRY_FIELDS = (
    "minute",
    "hour",
    "day",
    "month",
    "year",
    "datetime",
    "timeZoneOffset",
    "mood",
)


def _error_message(exc: SQLAlchemyError) -> str:
    """Prefer the driver message (e.g. "NOT NULL constraint failed: entries.mood")."""
    orig = getattr(exc, "orig", None)
    return str(orig) if orig is not None else str(exc)


def _validation_message(exc: PydanticValidationError) -> str:
    error = exc.errors()[0]
    field = ".".join(str(part) for part in error["loc"]) or "record"
    return f"Invalid value for {field}: {error['msg']}"


class StorageService:
    """Service class for dataset persistence."""

    def __init__(self, session: Session):
        self.session = session

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def import_dataset(self, dataset: DaylioBackup) -> StorageResult:
        """
        Replace the whole stored dataset with ``dataset``.

        Deletes and inserts run in one transaction; on failure the previous
        dataset stays in place. Result data is an ImportResultSummary.
        """
        log_info(
            "Importing dataset",
            entries=len(dataset.day_entries),
            moods=len(dataset.custom_moods),
            tags=len(dataset.tags),
            tag_groups=len(dataset.tag_groups),
        )
        now_ms = utc_now_ms()
        try:
            self.session.expunge_all()
            for model in (Entry, Tag, TagGroup, Mood, DatasetInfo):
                self.session.exec(delete(model))

            for index, group in enumerate(dataset.tag_groups):
                self.session.add(self._tag_group_from_backup(group, index))
            for index, tag in enumerate(dataset.tags):
                self.session.add(self._tag_from_backup(tag, index, now_ms))
            for mood in dataset.custom_moods:
                self.session.add(self._mood_from_backup(mood, now_ms))
            for entry in dataset.day_entries:
                self.session.add(self._entry_from_backup(entry))

            self.session.add(
                DatasetInfo(
                    version=dataset.version,
                    days_in_row_longest_chain=dataset.days_in_row_longest_chain,
                    imported_at=now_ms,
                )
            )
            self.session.commit()
        except SQLAlchemyError as exc:
            self.session.rollback()
            log_error(exc, operation="import_dataset")
            return StorageResult.fail(_error_message(exc))

        summary = ImportResultSummary(
            moods_imported=len(dataset.custom_moods),
            tag_groups_imported=len(dataset.tag_groups),
            tags_imported=len(dataset.tags),
            entries_imported=len(dataset.day_entries),
        )
        log_info("Dataset import complete", **summary.as_counts())
        return StorageResult.ok(summary)

    def insert_entry(self, fields: Mapping[str, Any]) -> StorageResult:
        """
        Insert one entry with a store-assigned id.

        ``fields`` uses backup naming (``timeZoneOffset``) with ``noteTitle``
        or ``note_title`` for the title. Values are range-checked as a backup
        entry; a rejected field fails the result. Result data is the new id.
        """
        missing = [name for name in REQUIRED_ENTRY_FIELDS if fields.get(name) is None]
        if missing:
            return StorageResult.fail(
                f"Missing required entry fields: {', '.join(missing)}"
            )

        try:
            checked = DaylioEntry(
                minute=fields["minute"],
                hour=fields["hour"],
                day=fields["day"],
                month=fields["month"],
                year=fields["year"],
                datetime=fields["datetime"],
                time_zone_offset=fields["timeZoneOffset"],
                mood=fields["mood"],
                note_title=fields.get("noteTitle", fields.get("note_title")),
                note=fields.get("note"),
                tags=fields.get("tags"),
            )
        except PydanticValidationError as exc:
            return StorageResult.fail(_validation_message(exc))

        entry = self._entry_from_backup(checked)
        try:
            self.session.add(entry)
            self.session.commit()
            self.session.refresh(entry)
        except SQLAlchemyError as exc:
            self.session.rollback()
            log_error(exc, operation="insert_entry")
            return StorageResult.fail(_error_message(exc))

        log_info(f"Entry created: {entry.id}")
        return StorageResult.ok(entry.id)

    # ------------------------------------------------------------------
    # Dataset reads
    # ------------------------------------------------------------------

    def load_dataset(self) -> StorageResult:
        """
        Return the stored dataset in backup shape, entries newest first.
        """
        return self._read_dataset(entry_order=(col(Entry.datetime).desc(), col(Entry.id).desc()))

    def export_dataset(self) -> StorageResult:
        """
        Return the stored dataset for a backup file, entries by id.
        """
        return self._read_dataset(entry_order=(col(Entry.id),))

    def _read_dataset(self, entry_order: tuple) -> StorageResult:
        try:
            entries = self.session.exec(select(Entry).order_by(*entry_order)).all()
            tags = self._ordered_tags()
            tag_groups = self._ordered_tag_groups()
            moods = self._ordered_moods()
            info = self.session.exec(select(DatasetInfo)).first()

            backup = DaylioBackup(
                version=info.version if info else settings.backup_version,
                days_in_row_longest_chain=info.days_in_row_longest_chain if info else 0,
                metadata=DaylioMetadata(number_of_entries=len(entries)),
                custom_moods=[self._mood_to_backup(mood) for mood in moods],
                tag_groups=[self._tag_group_to_backup(group) for group in tag_groups],
                tags=[self._tag_to_backup(tag) for tag in tags],
                day_entries=[self._entry_to_backup(entry) for entry in entries],
            )
        except SQLAlchemyError as exc:
            log_error(exc, operation="read_dataset")
            return StorageResult.fail(_error_message(exc))
        except PydanticValidationError as exc:
            log_error(exc, operation="read_dataset")
            return StorageResult.fail(_validation_message(exc))
        return StorageResult.ok(backup)

    # ------------------------------------------------------------------
    # Lookups
    # ------------------------------------------------------------------

    def all_entries(self) -> StorageResult:
        """All entries, newest first, as DaylioEntry records."""
        try:
            entries = self.session.exec(
                select(Entry).order_by(col(Entry.datetime).desc(), col(Entry.id).desc())
            ).all()
            records = [self._entry_to_backup(entry) for entry in entries]
        except SQLAlchemyError as exc:
            log_error(exc, operation="all_entries")
            return StorageResult.fail(_error_message(exc))
        except PydanticValidationError as exc:
            log_error(exc, operation="all_entries")
            return StorageResult.fail(_validation_message(exc))
        return StorageResult.ok(records)

    def all_moods(self) -> StorageResult:
        try:
            records = [self._mood_to_backup(mood) for mood in self._ordered_moods()]
        except SQLAlchemyError as exc:
            log_error(exc, operation="all_moods")
            return StorageResult.fail(_error_message(exc))
        except PydanticValidationError as exc:
            log_error(exc, operation="all_moods")
            return StorageResult.fail(_validation_message(exc))
        return StorageResult.ok(records)

    def all_tags_and_groups(self) -> StorageResult:
        """Tags and tag groups, each in display order."""
        try:
            records = {
                "tags": [self._tag_to_backup(tag) for tag in self._ordered_tags()],
                "tag_groups": [
                    self._tag_group_to_backup(group) for group in self._ordered_tag_groups()
                ],
            }
        except SQLAlchemyError as exc:
            log_error(exc, operation="all_tags_and_groups")
            return StorageResult.fail(_error_message(exc))
        except PydanticValidationError as exc:
            log_error(exc, operation="all_tags_and_groups")
            return StorageResult.fail(_validation_message(exc))
        return StorageResult.ok(records)

    def summary_metadata(self) -> StorageResult:
        try:
            entry_count = self.session.exec(select(func.count(col(Entry.id)))).one()
            mood_count = self.session.exec(select(func.count(col(Mood.id)))).one()
            tag_count = self.session.exec(select(func.count(col(Tag.id)))).one()
            oldest, newest = self.session.exec(
                select(func.min(col(Entry.datetime)), func.max(col(Entry.datetime)))
            ).one()
        except SQLAlchemyError as exc:
            log_error(exc, operation="summary_metadata")
            return StorageResult.fail(_error_message(exc))
        return StorageResult.ok(
            SummaryMetadata(
                number_of_entries=entry_count,
                number_of_moods=mood_count,
                number_of_tags=tag_count,
                oldest_entry=oldest,
                newest_entry=newest,
            )
        )

    def is_populated(self) -> bool:
        """True when at least one entry is stored; False also when the store is unreadable."""
        try:
            count = self.session.exec(select(func.count(col(Entry.id)))).one()
        except SQLAlchemyError as exc:
            log_error(exc, operation="is_populated")
            return False
        return count > 0

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def _ordered_tags(self) -> List[Tag]:
        return list(
            self.session.exec(
                select(Tag).order_by(col(Tag.order_index), col(Tag.id))
            ).all()
        )

    def _ordered_tag_groups(self) -> List[TagGroup]:
        return list(
            self.session.exec(
                select(TagGroup).order_by(col(TagGroup.order_index), col(TagGroup.id))
            ).all()
        )

    def _ordered_moods(self) -> List[Mood]:
        return list(
            self.session.exec(
                select(Mood).order_by(col(Mood.mood_group_id), col(Mood.id))
            ).all()
        )

    # ------------------------------------------------------------------
    # Row <-> backup mapping
    # ------------------------------------------------------------------

    @staticmethod
    def _default_order(order: Optional[int], index: int) -> int:
        return index if order is None else order

    @classmethod
    def _tag_group_from_backup(cls, group: DaylioTagGroup, index: int) -> TagGroup:
        return TagGroup(
            id=group.id,
            name=group.name,
            order_index=cls._default_order(group.order, index),
        )

    @classmethod
    def _tag_from_backup(cls, tag: DaylioTag, index: int, now_ms: int) -> Tag:
        return Tag(
            id=tag.id,
            name=tag.name,
            id_tag_group=tag.id_tag_group,
            icon=tag.icon,
            order_index=cls._default_order(tag.order, index),
            state=tag.state if tag.state is not None else 0,
            created_at=tag.created_at if tag.created_at is not None else now_ms,
        )

    @staticmethod
    def _mood_from_backup(mood: DaylioMood, now_ms: int) -> Mood:
        return Mood(
            id=mood.id,
            custom_name=mood.custom_name,
            mood_group_id=mood.mood_group_id,
            icon_id=mood.icon_id,
            predefined_name_id=mood.predefined_name_id,
            state=mood.state if mood.state is not None else 0,
            created_at=mood.created_at if mood.created_at is not None else now_ms,
        )

    @staticmethod
    def _entry_from_backup(entry: DaylioEntry) -> Entry:
        return Entry(
            id=entry.id,
            minute=entry.minute,
            hour=entry.hour,
            day=entry.day,
            month=entry.month,
            year=entry.year,
            datetime=entry.datetime,
            time_zone_offset=entry.time_zone_offset,
            mood=entry.mood,
            note_title=entry.note_title,
            note=entry.note,
            tags=list(entry.tags),
        )

    @staticmethod
    def _tag_group_to_backup(group: TagGroup) -> DaylioTagGroup:
        return DaylioTagGroup(id=group.id, name=group.name, order=group.order_index)

    @staticmethod
    def _tag_to_backup(tag: Tag) -> DaylioTag:
        return DaylioTag(
            id=tag.id,
            name=tag.name,
            id_tag_group=tag.id_tag_group,
            icon=tag.icon,
            order=tag.order_index,
            state=tag.state,
            created_at=tag.created_at,
        )

    @staticmethod
    def _mood_to_backup(mood: Mood) -> DaylioMood:
        return DaylioMood(
            id=mood.id,
            custom_name=mood.custom_name,
            mood_group_id=mood.mood_group_id,
            icon_id=mood.icon_id,
            predefined_name_id=mood.predefined_name_id,
            state=mood.state,
            created_at=mood.created_at,
        )

    @staticmethod
    def _entry_to_backup(entry: Entry) -> DaylioEntry:
        return DaylioEntry(
            id=entry.id,
            minute=entry.minute,
            hour=entry.hour,
            day=entry.day,
            month=entry.month,
            year=entry.year,
            datetime=entry.datetime,
            time_zone_offset=entry.time_zone_offset,
            mood=entry.mood,
            note_title=entry.note_title or "",
            note=entry.note or "",
            tags=list(entry.tags or []),
        )
