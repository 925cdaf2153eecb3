"""
Result and summary schemas returned by the storage and import layers.
"""
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field


class StorageResult(BaseModel):
    """
    Outcome of a storage operation.

    Storage methods return this instead of raising so callers can map a
    failure to a status code.
    """
    success: bool
    data: Any = None
    error: Optional[str] = None

    @classmethod
    def ok(cls, data: Any = None) -> "StorageResult":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "StorageResult":
        return cls(success=False, error=error)


class SummaryMetadata(BaseModel):
    """Live counts and date range of the stored dataset."""
    number_of_entries: int = Field(..., serialization_alias="numberOfEntries")
    number_of_moods: int = Field(..., serialization_alias="numberOfMoods")
    number_of_tags: int = Field(..., serialization_alias="numberOfTags")
    oldest_entry: Optional[int] = Field(None, serialization_alias="oldestEntry")
    newest_entry: Optional[int] = Field(None, serialization_alias="newestEntry")


class ImportResultSummary(BaseModel):
    """Counts of records written by a backup import."""
    moods_imported: int = 0
    tag_groups_imported: int = 0
    tags_imported: int = 0
    entries_imported: int = 0
    warnings: list[str] = Field(default_factory=list)

    def as_counts(self) -> Dict[str, int]:
        return self.model_dump(exclude={"warnings"})
