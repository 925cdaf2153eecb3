"""
Daylio backup data models.

Pydantic models for the JSON document inside a Daylio backup. Field names
and aliases follow the backup format so ``model_dump(by_alias=True)``
reproduces it.
"""
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from daylio_dashboard.core.config import DEFAULT_BACKUP_VERSION
from daylio_dashboard.core.time_utils import from_epoch_ms


class DaylioModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class DaylioMood(DaylioModel):
    """Custom mood (``customMoods`` item)."""
    id: int
    custom_name: str = ""
    mood_group_id: int = Field(
        ..., ge=1, le=5, description="Tier 1..5; chart score is [5, 4, 3, 2, 1][group - 1]"
    )
    icon_id: Optional[int] = None
    predefined_name_id: Optional[int] = None
    state: Optional[int] = None
    created_at: Optional[int] = Field(None, alias="createdAt")

    @field_validator("custom_name", mode="before")
    @classmethod
    def none_name_to_empty(cls, v):
        return "" if v is None else v


class DaylioTagGroup(DaylioModel):
    """Tag group (``tag_groups`` item)."""
    id: int
    name: str
    order: Optional[int] = None


class DaylioTag(DaylioModel):
    """Activity tag (``tags`` item)."""
    id: int
    name: str
    id_tag_group: Optional[int] = None
    icon: Optional[str] = None
    order: Optional[int] = None
    state: Optional[int] = None
    created_at: Optional[int] = Field(None, alias="createdAt")


class DaylioEntry(DaylioModel):
    """Mood entry (``dayEntries`` item)."""
    id: Optional[int] = None
    minute: int = Field(..., ge=0, le=59)
    hour: int = Field(..., ge=0, le=23)
    day: int = Field(..., ge=1, le=31)
    month: int = Field(..., ge=1, le=12)
    year: int
    datetime: int = Field(..., description="Epoch milliseconds")
    time_zone_offset: int = Field(..., alias="timeZoneOffset", description="Milliseconds")
    mood: int
    note_title: str = ""
    note: str = ""
    tags: List[int] = Field(default_factory=list)

    @field_validator("note_title", "note", mode="before")
    @classmethod
    def none_text_to_empty(cls, v):
        return "" if v is None else v

    @field_validator("tags", mode="before")
    @classmethod
    def none_tags_to_empty(cls, v):
        return [] if v is None else v

    @model_validator(mode="after")
    def local_time_in_range(self):
        """The display time ``datetime + timeZoneOffset`` must be a calendar date."""
        try:
            from_epoch_ms(self.datetime, self.time_zone_offset)
        except OverflowError:
            raise ValueError(
                "datetime + timeZoneOffset is outside the supported date range"
            ) from None
        return self


class DaylioMetadata(DaylioModel):
    number_of_entries: Optional[int] = None


class DaylioBackup(DaylioModel):
    """
    Top-level backup document.

    ``daysInRowLongestChain`` is carried through unchanged; nothing computes it.
    """
    version: int = DEFAULT_BACKUP_VERSION
    days_in_row_longest_chain: int = Field(0, alias="daysInRowLongestChain")
    metadata: DaylioMetadata = Field(default_factory=DaylioMetadata)
    custom_moods: List[DaylioMood] = Field(default_factory=list, alias="customMoods")
    tag_groups: List[DaylioTagGroup] = Field(default_factory=list)
    tags: List[DaylioTag] = Field(default_factory=list)
    day_entries: List[DaylioEntry] = Field(default_factory=list, alias="dayEntries")

    @field_validator("days_in_row_longest_chain", mode="before")
    @classmethod
    def none_chain_to_zero(cls, v):
        return 0 if v is None else v

    def to_backup_dict(self) -> dict:
        """Return the document in backup-file key order and naming."""
        return self.model_dump(by_alias=True)
