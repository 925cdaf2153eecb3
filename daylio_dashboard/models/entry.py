"""
Mood journal entry model.
"""
from typing import List, Optional

from sqlalchemy import JSON, BigInteger, Column
from sqlmodel import Field, Index, SQLModel

from daylio_dashboard.core.time_utils import utc_now_ms


class Entry(SQLModel, table=True):
    """
    One mood-journal record.

    ``datetime`` is the instant in epoch ms. The calendar fields are stored as
    given and drive date grouping; ``time_zone_offset`` only shifts the
    displayed time of day.
    """
    __tablename__ = "entries"

    id: Optional[int] = Field(default=None, primary_key=True)
    minute: int = Field(nullable=False)
    hour: int = Field(nullable=False)
    day: int = Field(nullable=False)
    month: int = Field(nullable=False)
    year: int = Field(nullable=False)
    datetime: int = Field(sa_column=Column(BigInteger, nullable=False))
    time_zone_offset: int = Field(sa_column=Column(BigInteger, nullable=False))
    mood: int = Field(nullable=False)
    note_title: str = Field(default="")
    note: str = Field(default="")
    tags: List[int] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    created_at: int = Field(
        default_factory=utc_now_ms,
        sa_column=Column(BigInteger, nullable=True),
    )

    __table_args__ = (
        Index("idx_entries_datetime", "datetime"),
        Index("idx_entries_date", "year", "month", "day"),
        Index("idx_entries_mood", "mood"),
    )
