"""
Mood definition model.
"""
from typing import Optional

from sqlalchemy import BigInteger, Column
from sqlmodel import CheckConstraint, Field, Index, SQLModel


class Mood(SQLModel, table=True):
    """
    A custom mood from a Daylio backup.

    ``mood_group_id`` is the mood's tier, 1..5. The chart score inverts it
    through ``[5, 4, 3, 2, 1][group - 1]``, so group 1 plots highest.
    """
    __tablename__ = "moods"

    id: Optional[int] = Field(default=None, primary_key=True)
    custom_name: str = Field(nullable=False)
    mood_group_id: int = Field(nullable=False)
    icon_id: Optional[int] = Field(default=None)
    predefined_name_id: Optional[int] = Field(default=None)
    state: int = Field(default=0, nullable=False)
    created_at: int = Field(sa_column=Column(BigInteger, nullable=False))

    __table_args__ = (
        CheckConstraint(
            "mood_group_id >= 1 AND mood_group_id <= 5",
            name="check_mood_group_range",
        ),
        Index("idx_moods_group", "mood_group_id"),
    )
