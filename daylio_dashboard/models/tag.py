"""
Tag (activity) and tag group models.
"""
from typing import Optional

from sqlalchemy import BigInteger, Column, ForeignKey, Integer
from sqlmodel import Field, Index, SQLModel


class TagGroup(SQLModel, table=True):
    """
    User-defined group of tags (e.g. "Hobbies", "People").
    """
    __tablename__ = "tag_groups"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False)
    order_index: int = Field(default=0, nullable=False)


class Tag(SQLModel, table=True):
    """
    Activity label attachable to entries.
    """
    __tablename__ = "tags"

    id: Optional[int] = Field(default=None, primary_key=True)
    name: str = Field(nullable=False)
    # Not enforced: SQLite leaves foreign keys off unless asked
    id_tag_group: Optional[int] = Field(
        default=None,
        sa_column=Column(Integer, ForeignKey("tag_groups.id"), nullable=True),
    )
    icon: Optional[str] = Field(default=None)
    order_index: int = Field(default=0, nullable=False)
    state: int = Field(default=0, nullable=False)
    created_at: int = Field(sa_column=Column(BigInteger, nullable=False))

    __table_args__ = (
        Index("idx_tags_group", "id_tag_group"),
    )
