"""
Bookkeeping tables: schema version and imported backup envelope.
"""
from typing import Optional

from sqlalchemy import BigInteger, Column
from sqlmodel import Field, SQLModel


class SchemaVersion(SQLModel, table=True):
    __tablename__ = "schema_version"

    version: int = Field(primary_key=True)


class DatasetInfo(SQLModel, table=True):
    """
    Envelope values of the last imported backup, reproduced on export.

    ``days_in_row_longest_chain`` is passed through, never computed.
    """
    __tablename__ = "dataset_info"

    id: Optional[int] = Field(default=None, primary_key=True)
    version: int = Field(nullable=False)
    days_in_row_longest_chain: int = Field(default=0, nullable=False)
    imported_at: Optional[int] = Field(
        default=None,
        sa_column=Column(BigInteger, nullable=True),
    )
