"""
Database engine, schema bootstrap and session dependency.
"""
from pathlib import Path
from typing import Iterator, Optional

from sqlalchemy import event
from sqlalchemy.engine import Engine, make_url
from sqlalchemy.exc import OperationalError
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, col, create_engine, select

from daylio_dashboard.core.config import settings
from daylio_dashboard.core.logging_config import log_info
from daylio_dashboard.models import SchemaVersion

SCHEMA_VERSION = 1


def create_db_engine(database_url: str) -> Engine:
    """
    Create an engine for ``database_url``.

    In-memory SQLite shares one connection across threads so tests and the
    ASGI worker see the same data. File databases run in WAL mode.
    """
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return create_engine(database_url)

    if url.database in (None, "", ":memory:"):
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )

    db_engine = create_engine(database_url, connect_args={"check_same_thread": False})

    @event.listens_for(db_engine, "connect")
    def _set_wal(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA journal_mode=WAL")
        cursor.close()

    return db_engine


def get_schema_version(db_engine: Engine) -> int:
    try:
        with Session(db_engine) as session:
            version = session.exec(
                select(SchemaVersion.version).order_by(col(SchemaVersion.version).desc())
            ).first()
    except OperationalError:
        return 0
    return version or 0


def init_db(db_engine: Optional[Engine] = None) -> Engine:
    """Create the schema once; the schema_version row guards reruns."""
    db_engine = db_engine or engine
    database = db_engine.url.database
    if db_engine.url.get_backend_name() == "sqlite" and database not in (None, "", ":memory:"):
        Path(database).parent.mkdir(parents=True, exist_ok=True)
    if get_schema_version(db_engine) == 0:
        log_info("Running database migrations")
        SQLModel.metadata.create_all(db_engine)
        with Session(db_engine) as session:
            session.add(SchemaVersion(version=SCHEMA_VERSION))
            session.commit()
        log_info("Migrations complete", schema_version=SCHEMA_VERSION)
    return db_engine


def get_session() -> Iterator[Session]:
    """FastAPI dependency yielding a session bound to the application engine."""
    with Session(engine) as session:
        yield session


engine = create_db_engine(settings.resolved_database_url)
