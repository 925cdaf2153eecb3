"""
Shared pytest fixtures.
"""
from __future__ import annotations

from typing import Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.engine import Engine
from sqlmodel import Session

from daylio_dashboard.core.database import create_db_engine, get_session, init_db
from daylio_dashboard.data_transfer.daylio import DaylioBackup
from daylio_dashboard.main import app
from daylio_dashboard.services.storage_service import StorageService
from tests.fixtures.backups import sample_backup


@pytest.fixture
def db_engine() -> Iterator[Engine]:
    """Fresh in-memory database with the schema created."""
    engine = create_db_engine("sqlite://")
    init_db(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(db_engine: Engine) -> Iterator[Session]:
    with Session(db_engine) as db_session:
        yield db_session


@pytest.fixture
def backup() -> DaylioBackup:
    return DaylioBackup.model_validate(sample_backup())


@pytest.fixture
def populated_session(session: Session, backup: DaylioBackup) -> Session:
    result = StorageService(session).import_dataset(backup)
    assert result.success, result.error
    return session


@pytest.fixture
def client(db_engine: Engine) -> Iterator[TestClient]:
    """API client bound to the in-memory database (lifespan not run)."""

    def _get_test_session() -> Iterator[Session]:
        with Session(db_engine) as db_session:
            yield db_session

    app.dependency_overrides[get_session] = _get_test_session
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def populated_client(client: TestClient, db_engine: Engine) -> TestClient:
    with Session(db_engine) as db_session:
        result = StorageService(db_session).import_dataset(
            DaylioBackup.model_validate(sample_backup())
        )
    assert result.success, result.error
    return client
