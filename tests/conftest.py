"""Shared fixtures: an in-memory database and an application test client."""

from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["APP_TIMEZONE"] = "UTC"


class RecordingUpdater:
    """Stand-in for the GitHub check service that remembers each call."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def create_or_update_check(self, sha: str) -> bool:
        self.calls.append(sha)
        return True


@pytest.fixture()
def db_session():
    """Yield a session bound to freshly created tables."""

    from app.infrastructure import database

    database.initialize_database()
    database.Base.metadata.drop_all(bind=database.engine)
    database.Base.metadata.create_all(bind=database.engine)
    session = database.SessionLocal()
    try:
        yield session
    finally:
        session.close()
        database.Base.metadata.drop_all(bind=database.engine)


@pytest.fixture()
def updater() -> RecordingUpdater:
    return RecordingUpdater()


@pytest.fixture()
def client(db_session, updater):
    """Return a test client whose GitHub updater is replaced by ``updater``."""

    from fastapi.testclient import TestClient

    from app.interfaces.api.dependencies import get_repository_status_updater
    from main import create_app

    app = create_app()
    app.dependency_overrides[get_repository_status_updater] = lambda: updater
    with TestClient(app) as test_client:
        yield test_client
