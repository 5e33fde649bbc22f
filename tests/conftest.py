"""
Shared fixtures: a fresh in-memory SQLite database per test, seeded with
the development fixture (project 1 "Dream Palettes" with palettes
1 "Unicorns" and 2 "Sunset"), and a TestClient whose get_db dependency
hands out sessions on that database.
"""

import os

# never let the suite reach a real postgres
os.environ.setdefault("DATABASE_URL", "sqlite://")

from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from swatches.api.deps import get_db
from swatches.core.config import Settings
from swatches.db.init_db import init_db, seed_initial_data
from swatches.db.session import build_engine
from swatches.main import create_application
from swatches.models.base import Base

ROOT = Path(__file__).resolve().parents[1]


@pytest.fixture
def engine():
    engine = build_engine("sqlite://", poolclass=StaticPool)
    init_db(engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    seed_initial_data(session)
    yield session
    session.close()


@pytest.fixture
def app():
    return create_application(
        Settings(database_url="sqlite://", static_dir=str(ROOT / "public"))
    )


@pytest.fixture
def client(app, db, session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
