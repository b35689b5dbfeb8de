"""Pytest fixtures shared across the test suite.

Provides:
- In-memory SQLite database session (fresh tables per test)
- Controllable clock for expiry tests
- FastAPI TestClient wired to the test session and settings

Usage:
    def test_create_document(client):
        response = client.post("/documents", content="hello")
        assert response.status_code == 201
"""

import os

# Set environment variables BEFORE any imports to ensure they take effect
os.environ["DATABASE_URL"] = "sqlite://"
os.environ.setdefault("LOG_JSON", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from haste.config import Settings, get_settings
from haste.database import get_db as database_get_db
from haste.models import Base

# Single shared connection so every session sees the same in-memory database
test_engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

TEST_MAX_PASTE_SIZE = 1000


class FrozenClock:
    """Callable clock returning a settable Unix time."""

    def __init__(self, now: float = 1_700_000_000):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(scope="function")
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test.

    Creates all tables before the test and drops them after.
    """
    Base.metadata.create_all(bind=test_engine)

    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture
def test_settings() -> Settings:
    return Settings(
        DATABASE_URL="sqlite://",
        MAX_PASTE_SIZE=TEST_MAX_PASTE_SIZE,
        KEY_LENGTH=10,
        DEFAULT_EXPIRE_DAYS=30,
    )


@pytest.fixture
def app(db_session: Session, test_settings: Settings):
    """FastAPI app with get_db and get_settings overridden for the test."""
    from haste.main import app

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[database_get_db] = override_get_db
    app.dependency_overrides[get_settings] = lambda: test_settings

    yield app

    app.dependency_overrides.clear()


@pytest.fixture
def client(app) -> TestClient:
    """FastAPI TestClient without lifespan (tables come from db_session)."""
    return TestClient(app)
