"""
Pytest configuration and shared fixtures for the webhooks API tests.
"""

import os
from datetime import datetime, timezone

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Set test environment variables before importing app
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["LOG_LEVEL"] = "DEBUG"
os.environ["EXTERNAL_HOSTNAME"] = "localhost"

from app.database import Base  # noqa: E402
from app.main import app as fastapi_app  # noqa: E402

# Import models to register them with SQLAlchemy Base
from app.models import Team, User, Webhook  # noqa: E402


@pytest.fixture(scope="function")
def db_session():
    """Create a fresh database session for each test."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()

    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def client(db_session) -> TestClient:
    """Create a test client with a fresh database."""
    from app.database import get_db

    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    fastapi_app.dependency_overrides[get_db] = override_get_db

    # Use base_url to satisfy TrustedHostMiddleware
    with TestClient(fastapi_app, base_url="http://localhost") as test_client:
        yield test_client

    fastapi_app.dependency_overrides.clear()


@pytest.fixture
def team(db_session) -> Team:
    """A team owning the webhooks under test."""
    team = Team(name="Test Team")
    db_session.add(team)
    db_session.commit()
    db_session.refresh(team)
    return team


@pytest.fixture
def user(db_session, team) -> User:
    """A member of ``team`` with a known access key."""
    user = User(email="member@example.com", access_key="test-access-key", team_id=team.id)
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def auth_headers(user) -> dict:
    """Authorization header for ``user``."""
    return {"Authorization": f"Bearer {user.access_key}"}


@pytest.fixture
def make_webhook(db_session, team):
    """Persist a webhook for ``team`` (or the given team_id) and return it."""

    def _make(**fields) -> Webhook:
        fields.setdefault("team_id", team.id)
        webhook = Webhook(**fields)
        db_session.add(webhook)
        db_session.commit()
        db_session.refresh(webhook)
        return webhook

    return _make


@pytest.fixture
def timestamp() -> datetime:
    """A fixed, timezone-aware timestamp for unsaved webhook rows."""
    return datetime(2024, 5, 1, 12, 30, tzinfo=timezone.utc)
