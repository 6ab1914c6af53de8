"""
Shared test fixtures.

Every test gets a fresh in-memory SQLite database. The app's get_db
dependency is swapped for one bound to that database.
"""

import os

# Must be set before calendify.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from calendify.db import Base, get_db
from calendify.main import app


@pytest.fixture
def db_engine():
    """In-memory database shared by every connection in the test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(db_engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=db_engine)


@pytest.fixture
def db(session_factory):
    """Session for arranging and inspecting data directly"""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def opened_sessions():
    """Sessions handed out to requests, in order"""
    return []


@pytest.fixture
def override_db(session_factory, opened_sessions):
    def _get_test_db():
        session = session_factory()
        opened_sessions.append(session)
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_test_db
    yield
    app.dependency_overrides.clear()


@pytest.fixture
def client(override_db):
    """HTTP client for the app, backed by the test database"""
    return TestClient(app)
