"""Pytest configuration and shared fixtures for UrgeButton tests.

Provides temp-file SQLite databases, repositories and stores so tests never
touch the real app database.
"""

from __future__ import annotations

import tempfile
from datetime import date
from pathlib import Path

import pytest
from sqlmodel import SQLModel, create_engine

from urgebutton.infra.database import create_session_factory
from urgebutton.infra.repositories import SQLModelSettingsRepository, SQLModelUrgeRepository
from urgebutton.models import AppSetting, Urge  # noqa: F401 - registers the table
from urgebutton.store import UrgeStore

# =============================================================================
# Database Fixtures
# =============================================================================


@pytest.fixture(scope="function")
def db_engine():
    """Create an isolated temp-file SQLite database for each test.

    Yields:
        Engine: SQLModel engine with all tables created
    """
    with tempfile.NamedTemporaryFile(suffix=".db", delete=False) as f:
        db_path = Path(f.name)

    engine = create_engine(f"sqlite:///{db_path}", echo=False)
    SQLModel.metadata.create_all(engine)

    yield engine

    engine.dispose()
    db_path.unlink(missing_ok=True)


@pytest.fixture(scope="function")
def session_factory(db_engine):
    """Session factory matching the one the app context builds."""
    return create_session_factory(db_engine)


@pytest.fixture
def settings_repo(session_factory) -> SQLModelSettingsRepository:
    return SQLModelSettingsRepository(session_factory)


@pytest.fixture
def urge_repo(session_factory) -> SQLModelUrgeRepository:
    return SQLModelUrgeRepository(session_factory)


@pytest.fixture
def store(urge_repo) -> UrgeStore:
    """A store over an empty database."""
    return UrgeStore(urge_repo)


# =============================================================================
# Test Data Factories
# =============================================================================


@pytest.fixture
def day1() -> date:
    """A fixed calendar day so streak tests do not depend on the real clock."""
    return date(2024, 3, 1)


@pytest.fixture
def urge_factory():
    """Factory for building unsaved Urge records.

    Returns:
        Callable: Function that creates Urge instances with sensible defaults
    """

    def _create_urge(name: str = "Smoking", **fields) -> Urge:
        return Urge(name=name, **fields)

    return _create_urge
