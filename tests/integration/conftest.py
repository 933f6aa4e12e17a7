"""Integration test fixtures.

Uses an in-memory SQLite database shared by every session of a test.
"""

from collections.abc import Generator

import pytest
from sqlalchemy import Engine, create_engine
from sqlalchemy.pool import StaticPool

from authlayer.infrastructure.persistence.database import (
    Base,
    create_session_factory,
    create_tables,
)
from authlayer.infrastructure.repositories.unit_of_work_impl import UnitOfWork

TEST_DATABASE_URL = "sqlite://"


@pytest.fixture
def test_engine() -> Generator[Engine, None, None]:
    """Create a test database engine using SQLite in-memory."""
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_tables(engine)

    yield engine

    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def uow_factory(test_engine):
    """Return a factory producing real units of work on the test database."""
    session_factory = create_session_factory(test_engine)
    return lambda: UnitOfWork(session_factory)
