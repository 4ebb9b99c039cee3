"""
Shared test fixtures.

Sets up an isolated test database so tests never touch
the real database. Each test gets a fresh session that
rolls back after the test, so no test data persists.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from ach_concourse.main import odfi_app, rdfi_app, ledger_app, eip_app
from ach_concourse.models.base import Base, get_db


# Use SQLite for tests; no external database needed.
TEST_DATABASE_URL = "sqlite:///./test.db"

engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
)

TestSessionLocal = sessionmaker(
    bind=engine,
    autocommit=False,
    autoflush=False,
)


@pytest.fixture(autouse=True)
def setup_database():
    """Create all tables before each test, drop them after."""
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db_session():
    """Provide a database session for direct service testing."""
    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


def use_test_session(app, db_session):
    """
    Point an app's get_db dependency at the test session.

    Returns a callable that undoes the override.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    return app.dependency_overrides.clear


@pytest.fixture
def odfi_client(db_session):
    restore = use_test_session(odfi_app, db_session)
    yield TestClient(odfi_app)
    restore()


@pytest.fixture
def rdfi_client(db_session):
    restore = use_test_session(rdfi_app, db_session)
    yield TestClient(rdfi_app)
    restore()


@pytest.fixture
def ledger_client(db_session):
    restore = use_test_session(ledger_app, db_session)
    yield TestClient(ledger_app)
    restore()


@pytest.fixture
def eip_client(db_session):
    restore = use_test_session(eip_app, db_session)
    yield TestClient(eip_app)
    restore()
