"""
Shared test fixtures.

Sets up an isolated SQLite database so tests never touch the
real database. Tables are created before and dropped after
every test.
"""

import os

# Must be set before the application modules are imported so the
# application's own engine never points at PostgreSQL.
TEST_DATABASE_URL = "sqlite:///./test.db"
os.environ["DATABASE_URL"] = TEST_DATABASE_URL

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from banking_service.main import app
from banking_service.models import Base
from banking_service.models.base import get_db
from banking_service.schemas.user import UserRegister
from banking_service.services.user_service import UserService


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


@pytest.fixture
def client(db_session):
    """
    Provide a test client with the test database.

    The get_db dependency is overridden so endpoints share the
    test's session.
    """
    def override_get_db():
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def make_user(db_session):
    """Factory fixture: register and commit a user, return it."""
    def _make_user(username="alice"):
        user = UserService(db_session).register(
            UserRegister(username=username, password="secret-pass")
        )
        db_session.commit()
        return user
    return _make_user
