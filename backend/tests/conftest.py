"""
Pytest configuration and fixtures.

Provides fixtures for:
- In-memory SQLite database session
- FastAPI test client with get_db overridden
- Lookup rows and users with known passwords
"""

import os

# Settings are read at import time
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-for-propman-tests")
os.environ.setdefault("REFRESH_COOKIE_SECURE", "false")

from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from propman.core.config import settings
from propman.core.security import get_password_hash
from propman.db.base import Base
from propman.db.session import get_db
from propman.main import app
from propman.models import AirBase, Command, PropertyClass, User

TEST_PASSWORD = "Secret123!"
# Low iteration count keeps the suite fast; production default is 150,000
TEST_ITERATIONS = 1000


@pytest.fixture
def engine():
    """Fresh in-memory database per test."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def db(engine) -> Generator[Session, None, None]:
    """Database session bound to the test engine."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(engine, tmp_path, monkeypatch) -> Generator[TestClient, None, None]:
    """Test client whose requests each get their own session on the test engine."""
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    def override_get_db():
        session = TestingSessionLocal()
        try:
            yield session
        finally:
            session.close()

    monkeypatch.setattr(settings, "UPLOADS_DIR", str(tmp_path / "Uploads"))
    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def lookups(db: Session):
    """One command, base and class row."""
    command = Command(name="Northern Command", is_deleted=False)
    base = AirBase(name="Base One", cmd_id=None, is_deleted=False)
    klass = PropertyClass(name="Commercial", is_deleted=False)
    db.add_all([command, base, klass])
    db.commit()
    base.cmd_id = command.id
    db.commit()
    return {"cmd_id": command.id, "base_id": base.id, "class_id": klass.id}


def make_user(db: Session, username: str = "jdoe", password: str = TEST_PASSWORD, **fields) -> User:
    hashed = get_password_hash(password, TEST_ITERATIONS)
    user = User(
        username=username,
        name=fields.pop("name", "John Doe"),
        rank=fields.pop("rank", "Sqn Ldr"),
        password=hashed.hash,
        password_salt=hashed.salt,
        password_iterations=hashed.iterations,
        password_attempts=fields.pop("password_attempts", 0),
        status=fields.pop("status", 1),
        is_deleted=False,
        **fields,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def test_user(db: Session) -> User:
    """Active user with TEST_PASSWORD."""
    return make_user(db)


@pytest.fixture
def user_factory(db: Session):
    """Create extra users: user_factory("name", status=0, ...)."""
    def factory(username: str, password: str = TEST_PASSWORD, **fields) -> User:
        return make_user(db, username, password, **fields)
    return factory
