"""
Pytest fixtures for profile service tests.

Uses an in-memory SQLite database per test through the ORM.
"""

import os

os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key-0123456789-abcdefghijklmnop")
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from accounts.db import Base  # noqa: E402
from accounts.models import User  # noqa: E402
from accounts.security import PasswordHasher  # noqa: E402

DEFAULT_PASSWORD = "motdepasse"


@pytest.fixture(scope="function")
def test_db():
    """Create a fresh in-memory database for each test."""
    db_url = "sqlite://"
    engine = create_engine(
        db_url,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    TestingSessionLocal = sessionmaker(
        bind=engine,
        autoflush=False,
        autocommit=False,
        expire_on_commit=False,
    )

    yield db_url, TestingSessionLocal, engine

    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def test_session(test_db):
    """Get a test session from the test database."""
    _, TestingSessionLocal, _ = test_db
    session = TestingSessionLocal()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


@pytest.fixture
def hasher():
    """bcrypt hasher at the minimum cost to keep tests fast."""
    return PasswordHasher(rounds=4)


@pytest.fixture
def make_user(test_session, hasher):
    """Factory inserting a committed user through the test session."""

    def _make(
        user_name: str = "jdupont",
        password: str = DEFAULT_PASSWORD,
        first_name: str = "Jean",
        last_name: str = "Dupont",
        **kwargs,
    ) -> User:
        user = User(
            first_name=first_name,
            last_name=last_name,
            user_name=user_name,
            password=hasher.hash(password),
            **kwargs,
        )
        test_session.add(user)
        test_session.commit()
        return user

    return _make
