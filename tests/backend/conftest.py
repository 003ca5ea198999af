from collections.abc import Callable, Iterator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session, sessionmaker

from backend.app.auth.jwt import create_user_token
from backend.app.database import get_db
from backend.app.dependencies import get_password_hasher
from backend.app.main import create_app
from backend.app.models import User

DEFAULT_PASSWORD = "motdepasse"


@pytest.fixture
def test_app_client(test_db, hasher) -> Iterator[tuple[TestClient, sessionmaker]]:
    _, TestingSessionLocal, _ = test_db

    app = create_app()

    def override_get_db() -> Iterator[Session]:
        db = TestingSessionLocal()
        try:
            yield db
            db.commit()  # Auto-commit on success like production
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_password_hasher] = lambda: hasher

    with TestClient(app) as client:
        yield client, TestingSessionLocal


@pytest.fixture
def seed_user(test_app_client, hasher) -> Callable[..., User]:
    """Insert a user through its own session, closed before the request runs."""
    _, TestingSessionLocal = test_app_client

    def _seed(
        user_id: int | None = None,
        user_name: str = "jdupont",
        password: str = DEFAULT_PASSWORD,
        first_name: str = "Jean",
        last_name: str = "Dupont",
    ) -> User:
        session = TestingSessionLocal()
        user = User(
            first_name=first_name,
            last_name=last_name,
            user_name=user_name,
            password=hasher.hash(password),
        )
        if user_id is not None:
            user.id = user_id
        session.add(user)
        session.commit()
        session.refresh(user)
        session.close()
        return user

    return _seed


@pytest.fixture
def load_user(test_app_client) -> Callable[[int], User | None]:
    """Read a user back from the database with a fresh session."""
    _, TestingSessionLocal = test_app_client

    def _load(user_id: int) -> User | None:
        session = TestingSessionLocal()
        try:
            return session.get(User, user_id)
        finally:
            session.close()

    return _load


@pytest.fixture
def auth_headers() -> Callable[[int | str], dict[str, str]]:
    """Build an Authorization header carrying a token for the given user id."""

    def _headers(user_id: int | str) -> dict[str, str]:
        return {"Authorization": f"Bearer {create_user_token(user_id)}"}

    return _headers
