"""Base repository class shared by model repositories."""

from typing import Generic, TypeVar

from sqlalchemy.orm import Session

from accounts.db import Base

T = TypeVar("T", bound=Base)


class BaseRepository(Generic[T]):
    """
    Base repository holding the session and primary-key lookup.

    Usage:
        class UserRepository(BaseRepository[User]):
            model = User

        repo = UserRepository(session)
        user = repo.get_by_id(1)
    """

    model: type[T]

    def __init__(self, session: Session):
        self.session = session

    def get_by_id(self, id: int) -> T | None:
        """Get a single record by primary key."""
        return self.session.get(self.model, id)
