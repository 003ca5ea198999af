"""
Repository pattern implementations for data access.

Usage:
    from accounts.repositories import UserRepository
    from accounts.db import db

    with db.session() as session:
        repo = UserRepository(session)
        user = repo.get_by_id(user_id)
"""

from .base import BaseRepository
from .user_repository import (
    FieldError,
    SaveErrorKind,
    SaveResult,
    UserRepository,
    classify_integrity_error,
)

__all__ = [
    "BaseRepository",
    "UserRepository",
    "SaveErrorKind",
    "SaveResult",
    "FieldError",
    "classify_integrity_error",
]
