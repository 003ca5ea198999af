"""
FastAPI dependency injection module.

Provides centralized dependencies for:
- Repositories
- Password hashing
- Authorization checks that must run before the request body is read
"""

from fastapi import Depends
from sqlalchemy.orm import Session

from accounts.repositories import UserRepository
from accounts.security import PasswordHasher, get_password_hasher as _configured_hasher

from ..auth.dependencies import CallerIdentity, get_caller_identity
from ..database import get_db
from ..services.user_service import authorize_self_edit

# =============================================================================
# Repository Dependencies
# =============================================================================


def get_user_repository(db: Session = Depends(get_db)) -> UserRepository:
    """Get UserRepository instance."""
    return UserRepository(db)


# =============================================================================
# Security Dependencies
# =============================================================================


def get_password_hasher() -> PasswordHasher:
    """Get the configured password hasher. Tests override this with a cheap cost."""
    return _configured_hasher()


def require_self_edit(
    user_id: str,
    caller: CallerIdentity | None = Depends(get_caller_identity),
) -> int:
    """
    Resolve the path user id once the caller is known to be that user.

    Dependencies are solved before the body is validated, so a foreign edit
    is refused with 401 whatever the body holds.
    """
    return authorize_self_edit(caller, user_id)


__all__ = [
    "get_user_repository",
    "get_password_hasher",
    "require_self_edit",
]
