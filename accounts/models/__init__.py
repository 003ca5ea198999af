"""
SQLAlchemy models for the profile service.

Usage:
    from accounts.models import User
"""

from .base import Base
from .user import NAME_MAX_LENGTH, PROFILE_FIELDS, User

__all__ = [
    "Base",
    "User",
    "NAME_MAX_LENGTH",
    "PROFILE_FIELDS",
]
