"""
SQLAlchemy ORM models for the backend.

Re-exports the models from accounts.models.
"""

from accounts.models import Base, User

__all__ = ["Base", "User"]
