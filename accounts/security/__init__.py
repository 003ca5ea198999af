"""
Security helpers for the profile service.

Provides:
- Password hashing (bcrypt)
"""

from .passwords import (
    MAX_PASSWORD_BYTES,
    PasswordHasher,
    PasswordPolicyError,
    get_password_hasher,
)

__all__ = [
    "MAX_PASSWORD_BYTES",
    "PasswordHasher",
    "PasswordPolicyError",
    "get_password_hasher",
]
