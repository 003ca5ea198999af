"""
Password hashing with bcrypt.

Hashes embed their own salt and cost, so verification never needs the
configured cost; only new hashes use it.
"""

from functools import lru_cache

import bcrypt

from accounts.config import get_settings

# bcrypt only considers the first 72 bytes of its input
MAX_PASSWORD_BYTES = 72


class PasswordPolicyError(ValueError):
    """Raised when a password cannot be hashed."""


class PasswordHasher:
    """One-way hash and compare for user passwords."""

    def __init__(self, rounds: int = 10):
        self.rounds = rounds

    def hash(self, plaintext: str) -> str:
        """
        Hash a password with a fresh random salt.

        Raises:
            PasswordPolicyError: If the password is longer than bcrypt accepts.
        """
        encoded = plaintext.encode("utf-8")
        if len(encoded) > MAX_PASSWORD_BYTES:
            raise PasswordPolicyError(
                f"Le mot de passe ne peut pas dépasser {MAX_PASSWORD_BYTES} octets."
            )
        return bcrypt.hashpw(encoded, bcrypt.gensalt(rounds=self.rounds)).decode("ascii")

    def verify(self, plaintext: str, hashed: str) -> bool:
        """Return True when plaintext matches the stored hash."""
        encoded = plaintext.encode("utf-8")
        if not hashed or len(encoded) > MAX_PASSWORD_BYTES:
            return False
        try:
            return bcrypt.checkpw(encoded, hashed.encode("ascii"))
        except ValueError:
            # Stored value is not a bcrypt hash
            return False


@lru_cache
def get_password_hasher() -> PasswordHasher:
    """Get the hasher configured from settings."""
    return PasswordHasher(rounds=get_settings().password_hash_rounds)
