"""
User-related SQLAlchemy models.
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base

NAME_MAX_LENGTH = 255

# Attribute name -> (public field name, label used in messages)
PROFILE_FIELDS = {
    "first_name": ("firstName", "prénom"),
    "last_name": ("lastName", "nom"),
    "user_name": ("userName", "nom d'utilisateur"),
}


class User(Base):
    """
    User account editable through the profile endpoints.

    Attributes:
        first_name: Given name
        last_name: Family name
        user_name: Unique login name
        password: bcrypt hash of the user's password, never the plaintext
    """

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    first_name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    last_name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), nullable=False)
    user_name: Mapped[str] = mapped_column(String(NAME_MAX_LENGTH), unique=True, index=True, nullable=False)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime, default=lambda: datetime.now(timezone.utc)
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    def validation_errors(self) -> list[tuple[str, str]]:
        """
        Check the field rules the store enforces before writing.

        Returns:
            List of (public field name, message) pairs, empty when valid.
        """
        errors = []
        for attr, (field, label) in PROFILE_FIELDS.items():
            value = getattr(self, attr)
            if value is None:
                errors.append((field, f"Le {label} est obligatoire."))
            elif not isinstance(value, str):
                errors.append((field, f"Le {label} doit être une chaîne de caractères."))
            elif not value.strip():
                errors.append((field, f"Le {label} ne peut pas être vide."))
            elif len(value) > NAME_MAX_LENGTH:
                errors.append(
                    (field, f"Le {label} ne peut pas dépasser {NAME_MAX_LENGTH} caractères.")
                )
        return errors

    def __repr__(self) -> str:
        return f"<User id={self.id} user_name={self.user_name!r}>"
