"""User repository for account lookup and profile persistence."""

import re
from dataclasses import dataclass, field
from enum import Enum

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from accounts.logging import get_logger
from accounts.models import PROFILE_FIELDS, User

from .base import BaseRepository

logger = get_logger("repository.user")

# SQLSTATE codes reported by PostgreSQL drivers
UNIQUE_VIOLATION = "23505"
NOT_NULL_VIOLATION = "23502"

_COLUMN_PATTERNS = (
    re.compile(r"constraint failed: \w+\.(\w+)"),  # SQLite
    re.compile(r"Key \((\w+)\)"),  # PostgreSQL unique
    re.compile(r'column "(\w+)"'),  # PostgreSQL not null
)


class SaveErrorKind(str, Enum):
    """Outcome of a write to the user store."""

    OK = "ok"
    VALIDATION = "validation"
    CONFLICT = "conflict"
    UNEXPECTED = "unexpected"


@dataclass
class FieldError:
    field: str | None
    message: str


@dataclass
class SaveResult:
    """Tagged result of UserRepository.save."""

    kind: SaveErrorKind
    user: User | None = None
    message: str = ""
    errors: list[FieldError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.kind is SaveErrorKind.OK

    def detail(self) -> dict:
        """Client-safe description of the failure."""
        if self.kind is SaveErrorKind.UNEXPECTED:
            return {"kind": self.kind.value}
        return {
            "kind": self.kind.value,
            "errors": [{"field": e.field, "message": e.message} for e in self.errors],
        }

    @classmethod
    def validation(cls, errors: list[FieldError]) -> "SaveResult":
        message = "Erreur de validation : " + " ".join(e.message for e in errors)
        return cls(kind=SaveErrorKind.VALIDATION, message=message, errors=errors)


def _public_field(column: str | None) -> str | None:
    if column is None:
        return None
    public = PROFILE_FIELDS.get(column)
    if public:
        return public[0]
    return "passwordHash" if column == "password" else column


def _column_from_error(exc: IntegrityError) -> str | None:
    text = str(exc.orig)
    for pattern in _COLUMN_PATTERNS:
        match = pattern.search(text)
        if match:
            return match.group(1)
    return None


def classify_integrity_error(exc: IntegrityError) -> SaveResult:
    """Map a driver integrity error onto a conflict or validation result."""
    orig = exc.orig
    code = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    text = str(orig).lower()
    column = _public_field(_column_from_error(exc))

    if code == UNIQUE_VIOLATION or "unique" in text:
        label = column or "valeur"
        message = f"La valeur du champ {label} est déjà utilisée."
        return SaveResult(
            kind=SaveErrorKind.CONFLICT,
            message=message,
            errors=[FieldError(field=column, message=message)],
        )

    if code == NOT_NULL_VIOLATION or "not null" in text:
        message = f"Le champ {column or 'requis'} est obligatoire."
    else:
        message = "Une contrainte de la base de données n'est pas respectée."
    return SaveResult.validation([FieldError(field=column, message=message)])


class UserRepository(BaseRepository[User]):
    """Repository for User operations."""

    model = User

    def get_by_user_name(self, user_name: str) -> User | None:
        """Get user by user name."""
        return self.session.query(User).filter(User.user_name == user_name).first()

    def save(self, user: User) -> SaveResult:
        """
        Validate and persist a user, committing on success.

        Field rules are checked before the write; integrity errors raised by
        the database are classified into CONFLICT or VALIDATION. Any failure
        rolls the session back so no partial change is visible.

        Returns:
            SaveResult tagged with the outcome kind
        """
        errors = [FieldError(field=f, message=m) for f, m in user.validation_errors()]
        if errors:
            self.session.rollback()
            return SaveResult.validation(errors)

        try:
            self.session.add(user)
            self.session.flush()
            self.session.commit()
        except IntegrityError as exc:
            self.session.rollback()
            result = classify_integrity_error(exc)
            logger.info(
                "user_save_rejected",
                user_id=user.id,
                kind=result.kind.value,
                field=result.errors[0].field if result.errors else None,
            )
            return result
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception(
                "user_save_failed",
                user_id=user.id,
                error=str(exc),
                error_type=type(exc).__name__,
            )
            return SaveResult(kind=SaveErrorKind.UNEXPECTED, message=str(exc))

        return SaveResult(kind=SaveErrorKind.OK, user=user)
