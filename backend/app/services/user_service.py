"""
User account service functions: self-service profile edits and login.
"""

import re

from accounts.logging import get_logger
from accounts.repositories import SaveErrorKind, UserRepository
from accounts.security import PasswordHasher, PasswordPolicyError

from ..auth.dependencies import CallerIdentity
from ..exceptions import (
    AuthorizationDenied,
    BadRequest,
    ConflictDuplicate,
    NotFound,
    Unexpected,
    ValidationFailed,
)
from ..models import User
from ..schemas import LoginRequest, UserUpdateRequest

logger = get_logger("service.user")

EDIT_FORBIDDEN_MESSAGE = "L'utilisateur n'est pas autorisé à modifier ce compte."
USER_GONE_MESSAGE = "L'utilisateur demandé n'existe plus."
EDIT_FAILED_MESSAGE = "L'utilisateur n'a pas pu être modifié. Réessayez dans quelques instants."

LOGIN_MISSING_FIELDS_MESSAGE = "Le nom d'utilisateur et le mot de passe sont obligatoires."
LOGIN_UNKNOWN_USER_MESSAGE = "L'utilisateur demandé n'existe pas."
LOGIN_WRONG_PASSWORD_MESSAGE = "Le mot de passe est incorrect."
PASSWORD_TYPE_MESSAGE = "Le mot de passe doit être une chaîne de caractères."

_USER_ID_PATTERN = re.compile(r"-?[0-9]+")


def edited_message(user_name: str) -> str:
    return f"L'utilisateur {user_name} a bien été modifié."


def parse_user_id(raw: str | int | None) -> int | None:
    """Parse a user id, returning None when it is not a plain integer."""
    if raw is None:
        return None
    if isinstance(raw, int):
        return raw
    if not _USER_ID_PATTERN.fullmatch(raw):
        return None
    return int(raw)


def authorize_self_edit(caller: CallerIdentity | None, target_id: str | int) -> int:
    """
    Check that the caller is editing their own account.

    Returns:
        The target user id as an integer

    Raises:
        AuthorizationDenied: If there is no caller, or the caller is someone else.
    """
    if caller is None:
        logger.warning("user_update_rejected", reason="no_identity", target_id=str(target_id))
        raise AuthorizationDenied(EDIT_FORBIDDEN_MESSAGE)

    caller_id = parse_user_id(caller.user_id)
    parsed_target = parse_user_id(target_id)
    if caller_id is None or parsed_target is None or caller_id != parsed_target:
        logger.warning(
            "user_update_rejected",
            reason="identity_mismatch",
            caller_id=caller.user_id,
            target_id=str(target_id),
        )
        raise AuthorizationDenied(EDIT_FORBIDDEN_MESSAGE)
    return caller_id


def _password_error(message: str) -> ValidationFailed:
    return ValidationFailed(
        message,
        data={"kind": SaveErrorKind.VALIDATION.value, "errors": [{"field": "password", "message": message}]},
    )


def _new_password_hash(user: User, password: object, hasher: PasswordHasher) -> str | None:
    """
    Return a fresh hash when the submitted password differs from the stored one.

    Returns None when no password was submitted or it matches the current hash.
    """
    if password is None or password == "":
        return None
    if not isinstance(password, str):
        raise _password_error(PASSWORD_TYPE_MESSAGE)
    if hasher.verify(password, user.password):
        return None
    try:
        return hasher.hash(password)
    except PasswordPolicyError as exc:
        raise _password_error(str(exc)) from None


def edit_user(
    repo: UserRepository,
    hasher: PasswordHasher,
    user_id: int,
    payload: UserUpdateRequest,
) -> User:
    """
    Apply a self-service profile edit.

    user_id must already have passed authorize_self_edit. Name fields are
    overwritten as submitted; type and presence checks happen in the store.
    A submitted password is rehashed only when it differs from the current one.

    Raises:
        NotFound: Target user does not exist (404)
        ValidationFailed / ConflictDuplicate: Store rejected the write (400)
        Unexpected: Any other persistence failure (500)
    """
    user = repo.get_by_id(user_id)
    if user is None:
        logger.info("user_update_not_found", user_id=user_id)
        raise NotFound(USER_GONE_MESSAGE)

    new_hash = _new_password_hash(user, payload.password, hasher)

    user.first_name = payload.first_name
    user.last_name = payload.last_name
    user.user_name = payload.user_name
    if new_hash is not None:
        user.password = new_hash

    result = repo.save(user)

    if result.kind is SaveErrorKind.VALIDATION:
        raise ValidationFailed(result.message, data=result.detail())
    if result.kind is SaveErrorKind.CONFLICT:
        raise ConflictDuplicate(result.message, data=result.detail())
    if result.kind is SaveErrorKind.UNEXPECTED:
        logger.error("user_update_failed", user_id=user_id, error=result.message)
        raise Unexpected(EDIT_FAILED_MESSAGE, data=result.detail())

    if new_hash is not None:
        logger.info("password_rehashed", user_id=user_id)
    logger.info("user_updated", user_id=user_id, user_name=user.user_name)
    return user


def authenticate(
    repo: UserRepository,
    hasher: PasswordHasher,
    payload: LoginRequest,
) -> User:
    """
    Check a user name / password pair.

    Raises:
        BadRequest: A field is missing (400)
        NotFound: No user with that name (404)
        AuthorizationDenied: Wrong password (401)
    """
    if not payload.user_name or not payload.password:
        raise BadRequest(LOGIN_MISSING_FIELDS_MESSAGE)

    user = repo.get_by_user_name(payload.user_name)
    if user is None:
        logger.info("login_failed", reason="unknown_user")
        raise NotFound(LOGIN_UNKNOWN_USER_MESSAGE)

    if not hasher.verify(payload.password, user.password):
        logger.info("login_failed", reason="wrong_password", user_id=user.id)
        raise AuthorizationDenied(LOGIN_WRONG_PASSWORD_MESSAGE)

    logger.info("login_succeeded", user_id=user.id)
    return user
