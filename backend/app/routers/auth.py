"""
Authentication router.

Exchanges a user name and password for the bearer token consumed by
get_caller_identity.
"""

from fastapi import APIRouter, Depends

from accounts.repositories import UserRepository
from accounts.security import PasswordHasher

from ..auth.jwt import create_user_token
from ..dependencies import get_password_hasher, get_user_repository
from ..schemas import LoginRequest, UserResponse
from ..services import user_service

router = APIRouter(tags=["auth"])

LOGIN_SUCCESS_MESSAGE = "L'utilisateur a été connecté avec succès."


@router.post("/login")
def login(
    payload: LoginRequest,
    repo: UserRepository = Depends(get_user_repository),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """Issue an access token for valid credentials."""
    user = user_service.authenticate(repo, hasher, payload)
    return {
        "message": LOGIN_SUCCESS_MESSAGE,
        "token": create_user_token(user.id),
        "data": UserResponse.model_validate(user).to_json(),
    }
