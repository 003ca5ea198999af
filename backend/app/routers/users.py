"""
User account endpoints.

Only self-service edits are allowed: the token subject must match the
user id in the path.
"""

from typing import Any

from fastapi import APIRouter, Body, Depends

from accounts.repositories import UserRepository
from accounts.security import PasswordHasher

from ..dependencies import get_password_hasher, get_user_repository, require_self_edit
from ..schemas import UserResponse, UserUpdateRequest
from ..services import user_service

router = APIRouter(tags=["users"])


@router.put("/editUser/{user_id}")
def edit_user(
    target_id: int = Depends(require_self_edit),
    body: Any = Body(default=None),
    repo: UserRepository = Depends(get_user_repository),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    """
    Edit the caller's own profile.

    The body is read without type checks; the store's field rules turn a
    missing or mistyped value into a 400.
    """
    payload = UserUpdateRequest.from_body(body)
    user = user_service.edit_user(repo, hasher, target_id, payload)
    return {
        "message": user_service.edited_message(user.user_name),
        "data": UserResponse.model_validate(user).to_json(),
    }
