"""
Pydantic schemas for request and response validation.

JSON bodies use camelCase keys; Python attributes stay snake_case.
"""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class UserResponse(BaseModel):
    """Public view of a user. The password hash is never serialized."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    first_name: str = Field(serialization_alias="firstName")
    last_name: str = Field(serialization_alias="lastName")
    user_name: str = Field(serialization_alias="userName")
    created_at: datetime | None = Field(default=None, serialization_alias="createdAt")
    updated_at: datetime | None = Field(default=None, serialization_alias="updatedAt")

    def to_json(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class UserUpdateRequest(BaseModel):
    """
    Body of PUT /editUser/{id}.

    Values are accepted untyped; missing or mistyped values reach the store
    and are rejected by its field rules.
    """

    model_config = ConfigDict(populate_by_name=True)

    first_name: Any = Field(default=None, alias="firstName")
    last_name: Any = Field(default=None, alias="lastName")
    user_name: Any = Field(default=None, alias="userName")
    password: Any = None

    @classmethod
    def from_body(cls, body: Any) -> "UserUpdateRequest":
        """Read the request body; anything but a JSON object counts as empty."""
        return cls.model_validate(body if isinstance(body, dict) else {})


class LoginRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    user_name: str | None = Field(default=None, alias="userName")
    password: str | None = None
