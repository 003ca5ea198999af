"""
Domain errors raised by services and rendered by error_handlers.

Each error carries the HTTP status it maps to, a client-facing message and an
optional sanitized payload returned under "data".
"""

from typing import Any

from fastapi import status


class ApiError(Exception):
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, data: Any = None):
        super().__init__(message)
        self.message = message
        self.data = data

    def to_payload(self) -> dict:
        payload: dict[str, Any] = {"message": self.message}
        if self.data is not None:
            payload["data"] = self.data
        return payload


class AuthorizationDenied(ApiError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFound(ApiError):
    status_code = status.HTTP_404_NOT_FOUND


class BadRequest(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST


class ValidationFailed(BadRequest):
    pass


class ConflictDuplicate(BadRequest):
    pass


class Unexpected(ApiError):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR


__all__ = [
    "ApiError",
    "AuthorizationDenied",
    "NotFound",
    "BadRequest",
    "ValidationFailed",
    "ConflictDuplicate",
    "Unexpected",
]
