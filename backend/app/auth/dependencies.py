"""
Authentication dependencies for FastAPI routes.

The authenticator only establishes who is calling. It never loads the user
record; routes decide what the caller may do with the identity.
"""

from dataclasses import dataclass

from fastapi import Depends, HTTPException, status
from fastapi.security import OAuth2PasswordBearer

from .jwt import decode_access_token

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="login", auto_error=False)

MISSING_TOKEN_MESSAGE = "Vous n'avez pas fourni de jeton d'authentification. Ajoutez-en un dans l'en-tête de la requête."
INVALID_TOKEN_MESSAGE = "L'utilisateur n'est pas autorisé à accéder à cette ressource."


@dataclass(frozen=True)
class CallerIdentity:
    """Authenticated caller, as carried by the token subject."""

    user_id: str


def get_caller_identity(
    token: str | None = Depends(oauth2_scheme),
) -> CallerIdentity | None:
    """
    Resolve the caller identity from a bearer token.

    Steps:
    1) Reject requests without a bearer token.
    2) Decode the JWT, rejecting bad signatures and expired tokens.
    3) Return the subject claim as the identity, or None if the token has none.
    """
    if not token:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=MISSING_TOKEN_MESSAGE,
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = decode_access_token(token)
    except ValueError:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=INVALID_TOKEN_MESSAGE,
            headers={"WWW-Authenticate": "Bearer"},
        ) from None

    subject = payload.get("sub")
    if subject is None:
        return None
    return CallerIdentity(user_id=str(subject))
