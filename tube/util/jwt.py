"""Access token encoding and verification with PyJWT."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel, ValidationError

from tube.config import AuthSettings


class TokenPayload(BaseModel):
    """Claims carried by an access token."""

    user_id: str
    handle: str
    exp: datetime


class JWTError(Exception):
    """Token could not be trusted (bad signature, expired, malformed claims)."""

    pass


def create_token(user_id: str, handle: str, settings: AuthSettings) -> str:
    """Sign an access token for a user.

    Args:
        user_id: User ID
        handle: User handle
        settings: Authentication settings

    Returns:
        Encoded JWT
    """
    issued_at = datetime.now(timezone.utc)
    claims = {
        "user_id": user_id,
        "handle": handle,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check a token's signature and expiry and return its claims.

    Args:
        token: Encoded JWT
        settings: Authentication settings

    Returns:
        Token payload

    Raises:
        JWTError: If the token is invalid, expired or lacks required claims
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["exp"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except jwt.InvalidTokenError as e:
        raise JWTError("Invalid token") from e

    try:
        return TokenPayload.model_validate(claims)
    except ValidationError as e:
        raise JWTError("Token is missing required claims") from e
