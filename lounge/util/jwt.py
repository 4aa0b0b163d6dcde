"""JWT token utilities."""

from datetime import datetime, timedelta, timezone

import jwt
from pydantic import BaseModel

from lounge.config import AuthSettings


class TokenPayload(BaseModel):
    """JWT token payload.

    ``sub`` carries the stable user id issued by the identity provider.
    """

    sub: str
    email: str | None = None
    exp: datetime


class JWTError(Exception):
    """JWT-related error."""

    pass


def create_token(
    user_id: str,
    settings: AuthSettings,
    email: str | None = None,
    expires_in: timedelta | None = None,
) -> str:
    """Create a signed JWT token for a user.

    Args:
        user_id: User ID (written to the ``sub`` claim)
        settings: Authentication settings
        email: Optional email claim
        expires_in: Override for the configured expiry

    Returns:
        Encoded JWT token
    """
    lifetime = expires_in if expires_in is not None else timedelta(
        days=settings.jwt_expiry_days
    )
    payload: dict = {
        "sub": user_id,
        "exp": datetime.now(timezone.utc) + lifetime,
    }
    if email:
        payload["email"] = email

    return jwt.encode(payload, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Verify and decode a JWT token.

    Args:
        token: JWT token to verify
        settings: Authentication settings

    Returns:
        Token payload if valid

    Raises:
        JWTError: If token is invalid or expired
    """
    try:
        payload = jwt.decode(
            token, settings.jwt_secret, algorithms=[settings.jwt_algorithm]
        )
        return TokenPayload(**payload)
    except jwt.ExpiredSignatureError:
        raise JWTError("Token has expired")
    except jwt.InvalidTokenError:
        raise JWTError("Invalid token")
