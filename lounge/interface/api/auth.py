"""Bearer token handling for API routes."""

from fastapi import Header, HTTPException, status

from lounge.domain.service import JWTService
from lounge.domain.value import AuthenticatedUser


def bearer_token(authorization: str | None = Header(default=None)) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def require_user(
    jwt_service: JWTService, token: str | None, action: str
) -> AuthenticatedUser:
    """Resolve the caller or fail the request with 401.

    Args:
        jwt_service: JWT service for token verification
        token: Bearer token from the request (optional)
        action: Description of the attempted action, for the error message

    Returns:
        Authenticated caller

    Raises:
        HTTPException: 401 if the token is missing or invalid
    """
    user = jwt_service.get_user_from_token(token)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user
