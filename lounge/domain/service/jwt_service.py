"""JWT token domain service."""

from uuid import UUID

import logfire

from lounge.config import AuthSettings
from lounge.domain.value import AuthenticatedUser, UserId
from lounge.util.jwt import JWTError, TokenPayload, verify_token


class JWTService:
    """Domain service for verifying bearer tokens."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                payload = verify_token(token, self.auth_settings)
                logfire.info("JWT token verified", user_id=payload.sub)
                return payload
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_user_from_token(self, token: str | None) -> AuthenticatedUser | None:
        """Resolve the caller from a token without raising.

        Args:
            token: JWT token string (optional)

        Returns:
            Authenticated user if the token is valid, None otherwise
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            user_id = UserId(UUID(payload.sub))
        except (JWTError, ValueError) as e:
            # Invalid or expired token, or a subject that is not a UUID
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None

        return AuthenticatedUser(
            id=user_id,
            email=payload.email,
            is_admin=self.auth_settings.is_admin_email(payload.email),
        )
