"""Configuration providers."""

from dishka import Scope, provide

from lounge.config import AuthSettings, CommentSettings, Settings
from lounge.util.di.base import ProviderBase


class ProdConfigProvider(ProviderBase):
    """Settings and the slices of it that services depend on.

    Settings are read from the environment (and ``.env``) once, on first
    use, and shared for the lifetime of the container.
    """

    scope = Scope.APP

    @provide
    def provide_settings(self) -> Settings:
        return Settings()

    @provide
    def provide_auth_settings(self, settings: Settings) -> AuthSettings:
        """Token verification and admin list."""
        return settings.auth

    @provide
    def provide_comment_settings(self, settings: Settings) -> CommentSettings:
        """Depth limit, list size and comments layout."""
        return settings.comments
