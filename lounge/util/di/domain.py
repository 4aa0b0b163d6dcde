"""Domain layer DI providers."""

from dishka import Scope, provide

from lounge.config import AuthSettings, CommentSettings
from lounge.domain.repository import (
    CommentRepository,
    NotificationRepository,
    PostRepository,
)
from lounge.domain.service import (
    CommentService,
    JWTService,
    NotificationService,
    PostService,
    ThreadIntegrityService,
    ThreadService,
)
from lounge.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_thread_integrity_service(
        self,
        comment_repository: CommentRepository,
        comment_settings: CommentSettings,
    ) -> ThreadIntegrityService:
        """Provide reply depth validator."""
        return ThreadIntegrityService(
            comment_repository=comment_repository,
            max_depth=comment_settings.max_depth,
        )

    @provide
    def get_thread_service(self, comment_settings: CommentSettings) -> ThreadService:
        """Provide thread assembly service."""
        return ThreadService(max_depth=comment_settings.max_depth)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        thread_integrity_service: ThreadIntegrityService,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            thread_integrity_service=thread_integrity_service,
        )

    @provide
    def get_post_service(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> PostService:
        """Provide post domain service."""
        return PostService(
            post_repository=post_repository,
            comment_repository=comment_repository,
        )

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(notification_repository=notification_repository)
