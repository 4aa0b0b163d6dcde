"""Application layer DI providers."""

from dishka import Scope, provide

from lounge.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    GetCommentsUseCase,
    UpdateCommentUseCase,
)
from lounge.application.usecase.notification import (
    GetNotificationsUseCase,
    MarkNotificationsReadUseCase,
)
from lounge.application.usecase.post import DeletePostUseCase
from lounge.config import CommentSettings
from lounge.domain.service import (
    CommentService,
    NotificationService,
    PostService,
    ThreadService,
)
from lounge.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        post_service: PostService,
        notification_service: NotificationService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            post_service=post_service,
            notification_service=notification_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comments_use_case(
        self,
        comment_service: CommentService,
        thread_service: ThreadService,
        comment_settings: CommentSettings,
    ) -> GetCommentsUseCase:
        """Provide get comments use case."""
        return GetCommentsUseCase(
            comment_service=comment_service,
            thread_service=thread_service,
            default_limit=comment_settings.list_limit,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self, comment_service: CommentService
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    # Post use cases
    @provide(scope=Scope.REQUEST)
    def get_delete_post_use_case(self, post_service: PostService) -> DeletePostUseCase:
        """Provide delete post use case."""
        return DeletePostUseCase(post_service=post_service)

    # Notification use cases
    @provide(scope=Scope.REQUEST)
    def get_get_notifications_use_case(
        self, notification_service: NotificationService
    ) -> GetNotificationsUseCase:
        """Provide get notifications use case."""
        return GetNotificationsUseCase(notification_service=notification_service)

    @provide(scope=Scope.REQUEST)
    def get_mark_notifications_read_use_case(
        self, notification_service: NotificationService
    ) -> MarkNotificationsReadUseCase:
        """Provide mark notifications read use case."""
        return MarkNotificationsReadUseCase(notification_service=notification_service)
