"""Notification domain service."""

from uuid import uuid4

import logfire

from lounge.domain.model.notification import Notification
from lounge.domain.repository import NotificationRepository
from lounge.domain.value import (
    CommentId,
    NotificationId,
    NotificationType,
    PostId,
    UserId,
)


class NotificationService:
    """Routes comment activity to the users it concerns."""

    def __init__(self, notification_repository: NotificationRepository) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
        """
        self.notification_repository = notification_repository

    async def notify_comment(
        self,
        post_author_id: UserId,
        actor_id: UserId,
        post_id: PostId,
        comment_id: CommentId,
    ) -> Notification | None:
        """Tell a post's author about a new top-level comment."""
        return await self._notify(
            NotificationType.COMMENT, post_author_id, actor_id, post_id, comment_id
        )

    async def notify_reply(
        self,
        parent_author_id: UserId,
        actor_id: UserId,
        post_id: PostId,
        comment_id: CommentId,
    ) -> Notification | None:
        """Tell a comment's author about a reply to it."""
        return await self._notify(
            NotificationType.REPLY, parent_author_id, actor_id, post_id, comment_id
        )

    async def get_notifications(
        self, user_id: UserId, limit: int = 30
    ) -> list[Notification]:
        """Get a user's notifications, newest first."""
        with logfire.span(
            "notification_service.get_notifications", user_id=str(user_id)
        ):
            return await self.notification_repository.find_by_user(user_id, limit)

    async def mark_read(
        self, user_id: UserId, notification_id: NotificationId | None = None
    ) -> int:
        """Mark one notification, or all unread ones, as read for a user."""
        with logfire.span(
            "notification_service.mark_read",
            user_id=str(user_id),
            notification_id=str(notification_id) if notification_id else None,
        ):
            updated = await self.notification_repository.mark_read(
                user_id, notification_id
            )
            logfire.info(
                "Notifications marked read", user_id=str(user_id), count=updated
            )
            return updated

    async def _notify(
        self,
        notification_type: NotificationType,
        recipient_id: UserId,
        actor_id: UserId,
        post_id: PostId,
        comment_id: CommentId,
    ) -> Notification | None:
        # Nobody is notified about their own activity
        if recipient_id == actor_id:
            return None

        with logfire.span(
            "notification_service.notify",
            type=notification_type.value,
            recipient_id=str(recipient_id),
            comment_id=str(comment_id),
        ):
            notification = Notification(
                id=NotificationId(uuid4()),
                user_id=recipient_id,
                actor_user_id=actor_id,
                type=notification_type,
                post_id=post_id,
                comment_id=comment_id,
            )
            saved = await self.notification_repository.save(notification)
            logfire.info(
                "Notification created",
                type=notification_type.value,
                recipient_id=str(recipient_id),
            )
            return saved
