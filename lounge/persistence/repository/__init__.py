"""SQL repository implementations."""

from lounge.persistence.repository.comment import (
    PostgresCommentRepository,
    PostgresFlatCommentRepository,
    UnavailableCommentRepository,
    build_comment_repository,
)
from lounge.persistence.repository.notification import (
    DisabledNotificationRepository,
    PostgresNotificationRepository,
    build_notification_repository,
)
from lounge.persistence.repository.post import PostgresPostRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresFlatCommentRepository",
    "UnavailableCommentRepository",
    "build_comment_repository",
    "DisabledNotificationRepository",
    "PostgresNotificationRepository",
    "build_notification_repository",
    "PostgresPostRepository",
]
