"""Domain value objects for Lounge."""

from lounge.domain.value.identifiers import (
    CommentId,
    NotificationId,
    PostId,
    UserId,
)
from lounge.domain.value.types import (
    AuthenticatedUser,
    CommentBody,
    NotificationType,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "NotificationId",
    # Types
    "AuthenticatedUser",
    "CommentBody",
    "NotificationType",
]
