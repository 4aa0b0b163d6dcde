"""Notification entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from lounge.domain.model.common import DomainModel
from lounge.domain.value import (
    CommentId,
    NotificationId,
    NotificationType,
    PostId,
    UserId,
)


class Notification(DomainModel):
    """Notification delivered to a user about activity on their content."""

    id: NotificationId
    user_id: UserId
    actor_user_id: Optional[UserId] = None
    type: NotificationType
    post_id: Optional[PostId] = None
    comment_id: Optional[CommentId] = None
    is_read: bool = False
    created_at: datetime = Field(default_factory=datetime.now)
