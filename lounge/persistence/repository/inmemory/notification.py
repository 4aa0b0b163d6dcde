"""In-memory notification repository for testing."""

from typing import Optional

from lounge.domain.model.notification import Notification
from lounge.domain.repository.notification import NotificationRepository
from lounge.domain.value import NotificationId, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._notifications: dict[NotificationId, Notification] = {}

    async def save(self, notification: Notification) -> Notification:
        """Save a notification."""
        self._notifications[notification.id] = notification
        return notification

    async def find_by_user(self, user_id: UserId, limit: int = 30) -> list[Notification]:
        """Find a user's notifications, newest first."""
        notifications = [
            n for n in self._notifications.values() if n.user_id == user_id
        ]
        notifications.sort(key=lambda n: n.created_at, reverse=True)
        return notifications[:limit]

    async def mark_read(
        self, user_id: UserId, notification_id: Optional[NotificationId] = None
    ) -> int:
        """Mark one or all unread notifications of a user as read."""
        updated = 0
        for nid, n in list(self._notifications.items()):
            if n.user_id != user_id or n.is_read:
                continue
            if notification_id is not None and nid != notification_id:
                continue
            self._notifications[nid] = n.model_copy(update={"is_read": True})
            updated += 1
        return updated
