"""Notification repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from lounge.domain.model.notification import Notification
from lounge.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Repository for Notification entity."""

    @abstractmethod
    async def save(self, notification: Notification) -> Notification:
        """Persist a notification.

        Implementations backed by a store without a notifications table
        accept and drop the notification.

        Args:
            notification: The notification to save

        Returns:
            The saved notification
        """
        pass

    @abstractmethod
    async def find_by_user(self, user_id: UserId, limit: int = 30) -> List[Notification]:
        """Find a user's notifications, newest first.

        Args:
            user_id: Recipient user ID
            limit: Maximum number of notifications to return

        Returns:
            List of notifications
        """
        pass

    @abstractmethod
    async def mark_read(
        self, user_id: UserId, notification_id: Optional[NotificationId] = None
    ) -> int:
        """Mark one or all of a user's unread notifications as read.

        Args:
            user_id: Recipient user ID
            notification_id: Single notification to mark (None marks all)

        Returns:
            Number of notifications updated
        """
        pass
