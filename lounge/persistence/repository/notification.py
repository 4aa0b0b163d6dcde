"""SQL implementations of the Notification repository."""

from typing import List, Optional

from sqlalchemy import desc, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from lounge.domain.model import Notification
from lounge.domain.repository import NotificationRepository
from lounge.domain.value import NotificationId, UserId
from lounge.persistence.mappers import notification_to_dict, row_to_notification
from lounge.persistence.schema import SchemaCapabilities
from lounge.persistence.tables import notifications_table


class PostgresNotificationRepository(NotificationRepository):
    """PostgreSQL implementation of NotificationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, notification: Notification) -> Notification:
        """Insert a notification."""
        stmt = insert(notifications_table).values(**notification_to_dict(notification))
        await self.session.execute(stmt)
        await self.session.flush()
        return notification

    async def find_by_user(self, user_id: UserId, limit: int = 30) -> List[Notification]:
        """Find a user's notifications, newest first."""
        stmt = (
            select(notifications_table)
            .where(notifications_table.c.user_id == user_id)
            .order_by(desc(notifications_table.c.created_at))
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_notification(row._asdict()) for row in result.fetchall()]

    async def mark_read(
        self, user_id: UserId, notification_id: Optional[NotificationId] = None
    ) -> int:
        """Mark one or all unread notifications of a user as read."""
        stmt = (
            update(notifications_table)
            .where(notifications_table.c.user_id == user_id)
            .where(notifications_table.c.is_read.is_(False))
            .values(is_read=True)
        )
        if notification_id is not None:
            stmt = stmt.where(notifications_table.c.id == notification_id)

        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0


class DisabledNotificationRepository(NotificationRepository):
    """NotificationRepository used when the notifications table does not exist.

    Notifications are a side channel of comment creation; without the table
    they are dropped so comments can still be written.
    """

    async def save(self, notification: Notification) -> Notification:
        return notification

    async def find_by_user(self, user_id: UserId, limit: int = 30) -> List[Notification]:
        return []

    async def mark_read(
        self, user_id: UserId, notification_id: Optional[NotificationId] = None
    ) -> int:
        return 0


def build_notification_repository(
    session: AsyncSession, capabilities: SchemaCapabilities
) -> NotificationRepository:
    """Select the notification adapter for the store's layout."""
    if not capabilities.notifications_table:
        return DisabledNotificationRepository()
    return PostgresNotificationRepository(session)
