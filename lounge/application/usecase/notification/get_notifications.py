"""Notification use cases."""

from datetime import datetime

from pydantic import BaseModel

from lounge.domain.service import NotificationService
from lounge.domain.value import NotificationId, UserId

from ..common import parse_uuid


class NotificationItem(BaseModel):
    """Notification item in response."""

    id: str
    type: str
    post_id: str | None
    comment_id: str | None
    is_read: bool
    created_at: datetime


class GetNotificationsRequest(BaseModel):
    """Get notifications request."""

    user_id: str  # Authenticated user ID
    limit: int = 50


class GetNotificationsResponse(BaseModel):
    """Get notifications response."""

    notifications: list[NotificationItem]


class GetNotificationsUseCase:
    """Use case for listing the caller's notifications, newest first."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(self, request: GetNotificationsRequest) -> GetNotificationsResponse:
        """Execute get notifications flow."""
        user_id = UserId(parse_uuid(request.user_id, "user_id"))
        notifications = await self.notification_service.get_notifications(
            user_id, limit=request.limit
        )
        return GetNotificationsResponse(
            notifications=[
                NotificationItem(
                    id=str(n.id),
                    type=n.type.value,
                    post_id=str(n.post_id) if n.post_id else None,
                    comment_id=str(n.comment_id) if n.comment_id else None,
                    is_read=n.is_read,
                    created_at=n.created_at,
                )
                for n in notifications
            ]
        )


class MarkNotificationsReadRequest(BaseModel):
    """Mark notifications read request."""

    user_id: str  # Authenticated user ID
    notification_id: str | None = None  # None marks every unread notification


class MarkNotificationsReadResponse(BaseModel):
    """Mark notifications read response."""

    updated: int


class MarkNotificationsReadUseCase:
    """Use case for marking one or all of the caller's notifications read."""

    def __init__(self, notification_service: NotificationService) -> None:
        self.notification_service = notification_service

    async def execute(
        self, request: MarkNotificationsReadRequest
    ) -> MarkNotificationsReadResponse:
        """Execute mark notifications read flow.

        Raises:
            ValidationError: If an identifier is malformed
        """
        user_id = UserId(parse_uuid(request.user_id, "user_id"))
        notification_id = (
            NotificationId(parse_uuid(request.notification_id, "notification_id"))
            if request.notification_id
            else None
        )
        updated = await self.notification_service.mark_read(user_id, notification_id)
        return MarkNotificationsReadResponse(updated=updated)
