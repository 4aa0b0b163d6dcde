"""Notification use cases."""

from .get_notifications import (
    GetNotificationsRequest,
    GetNotificationsResponse,
    GetNotificationsUseCase,
    MarkNotificationsReadRequest,
    MarkNotificationsReadResponse,
    MarkNotificationsReadUseCase,
    NotificationItem,
)

__all__ = [
    "GetNotificationsRequest",
    "GetNotificationsResponse",
    "GetNotificationsUseCase",
    "MarkNotificationsReadRequest",
    "MarkNotificationsReadResponse",
    "MarkNotificationsReadUseCase",
    "NotificationItem",
]
