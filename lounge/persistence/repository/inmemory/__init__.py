"""Dict-backed repositories used by the unit and e2e tests."""

from .comment import InMemoryCommentRepository
from .notification import InMemoryNotificationRepository
from .post import InMemoryPostRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryNotificationRepository",
    "InMemoryPostRepository",
]
