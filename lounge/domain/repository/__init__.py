"""Repository interfaces for the Lounge domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from lounge.domain.repository.comment import CommentRepository
from lounge.domain.repository.notification import NotificationRepository
from lounge.domain.repository.post import PostRepository

__all__ = [
    "CommentRepository",
    "NotificationRepository",
    "PostRepository",
]
