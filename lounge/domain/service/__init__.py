"""Domain services."""

from .comment_service import CommentService
from .jwt_service import JWTService
from .notification_service import NotificationService
from .post_service import PostService
from .thread_integrity_service import ThreadIntegrityService
from .thread_service import ThreadService

__all__ = [
    "CommentService",
    "JWTService",
    "NotificationService",
    "PostService",
    "ThreadIntegrityService",
    "ThreadService",
]
