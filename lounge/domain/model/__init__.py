"""Domain model entities for Lounge."""

from lounge.domain.model.comment import Comment, CommentLink
from lounge.domain.model.notification import Notification
from lounge.domain.model.post import Post
from lounge.domain.model.thread import ThreadNode

__all__ = [
    "Comment",
    "CommentLink",
    "Notification",
    "Post",
    "ThreadNode",
]
