"""Typed identifiers for Lounge entities.

All identifiers are UUIDs; the NewType wrappers keep a comment id from
being passed where a post or user id is expected.
"""

from typing import NewType
from uuid import UUID

UserId = NewType("UserId", UUID)  # "sub" claim of the identity provider's token
PostId = NewType("PostId", UUID)
CommentId = NewType("CommentId", UUID)  # Generated by the writer before insert
NotificationId = NewType("NotificationId", UUID)
