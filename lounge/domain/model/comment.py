"""Comment entity.

Comments are threaded discussions on posts. Threading is stored as a single
parent reference per comment; depth is derived by walking the parent chain,
never stored.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from lounge.domain.model.common import DomainModel
from lounge.domain.value import CommentId, PostId, UserId
from lounge.domain.value.types import COMMENT_BODY_MAX_LENGTH


class Comment(DomainModel):
    """Comment entity.

    Represents a comment on a post or a reply to another comment.

    - id: Generated by the writer before the insert, so it is known even
      before the store acknowledges the write
    - parent_id: Direct parent comment (None for top-level), never re-parented
    - created_at: Sole ordering key between siblings (ascending)
    """

    id: CommentId
    post_id: PostId
    author_id: UserId
    body: str = Field(min_length=1, max_length=COMMENT_BODY_MAX_LENGTH)
    parent_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: Optional[datetime] = None


class CommentLink(DomainModel):
    """The part of a comment needed to walk its ancestor chain."""

    id: CommentId
    post_id: PostId
    parent_id: Optional[CommentId] = None
