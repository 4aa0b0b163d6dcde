"""Assembled comment thread."""

from pydantic import Field

from lounge.domain.model.comment import Comment
from lounge.domain.model.common import DomainModel


class ThreadNode(DomainModel):
    """A comment placed in its reply tree.

    depth counts from 1 at the root. can_reply is False once depth has
    reached the configured maximum.
    """

    comment: Comment
    depth: int = Field(ge=1)
    can_reply: bool
    replies: list["ThreadNode"] = []
