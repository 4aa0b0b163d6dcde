"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from uuid import uuid4

import logfire
import pytest

from lounge.domain.model import Comment, Post
from lounge.domain.value import CommentId, PostId, UserId

# Keep test output free of console spans and never ship telemetry
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2025, 1, 1, 12, 0, 0)


def make_post(author_id: UserId | None = None, post_id: PostId | None = None) -> Post:
    """Build a post for tests."""
    return Post(
        id=post_id or PostId(uuid4()),
        author_id=author_id or UserId(uuid4()),
        title="Test Post",
        body="Test content",
        created_at=BASE_TIME,
    )


def make_comment(
    post_id: PostId,
    parent_id: CommentId | None = None,
    author_id: UserId | None = None,
    minutes: int = 0,
    comment_id: CommentId | None = None,
    body: str = "Test comment",
) -> Comment:
    """Build a comment for tests.

    ``minutes`` offsets created_at from a fixed base time so ordering is
    deterministic.
    """
    return Comment(
        id=comment_id or CommentId(uuid4()),
        post_id=post_id,
        author_id=author_id or UserId(uuid4()),
        body=body,
        parent_id=parent_id,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )


async def plant_chain(repository, post_id: PostId, length: int) -> list[Comment]:
    """Insert a root and nested replies so the last comment is at depth ``length``."""
    chain: list[Comment] = []
    parent_id = None
    for i in range(length):
        comment = make_comment(post_id, parent_id=parent_id, minutes=i)
        await repository.insert(comment)
        chain.append(comment)
        parent_id = comment.id
    return chain


@pytest.fixture
def post_id() -> PostId:
    """Fresh post ID."""
    return PostId(uuid4())
