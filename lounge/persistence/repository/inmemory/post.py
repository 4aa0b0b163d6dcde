"""In-memory post repository for testing."""

from typing import Optional

from lounge.domain.model.post import Post
from lounge.domain.repository.post import PostRepository
from lounge.domain.value import PostId


class InMemoryPostRepository(PostRepository):
    """Posts kept in a dict keyed by ID."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        return self._posts.get(post_id)

    async def save(self, post: Post) -> Post:
        self._posts[post.id] = post
        return post

    async def delete(self, post_id: PostId) -> bool:
        return self._posts.pop(post_id, None) is not None
