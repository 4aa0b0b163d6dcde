"""Post repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from lounge.domain.model.post import Post
from lounge.domain.value import PostId


class PostRepository(ABC):
    """Posts as far as the comment engine needs them.

    Comments only need to know that a post exists and who wrote it; the
    post itself is authored elsewhere. ``save`` exists for seeding and
    tooling.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID.

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Insert the post, or overwrite the stored one with the same ID."""

    @abstractmethod
    async def delete(self, post_id: PostId) -> bool:
        """Hard-delete a post.

        Comments are not touched; callers remove them first.

        Returns:
            Whether a post was removed
        """
