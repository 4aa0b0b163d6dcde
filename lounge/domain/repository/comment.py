"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from lounge.domain.model.comment import Comment, CommentLink
from lounge.domain.value import CommentId, PostId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Presents one logical interface over every supported physical layout of
    the comments table. Implementations must return identically shaped
    values whichever layout serves the request.
    """

    #: Whether the store can persist a comment's parent reference.
    supports_parent_link: bool = True

    @abstractmethod
    async def insert(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Exactly one row is written per call.

        Args:
            comment: The comment to insert (id already generated)

        Returns:
            The inserted comment

        Raises:
            SchemaIncompatibleError: If the comment has a parent_id and the
                store cannot persist it
        """
        pass

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_link(self, comment_id: CommentId) -> Optional[CommentLink]:
        """Find the id/post/parent triple of a comment.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The link record if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_post(self, post_id: PostId, limit: int = 50) -> List[Comment]:
        """Find comments for a post ordered by creation time ascending.

        Args:
            post_id: The post ID
            limit: Maximum number of comments to return

        Returns:
            List of comments, oldest first
        """
        pass

    @abstractmethod
    async def update_body(self, comment_id: CommentId, body: str) -> Optional[Comment]:
        """Replace a comment's body.

        Args:
            comment_id: The comment ID
            body: New body text

        Returns:
            The updated comment, or None if it doesn't exist
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment together with its replies.

        Args:
            comment_id: The comment ID to delete
        """
        pass

    @abstractmethod
    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment of a post.

        Args:
            post_id: The post ID

        Returns:
            Number of comments deleted
        """
        pass
