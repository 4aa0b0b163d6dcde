"""Post domain service."""

import logfire

from lounge.domain.model.post import Post
from lounge.domain.repository import CommentRepository, PostRepository
from lounge.domain.value import PostId


class PostService:
    """Domain service for the post operations comments depend on."""

    def __init__(
        self,
        post_repository: PostRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            comment_repository: Comment repository (for cascade deletes)
        """
        self.post_repository = post_repository
        self.comment_repository = comment_repository

    async def get_post_by_id(self, post_id: PostId) -> Post | None:
        """Get a post by ID.

        Args:
            post_id: Post ID

        Returns:
            Post if found, None otherwise
        """
        with logfire.span("post_service.get_post_by_id", post_id=str(post_id)):
            post = await self.post_repository.find_by_id(post_id)
            if not post:
                logfire.warn("Post not found", post_id=str(post_id))
            return post

    async def delete_post(self, post_id: PostId) -> int:
        """Delete a post and all of its comments.

        Args:
            post_id: Post ID

        Returns:
            Number of comments removed with the post
        """
        with logfire.span("post_service.delete_post", post_id=str(post_id)):
            removed = await self.comment_repository.delete_by_post(post_id)
            post_removed = await self.post_repository.delete(post_id)
            logfire.info(
                "Post deleted",
                post_id=str(post_id),
                post_removed=post_removed,
                comments_removed=removed,
            )
            return removed
