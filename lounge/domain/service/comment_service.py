"""Comment domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from lounge.domain.error import SchemaIncompatibleError, ValidationError
from lounge.domain.model.comment import Comment
from lounge.domain.repository import CommentRepository
from lounge.domain.value import CommentBody, CommentId, PostId, UserId

from .thread_integrity_service import ThreadIntegrityService


def parse_comment_body(text: str) -> str:
    """Validate and normalize a comment body.

    Raises:
        ValidationError: If the body is empty after trimming or too long
    """
    try:
        return CommentBody(text).root
    except PydanticValidationError as e:
        raise ValidationError(e.errors()[0]["msg"].removeprefix("Value error, "))


class CommentService:
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        thread_integrity_service: ThreadIntegrityService,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            thread_integrity_service: Validator for parent references
        """
        self.comment_repository = comment_repository
        self.thread_integrity_service = thread_integrity_service

    async def create_comment(
        self,
        post_id: PostId,
        author_id: UserId,
        body: str,
        parent_id: CommentId | None = None,
    ) -> tuple[Comment, int]:
        """Create a comment on a post or a reply to another comment.

        The parent chain is validated before anything is written. The id is
        generated here so it is known before the insert completes.

        Args:
            post_id: Post ID
            author_id: Author user ID
            body: Comment text
            parent_id: Parent comment ID for replies (None for top-level)

        Returns:
            Tuple of the created comment and its depth (root = 1)

        Raises:
            ValidationError: If the body is empty or too long
            SchemaIncompatibleError: If a reply is requested but the store
                cannot persist parent links
            CommentIntegrityError: If the parent chain is invalid
            ReplyDepthExceededError: If the reply would nest too deep
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=str(post_id),
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            clean_body = parse_comment_body(body)

            if parent_id is not None and not self.comment_repository.supports_parent_link:
                logfire.error(
                    "Reply rejected: store has no parent link column",
                    post_id=str(post_id),
                    parent_id=str(parent_id),
                )
                raise SchemaIncompatibleError(
                    "Comment store does not support replies in its current schema"
                )

            depth = await self.thread_integrity_service.assert_reply_depth(
                post_id, parent_id
            )

            comment = Comment(
                id=CommentId(uuid4()),
                post_id=post_id,
                author_id=author_id,
                body=clean_body,
                parent_id=parent_id,
                created_at=datetime.now(),
                updated_at=None,
            )

            saved = await self.comment_repository.insert(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                post_id=str(post_id),
                depth=depth,
            )
            return saved, depth

    async def get_comments_for_post(self, post_id: PostId, limit: int) -> list[Comment]:
        """Get a post's comments, oldest first.

        Args:
            post_id: Post ID
            limit: Maximum number of comments

        Returns:
            List of comments ordered by creation time
        """
        with logfire.span(
            "comment_service.get_comments_for_post",
            post_id=str(post_id),
            limit=limit,
        ):
            comments = await self.comment_repository.find_by_post(post_id, limit=limit)
            logfire.info(
                "Comments retrieved for post",
                post_id=str(post_id),
                count=len(comments),
            )
            return comments

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment:
                logfire.info("Comment found", comment_id=str(comment_id))
            else:
                logfire.warn("Comment not found", comment_id=str(comment_id))
            return comment

    async def update_body(self, comment_id: CommentId, body: str) -> Comment | None:
        """Replace the body of a comment.

        Args:
            comment_id: Comment ID
            body: New body text

        Returns:
            Updated comment, or None if the comment doesn't exist

        Raises:
            ValidationError: If the body is empty or too long
        """
        with logfire.span(
            "comment_service.update_body",
            comment_id=str(comment_id),
            body_length=len(body),
        ):
            clean_body = parse_comment_body(body)
            updated = await self.comment_repository.update_body(comment_id, clean_body)

            if updated:
                logfire.info(
                    "Comment body updated",
                    comment_id=str(comment_id),
                    post_id=str(updated.post_id),
                )
            else:
                logfire.warn("Comment not found for update", comment_id=str(comment_id))

            return updated

    async def delete_comment(self, comment_id: CommentId) -> None:
        """Delete a comment and its replies.

        Args:
            comment_id: Comment ID
        """
        with logfire.span("comment_service.delete_comment", comment_id=str(comment_id)):
            await self.comment_repository.delete(comment_id)
            logfire.info("Comment deleted", comment_id=str(comment_id))
