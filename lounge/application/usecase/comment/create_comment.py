"""Create comment use case."""

from datetime import datetime

import logfire
from pydantic import BaseModel

from lounge.domain.error import NotFoundError
from lounge.domain.service import CommentService, NotificationService, PostService
from lounge.domain.service.comment_service import parse_comment_body
from lounge.domain.value import CommentId, PostId, UserId

from ..common import parse_uuid


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    post_id: str  # UUID string
    body: str
    author_id: str  # User ID from authenticated user
    parent_id: str | None = None  # Parent comment ID for replies


class CreateCommentResponse(BaseModel):
    """Create comment response."""

    comment_id: str
    post_id: str
    body: str
    parent_id: str | None
    depth: int
    created_at: datetime


class CreateCommentUseCase:
    """Use case for creating a comment on a post or replying to another comment."""

    def __init__(
        self,
        comment_service: CommentService,
        post_service: PostService,
        notification_service: NotificationService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            post_service: Post domain service
            notification_service: Notification domain service
        """
        self.comment_service = comment_service
        self.post_service = post_service
        self.notification_service = notification_service

    async def execute(self, request: CreateCommentRequest) -> CreateCommentResponse:
        """Execute create comment flow.

        Steps:
        1. Validate identifiers and body (no store access yet)
        2. Verify post exists via post service
        3. Create comment via comment service (validates the parent chain)
        4. Notify the post author or the parent comment's author

        Args:
            request: Create comment request

        Returns:
            Create comment response with the new comment's id and depth

        Raises:
            ValidationError: If an identifier or the body is malformed
            NotFoundError: If the post doesn't exist
            CommentIntegrityError: If the parent chain is invalid
            ReplyDepthExceededError: If the reply would nest too deep
            SchemaIncompatibleError: If the store cannot hold the comment
        """
        post_id = PostId(parse_uuid(request.post_id, "post_id"))
        author_id = UserId(parse_uuid(request.author_id, "author_id"))
        parent_id = (
            CommentId(parse_uuid(request.parent_id, "parent_id"))
            if request.parent_id is not None
            else None
        )
        body = parse_comment_body(request.body)

        post = await self.post_service.get_post_by_id(post_id)
        if not post:
            raise NotFoundError("Post", request.post_id)

        comment, depth = await self.comment_service.create_comment(
            post_id=post_id,
            author_id=author_id,
            body=body,
            parent_id=parent_id,
        )

        if parent_id is None:
            await self.notification_service.notify_comment(
                post_author_id=post.author_id,
                actor_id=author_id,
                post_id=post_id,
                comment_id=comment.id,
            )
        else:
            parent = await self.comment_service.get_comment_by_id(parent_id)
            if parent:
                await self.notification_service.notify_reply(
                    parent_author_id=parent.author_id,
                    actor_id=author_id,
                    post_id=post_id,
                    comment_id=comment.id,
                )
            else:
                logfire.warn(
                    "Parent vanished before reply notification",
                    parent_id=str(parent_id),
                )

        return CreateCommentResponse(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            body=comment.body,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            depth=depth,
            created_at=comment.created_at,
        )
