"""Get comments use case."""

from datetime import datetime

from pydantic import BaseModel

from lounge.domain.model import Comment, ThreadNode
from lounge.domain.service import CommentService, ThreadService
from lounge.domain.value import PostId

from ..common import parse_uuid


class CommentItem(BaseModel):
    """Comment item in responses."""

    comment_id: str
    post_id: str
    author_id: str
    body: str
    parent_id: str | None
    created_at: datetime
    updated_at: datetime | None

    @classmethod
    def from_comment(cls, comment: Comment) -> "CommentItem":
        """Build a response item from a domain comment."""
        return cls(
            comment_id=str(comment.id),
            post_id=str(comment.post_id),
            author_id=str(comment.author_id),
            body=comment.body,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class ThreadItem(CommentItem):
    """Comment with its position in the thread and its replies."""

    depth: int
    can_reply: bool
    replies: list["ThreadItem"]

    @classmethod
    def from_node(cls, node: ThreadNode) -> "ThreadItem":
        """Build a response item tree from an assembled thread node."""
        item = CommentItem.from_comment(node.comment)
        return cls(
            **item.model_dump(),
            depth=node.depth,
            can_reply=node.can_reply,
            replies=[cls.from_node(reply) for reply in node.replies],
        )


class GetCommentsRequest(BaseModel):
    """Get comments request."""

    post_id: str  # UUID string
    limit: int | None = None  # Defaults to the configured list limit


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    post_id: str
    max_depth: int
    total: int  # Comments fetched, including any not placed in the thread
    comments: list[ThreadItem]


class GetCommentsUseCase:
    """Use case for getting a post's comments as a reply forest."""

    def __init__(
        self,
        comment_service: CommentService,
        thread_service: ThreadService,
        default_limit: int = 50,
    ) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
            thread_service: Thread assembly service
            default_limit: Number of comments fetched when none is requested
        """
        self.comment_service = comment_service
        self.thread_service = thread_service
        self.default_limit = default_limit

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Args:
            request: Get comments request with post ID and optional limit

        Returns:
            Root comments with nested replies, siblings oldest first

        Raises:
            ValidationError: If the post ID is malformed
        """
        post_id = PostId(parse_uuid(request.post_id, "post_id"))
        limit = request.limit or self.default_limit

        comments = await self.comment_service.get_comments_for_post(post_id, limit)
        forest = self.thread_service.assemble(comments)

        return GetCommentsResponse(
            post_id=str(post_id),
            max_depth=self.thread_service.max_depth,
            total=len(comments),
            comments=[ThreadItem.from_node(node) for node in forest],
        )
