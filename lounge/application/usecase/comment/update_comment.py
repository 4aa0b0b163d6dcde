"""Update comment use case."""

from pydantic import BaseModel

from lounge.domain.error import NotAuthorizedError, NotFoundError
from lounge.domain.service import CommentService
from lounge.domain.service.comment_service import parse_comment_body
from lounge.domain.value import AuthenticatedUser, CommentId

from ..common import parse_uuid
from .get_comments import CommentItem


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    user: AuthenticatedUser  # Caller (must be author or admin)
    body: str  # New body (required, cannot be empty)


class UpdateCommentResponse(CommentItem):
    """Update comment response."""


class UpdateCommentUseCase:
    """Use case for editing a comment's body."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment service
        """
        self.comment_service = comment_service

    async def execute(self, request: UpdateCommentRequest) -> UpdateCommentResponse:
        """Execute update comment flow.

        Args:
            request: Update comment request with comment ID, caller and new body

        Returns:
            Updated comment details

        Raises:
            ValidationError: If the comment ID or body is malformed
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the caller is neither author nor admin
        """
        comment_id = CommentId(parse_uuid(request.comment_id, "comment_id"))
        body = parse_comment_body(request.body)

        comment = await self.comment_service.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", request.comment_id)

        if not request.user.can_manage(comment.author_id):
            raise NotAuthorizedError(
                "comment", request.comment_id, str(request.user.id)
            )

        updated = await self.comment_service.update_body(comment_id, body)
        if updated is None:
            # Deleted between the lookup and the update
            raise NotFoundError("Comment", request.comment_id)

        return UpdateCommentResponse(**CommentItem.from_comment(updated).model_dump())
