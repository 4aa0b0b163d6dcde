"""Delete comment use case."""

from pydantic import BaseModel

from lounge.domain.error import NotAuthorizedError, NotFoundError
from lounge.domain.service import CommentService
from lounge.domain.value import AuthenticatedUser, CommentId

from ..common import parse_uuid


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    user: AuthenticatedUser  # Caller (must be author or admin)


class DeleteCommentUseCase:
    """Use case for deleting a comment together with its replies."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Raises:
            ValidationError: If the comment ID is malformed
            NotFoundError: If the comment doesn't exist
            NotAuthorizedError: If the caller is neither author nor admin
        """
        comment_id = CommentId(parse_uuid(request.comment_id, "comment_id"))

        comment = await self.comment_service.get_comment_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", request.comment_id)

        if not request.user.can_manage(comment.author_id):
            raise NotAuthorizedError(
                "comment", request.comment_id, str(request.user.id)
            )

        await self.comment_service.delete_comment(comment_id)
