"""Delete post use case."""

from pydantic import BaseModel

from lounge.domain.error import NotAuthorizedError, NotFoundError
from lounge.domain.service import PostService
from lounge.domain.value import AuthenticatedUser, PostId

from ..common import parse_uuid


class DeletePostRequest(BaseModel):
    """Delete post request."""

    post_id: str  # UUID string
    user: AuthenticatedUser  # Caller (must be author or admin)


class DeletePostResponse(BaseModel):
    """Delete post response."""

    post_id: str
    comments_removed: int


class DeletePostUseCase:
    """Use case for deleting a post and its comments."""

    def __init__(self, post_service: PostService) -> None:
        """Initialize delete post use case.

        Args:
            post_service: Post domain service
        """
        self.post_service = post_service

    async def execute(self, request: DeletePostRequest) -> DeletePostResponse:
        """Execute delete post flow.

        Raises:
            ValidationError: If the post ID is malformed
            NotFoundError: If the post doesn't exist
            NotAuthorizedError: If the caller is neither author nor admin
        """
        post_id = PostId(parse_uuid(request.post_id, "post_id"))

        post = await self.post_service.get_post_by_id(post_id)
        if post is None:
            raise NotFoundError("Post", request.post_id)

        if not request.user.can_manage(post.author_id):
            raise NotAuthorizedError("post", request.post_id, str(request.user.id))

        removed = await self.post_service.delete_post(post_id)
        return DeletePostResponse(post_id=str(post_id), comments_removed=removed)
