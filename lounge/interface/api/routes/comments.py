"""Comment routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from pydantic import BaseModel

from lounge.application.usecase.comment import (
    CreateCommentRequest,
    CreateCommentResponse,
    CreateCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    GetCommentsRequest,
    GetCommentsResponse,
    GetCommentsUseCase,
    UpdateCommentRequest,
    UpdateCommentResponse,
    UpdateCommentUseCase,
)
from lounge.domain.error import (
    CommentIntegrityError,
    NotAuthorizedError,
    NotFoundError,
    ReplyDepthExceededError,
    SchemaIncompatibleError,
    ValidationError,
)
from lounge.domain.service import JWTService
from lounge.interface.api.auth import bearer_token, require_user

router = APIRouter(tags=["comments"], route_class=DishkaRoute)


class CreateCommentAPIRequest(BaseModel):
    """API request for creating a comment."""

    body: str
    parent_id: str | None = None  # Parent comment ID for replies


@router.post(
    "/posts/{post_id}/comments",
    response_model=CreateCommentResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_comment(
    post_id: str,
    request: CreateCommentAPIRequest,
    create_comment_use_case: FromDishka[CreateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> CreateCommentResponse:
    """Create a comment on a post or reply to another comment.

    Requires authentication.

    Args:
        post_id: Post UUID
        request: Comment body and optional parent comment ID
        create_comment_use_case: Create comment use case from DI
        jwt_service: JWT service for token verification (injected)
        token: Bearer token from the Authorization header

    Returns:
        Created comment details, including its depth

    Raises:
        HTTPException: If not authenticated, the input is invalid, the
            parent chain is rejected, or the store cannot hold the comment
    """
    user = require_user(jwt_service, token, "create comments")

    try:
        use_case_request = CreateCommentRequest(
            post_id=post_id,
            body=request.body,
            author_id=str(user.id),
            parent_id=request.parent_id,
        )
        return await create_comment_use_case.execute(use_case_request)
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except ReplyDepthExceededError as e:
        logfire.info("Reply rejected at depth limit", post_id=post_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Reply nesting limit reached",
        )
    except CommentIntegrityError as e:
        logfire.warn("Reply rejected by integrity check", post_id=post_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid parent comment",
        )
    except SchemaIncompatibleError as e:
        logfire.error("Comment store cannot hold comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Comment storage is unavailable",
        )
    except Exception as e:
        logfire.error("Unexpected error creating comment", error=str(e))
        # Reaches the request container so its session rolls back
        raise


@router.get("/posts/{post_id}/comments", response_model=GetCommentsResponse)
async def get_comments(
    post_id: str,
    get_comments_use_case: FromDishka[GetCommentsUseCase],
    limit: int | None = Query(default=None, ge=1, le=500),
) -> GetCommentsResponse:
    """Get a post's comments as a reply forest.

    Public endpoint; no authentication required.

    Args:
        post_id: Post UUID
        get_comments_use_case: Get comments use case from DI
        limit: Maximum number of comments to fetch (oldest first)

    Returns:
        Root comments with nested replies
    """
    try:
        return await get_comments_use_case.execute(
            GetCommentsRequest(post_id=post_id, limit=limit)
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error listing comments", post_id=post_id, error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Failed to load comments",
        )


class UpdateCommentAPIRequest(BaseModel):
    """API request for updating a comment."""

    body: str


@router.patch("/comments/{comment_id}", response_model=UpdateCommentResponse)
async def update_comment(
    comment_id: str,
    request: UpdateCommentAPIRequest,
    update_comment_use_case: FromDishka[UpdateCommentUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> UpdateCommentResponse:
    """Update a comment's body.

    Only the comment author or an admin can edit.
    """
    user = require_user(jwt_service, token, "edit comments")

    try:
        return await update_comment_use_case.execute(
            UpdateCommentRequest(comment_id=comment_id, user=user, body=request.body)
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment update attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to edit this comment",
        )
    except SchemaIncompatibleError as e:
        logfire.error("Comment store cannot update comment", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail="Comment storage is unavailable",
        )
    except Exception as e:
        logfire.error("Unexpected error updating comment", error=str(e))
        # Reaches the request container so its session rolls back
        raise


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(
    comment_id: str,
    delete_comment_use_case: FromDishka[DeleteCommentUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> Response:
    """Delete a comment and its replies.

    Only the comment author or an admin can delete.
    """
    user = require_user(jwt_service, token, "delete comments")

    try:
        await delete_comment_use_case.execute(
            DeleteCommentRequest(comment_id=comment_id, user=user)
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized comment delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete this comment",
        )
    except Exception as e:
        logfire.error("Unexpected error deleting comment", error=str(e))
        # Reaches the request container so its session rolls back
        raise

    return Response(status_code=status.HTTP_204_NO_CONTENT)
