"""Post routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, Response, status

from lounge.application.usecase.post import DeletePostRequest, DeletePostUseCase
from lounge.domain.error import NotAuthorizedError, NotFoundError, ValidationError
from lounge.domain.service import JWTService
from lounge.interface.api.auth import bearer_token, require_user

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


@router.delete("/{post_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_post(
    post_id: str,
    delete_post_use_case: FromDishka[DeletePostUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> Response:
    """Delete a post together with all of its comments.

    Only the post author or an admin can delete.

    Args:
        post_id: Post UUID
        delete_post_use_case: Delete post use case from DI
        jwt_service: JWT service for token verification (injected)
        token: Bearer token from the Authorization header

    Raises:
        HTTPException: If not authenticated, not authorized, or post not found
    """
    user = require_user(jwt_service, token, "delete posts")

    try:
        result = await delete_post_use_case.execute(
            DeletePostRequest(post_id=post_id, user=user)
        )
        logfire.info(
            "Post removed via API",
            post_id=result.post_id,
            comments_removed=result.comments_removed,
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except NotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except NotAuthorizedError as e:
        logfire.warn("Unauthorized post delete attempt", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Not authorized to delete this post",
        )
    except Exception as e:
        logfire.error("Unexpected error deleting post", error=str(e))
        # Reaches the request container so its session rolls back
        raise

    return Response(status_code=status.HTTP_204_NO_CONTENT)
