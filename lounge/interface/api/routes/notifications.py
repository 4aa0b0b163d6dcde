"""Notification routes."""

import logfire
from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Depends, HTTPException, Query, status
from pydantic import BaseModel

from lounge.application.usecase.notification import (
    GetNotificationsRequest,
    GetNotificationsResponse,
    GetNotificationsUseCase,
    MarkNotificationsReadRequest,
    MarkNotificationsReadResponse,
    MarkNotificationsReadUseCase,
)
from lounge.domain.error import ValidationError
from lounge.domain.service import JWTService
from lounge.interface.api.auth import bearer_token, require_user

router = APIRouter(prefix="/notifications", tags=["notifications"], route_class=DishkaRoute)


@router.get("", response_model=GetNotificationsResponse)
async def get_notifications(
    get_notifications_use_case: FromDishka[GetNotificationsUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
    limit: int = Query(default=50, ge=1, le=200),
) -> GetNotificationsResponse:
    """Get the caller's notifications, newest first."""
    user = require_user(jwt_service, token, "read notifications")

    try:
        return await get_notifications_use_case.execute(
            GetNotificationsRequest(user_id=str(user.id), limit=limit)
        )
    except Exception as e:
        logfire.error("Unexpected error fetching notifications", error=str(e))
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Notification fetch failed",
        )


class MarkReadAPIRequest(BaseModel):
    """API request for marking notifications read."""

    id: str | None = None  # Omit to mark every unread notification


@router.patch("", response_model=MarkNotificationsReadResponse)
async def mark_notifications_read(
    request: MarkReadAPIRequest,
    mark_read_use_case: FromDishka[MarkNotificationsReadUseCase],
    jwt_service: FromDishka[JWTService],
    token: str | None = Depends(bearer_token),
) -> MarkNotificationsReadResponse:
    """Mark one notification, or all unread ones, as read."""
    user = require_user(jwt_service, token, "update notifications")

    try:
        return await mark_read_use_case.execute(
            MarkNotificationsReadRequest(
                user_id=str(user.id), notification_id=request.id
            )
        )
    except ValidationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except Exception as e:
        logfire.error("Unexpected error updating notifications", error=str(e))
        # Reaches the request container so its session rolls back
        raise
