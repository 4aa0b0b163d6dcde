"""Health check routes."""

from datetime import datetime

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter
from pydantic import BaseModel

from lounge.config import Settings
from lounge.persistence.schema import SchemaCapabilities

router = APIRouter(tags=["health"], route_class=DishkaRoute)


class HealthResponse(BaseModel):
    """Health check response.

    ``comment_schema`` is the comments layout resolved at startup
    ("current", "legacy_id", "flat", "legacy_id_flat" or "missing").
    """

    status: str
    timestamp: datetime
    version: str
    git_sha: str
    comment_schema: str
    replies_enabled: bool
    notifications_enabled: bool


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: FromDishka[Settings],
    capabilities: FromDishka[SchemaCapabilities],
) -> HealthResponse:
    """Report liveness and what the comment store can currently hold."""
    return HealthResponse(
        status="healthy" if capabilities.comments_table else "degraded",
        timestamp=datetime.now(),
        version="0.1.0",
        git_sha=settings.git_sha,
        comment_schema=capabilities.shape_name,
        replies_enabled=capabilities.comment_parent_link,
        notifications_enabled=capabilities.notifications_table,
    )
