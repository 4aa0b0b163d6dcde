"""FastAPI application."""

from contextlib import asynccontextmanager

import logfire
from dishka import AsyncContainer
from dishka.integrations.fastapi import setup_dishka
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from lounge.config import Settings
from lounge.interface.api.routes import comments, health, notifications, posts
from lounge.persistence.schema import SchemaCapabilities
from lounge.util.di import create_container
from lounge.util.observability import instrument_fastapi


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use (production container if omitted)
    """
    settings = Settings()
    if container is None:
        container = create_container()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Resolve the comment store layout before serving any request
        capabilities = await container.get(SchemaCapabilities)
        logfire.info(
            "Lounge API ready",
            comment_schema=capabilities.shape_name,
            notifications=capabilities.notifications_table,
        )
        yield
        await container.close()

    app_instance = FastAPI(
        title="Lounge API",
        description="Community discussion backend with threaded comments",
        version="0.1.0",
        lifespan=lifespan,
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS", "PATCH"],
        allow_headers=["Authorization", "Content-Type", "Accept", "Origin"],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    setup_dishka(container, app_instance)

    app_instance.include_router(health.router)
    app_instance.include_router(posts.router)
    app_instance.include_router(comments.router)
    app_instance.include_router(notifications.router)

    return app_instance


# Create app instance for uvicorn
# Note: Logfire must be configured before this module is imported
# In production: start_app.py handles this
app = create_app()
