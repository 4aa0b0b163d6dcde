"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from lounge.config import Settings
from lounge.domain.repository import (
    CommentRepository,
    NotificationRepository,
    PostRepository,
)
from lounge.persistence.database import create_engine, create_session_factory
from lounge.persistence.repository import (
    PostgresPostRepository,
    build_comment_repository,
    build_notification_repository,
)
from lounge.persistence.schema import SchemaCapabilities, resolve_capabilities
from lounge.util.di.base import ProviderBase
from lounge.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    async def get_engine(self, settings: Settings) -> AsyncIterator[AsyncEngine]:
        """Provide database engine, disposed when the container closes."""
        engine = create_engine(settings)
        # Instrument SQLAlchemy for observability
        instrument_sqlalchemy(engine)
        yield engine
        await engine.dispose()
        logfire.info("Database engine disposed")

    @provide(scope=Scope.APP)
    async def get_schema_capabilities(
        self, engine: AsyncEngine, settings: Settings
    ) -> SchemaCapabilities:
        """Provide the comment store layout, resolved once per process."""
        return await resolve_capabilities(engine, settings.comments.schema_shape)

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        The container sends the exception that ended the request (or None)
        back into this generator on close: the session is committed only
        when the request finished cleanly.
        """
        async with session_factory() as session:
            error = yield session
            if error is not None:
                logfire.warn("Session rollback", error=str(error))
                await session.rollback()
                return
            await session.commit()
            logfire.info("Session committed")

    @provide(scope=Scope.REQUEST)
    def get_post_repository(self, session: AsyncSession) -> PostRepository:
        """Provide Post repository."""
        return PostgresPostRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(
        self, session: AsyncSession, capabilities: SchemaCapabilities
    ) -> CommentRepository:
        """Provide the Comment repository matching the store's layout."""
        return build_comment_repository(session, capabilities)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(
        self, session: AsyncSession, capabilities: SchemaCapabilities
    ) -> NotificationRepository:
        """Provide Notification repository (no-op without the table)."""
        return build_notification_repository(session, capabilities)
