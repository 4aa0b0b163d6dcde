"""Engine and session factory construction."""

from sqlalchemy import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from lounge.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for ``settings.database.url``.

    Pool sizing applies to server databases only; SQLite gets the driver's
    default pool.

    Args:
        settings: Application settings

    Returns:
        Async engine (not yet connected)
    """
    url = make_url(settings.database_url)
    options: dict = {
        "echo": settings.debug,  # Log SQL in debug mode
        "pool_pre_ping": True,
    }
    if url.get_backend_name() != "sqlite":
        options["pool_size"] = settings.database.pool_size
        options["max_overflow"] = settings.database.max_overflow

    return create_async_engine(url, **options)


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the factory for per-request sessions.

    Loaded values stay usable after commit, and nothing is flushed
    implicitly: repositories flush after each write.

    Args:
        engine: Database engine

    Returns:
        Session factory
    """
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
