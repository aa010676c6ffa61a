"""Async PostgreSQL engine and sessions."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from tube.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine for the comments database.

    Args:
        settings: Application settings

    Returns:
        Async engine with a pre-pinged connection pool
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the factory for request sessions.

    Sessions never flush implicitly; repositories flush after each write so
    that later statements in the same request see it.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
