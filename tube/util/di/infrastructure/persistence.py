"""Persistence infrastructure providers."""

from collections.abc import AsyncGenerator, AsyncIterator

import logfire
from dishka import Scope, provide
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from tube.config import Settings
from tube.domain.repository import (
    CommentRepository,
    ProfileRepository,
    VideoRepository,
)
from tube.persistence.database import create_engine, create_session_factory
from tube.persistence.repository import (
    PostgresCommentRepository,
    PostgresProfileRepository,
    PostgresVideoRepository,
)
from tube.util.di.base import ProviderBase
from tube.util.observability import instrument_sqlalchemy


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

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncGenerator[AsyncSession, Exception | None]:
        """Provide database session for request scope.

        The container sends the request's exception, if any, back into
        this generator. The session commits only when the request finished
        cleanly and rolls back otherwise, so a cascading delete either
        removes the comment and all its replies or nothing.
        """
        async with session_factory() as session:
            exc = yield session
            if exc is None:
                await session.commit()
                logfire.info("Session committed")
            else:
                await session.rollback()
                logfire.warn(
                    "Session rolled back",
                    error=str(exc),
                    error_type=type(exc).__name__,
                )

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, session: AsyncSession) -> CommentRepository:
        """Provide Comment repository."""
        return PostgresCommentRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_video_repository(self, session: AsyncSession) -> VideoRepository:
        """Provide Video repository."""
        return PostgresVideoRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_profile_repository(self, session: AsyncSession) -> ProfileRepository:
        """Provide Profile repository."""
        return PostgresProfileRepository(session)
