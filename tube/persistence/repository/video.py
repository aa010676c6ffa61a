"""PostgreSQL implementation of Video repository."""

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from tube.domain.repository import VideoRepository
from tube.domain.value import VideoId
from tube.persistence.tables import videos_table


class PostgresVideoRepository(VideoRepository):
    """Reads video existence from the shared videos table."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def exists(self, video_id: VideoId) -> bool:
        """Check whether a video exists."""
        stmt = select(exists().where(videos_table.c.id == video_id))
        result = await self.session.execute(stmt)
        return bool(result.scalar())
