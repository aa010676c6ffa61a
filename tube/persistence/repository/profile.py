"""PostgreSQL implementation of Profile repository."""

import logfire
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from tube.domain.model import PublicProfile
from tube.domain.repository import ProfileRepository
from tube.domain.value import UserId
from tube.persistence.mappers import row_to_profile
from tube.persistence.tables import users_table


class PostgresProfileRepository(ProfileRepository):
    """Reads public profiles from the shared users table."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_profiles(
        self, user_ids: list[UserId]
    ) -> dict[UserId, PublicProfile]:
        """Fetch public profiles for several users in a single query."""
        if not user_ids:
            return {}

        with logfire.span("profile_repository.find_profiles", count=len(user_ids)):
            stmt = select(
                users_table.c.id,
                users_table.c.username,
                users_table.c.full_name,
                users_table.c.avatar_url,
            ).where(users_table.c.id.in_(user_ids))
            result = await self.session.execute(stmt)

            profiles = [row_to_profile(row._asdict()) for row in result.fetchall()]
            return {profile.user_id: profile for profile in profiles}
