"""Profile repository interface."""

from abc import ABC, abstractmethod

from tube.domain.model.profile import PublicProfile
from tube.domain.value import UserId


class ProfileRepository(ABC):
    """Read-only lookup of public user profiles.

    Users are managed by the identity part of the platform; comments only
    display their public fields.
    """

    @abstractmethod
    async def find_profiles(
        self, user_ids: list[UserId]
    ) -> dict[UserId, PublicProfile]:
        """Fetch public profiles for several users in one round-trip.

        Args:
            user_ids: User IDs to look up

        Returns:
            Mapping of user ID to profile; unknown IDs are absent
        """
        pass
