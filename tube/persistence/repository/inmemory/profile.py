"""In-memory profile repository for testing."""

from tube.domain.model.profile import PublicProfile
from tube.domain.repository.profile import ProfileRepository
from tube.domain.value import UserId

from .store import InMemoryStore


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_profiles(
        self, user_ids: list[UserId]
    ) -> dict[UserId, PublicProfile]:
        """Return registered profiles for the given users."""
        return {
            uid: self._store.profiles[uid]
            for uid in user_ids
            if uid in self._store.profiles
        }
