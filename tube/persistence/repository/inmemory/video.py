"""In-memory video repository for testing."""

from tube.domain.repository.video import VideoRepository
from tube.domain.value import VideoId

from .store import InMemoryStore


class InMemoryVideoRepository(VideoRepository):
    """In-memory implementation of VideoRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def exists(self, video_id: VideoId) -> bool:
        """Check whether a video was registered."""
        return video_id in self._store.videos
