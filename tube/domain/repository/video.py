"""Video repository interface.

Videos are owned by another part of the platform; the comment engine only
needs to know whether one exists.
"""

from abc import ABC, abstractmethod

from tube.domain.value import VideoId


class VideoRepository(ABC):
    """Read-only view of the video catalogue."""

    @abstractmethod
    async def exists(self, video_id: VideoId) -> bool:
        """Check whether a video exists.

        Args:
            video_id: The video ID

        Returns:
            True if the video exists
        """
        pass
