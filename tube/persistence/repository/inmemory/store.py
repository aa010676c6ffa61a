"""Shared state for in-memory repositories."""

from tube.domain.model import Comment, PublicProfile
from tube.domain.value import CommentId, UserId, VideoId


class InMemoryStore:
    """Tables backing the in-memory repositories.

    One store is shared by every repository of a container so that records
    written in one request are visible in the next.
    """

    def __init__(self) -> None:
        self.comments: dict[CommentId, Comment] = {}
        self.profiles: dict[UserId, PublicProfile] = {}
        self.videos: set[VideoId] = set()

    def add_video(self, video_id: VideoId) -> None:
        """Register a video so comments can be attached to it."""
        self.videos.add(video_id)

    def add_profile(self, profile: PublicProfile) -> None:
        """Register a user's public profile."""
        self.profiles[profile.user_id] = profile
