"""Test configuration and helpers."""

from uuid import uuid4

from tube.domain.model import PublicProfile
from tube.domain.value import UserId, VideoId
from tube.domain.value.types import Handle
from tube.persistence.repository.inmemory import InMemoryStore


def seed_video(store: InMemoryStore) -> VideoId:
    """Register a new video in the store and return its ID."""
    video_id = VideoId(uuid4())
    store.add_video(video_id)
    return video_id


def seed_user(
    store: InMemoryStore,
    handle: str = "viewer",
    display_name: str | None = None,
    avatar_url: str | None = None,
) -> UserId:
    """Register a user's public profile in the store and return their ID."""
    user_id = UserId(uuid4())
    store.add_profile(
        PublicProfile(
            user_id=user_id,
            display_name=display_name or handle.title(),
            handle=Handle(root=handle),
            avatar_url=avatar_url,
        )
    )
    return user_id
