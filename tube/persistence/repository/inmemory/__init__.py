"""In-memory repository implementations for testing."""

from .comment import InMemoryCommentRepository
from .profile import InMemoryProfileRepository
from .store import InMemoryStore
from .video import InMemoryVideoRepository

__all__ = [
    "InMemoryCommentRepository",
    "InMemoryProfileRepository",
    "InMemoryStore",
    "InMemoryVideoRepository",
]
