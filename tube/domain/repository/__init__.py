"""Repository interfaces for Tube domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from tube.domain.repository.comment import CommentRepository
from tube.domain.repository.profile import ProfileRepository
from tube.domain.repository.video import VideoRepository

__all__ = [
    "CommentRepository",
    "ProfileRepository",
    "VideoRepository",
]
