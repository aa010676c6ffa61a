"""PostgreSQL repository implementations."""

from tube.persistence.repository.comment import PostgresCommentRepository
from tube.persistence.repository.profile import PostgresProfileRepository
from tube.persistence.repository.video import PostgresVideoRepository

__all__ = [
    "PostgresCommentRepository",
    "PostgresProfileRepository",
    "PostgresVideoRepository",
]
