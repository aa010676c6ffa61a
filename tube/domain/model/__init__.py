"""Domain model entities for Tube."""

from tube.domain.model.comment import Comment
from tube.domain.model.enriched_comment import EnrichedComment
from tube.domain.model.profile import PublicProfile

__all__ = [
    "Comment",
    "EnrichedComment",
    "PublicProfile",
]
