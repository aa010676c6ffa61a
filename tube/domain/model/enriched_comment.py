"""Read projection of a comment joined with its owner's public profile."""

from datetime import datetime
from typing import Optional

from tube.domain.model.comment import Comment
from tube.domain.model.common import DomainModel
from tube.domain.model.profile import PublicProfile
from tube.domain.value import CommentId, VideoId


class EnrichedComment(DomainModel):
    """Comment as shown to clients.

    ``video_id`` is always set: replies take it from their parent.
    """

    id: CommentId
    content: str
    video_id: VideoId
    parent_comment_id: Optional[CommentId] = None
    owner: PublicProfile
    created_at: datetime
    updated_at: datetime

    @classmethod
    def compose(
        cls, comment: Comment, owner: PublicProfile, video_id: VideoId
    ) -> "EnrichedComment":
        return cls(
            id=comment.id,
            content=comment.content,
            video_id=video_id,
            parent_comment_id=comment.parent_comment_id,
            owner=owner,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )
