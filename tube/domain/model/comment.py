"""Comment entity.

Comments are threaded one level deep: a top-level comment is attached to a
video, and a reply is attached to a top-level comment. Replies never store
their own video reference; it is derived from the parent when read.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator, model_validator

from tube.domain.model.common import DomainModel
from tube.domain.value import CommentId, UserId, VideoId


class Comment(DomainModel):
    """Comment entity.

    Represents a top-level comment on a video or a reply to one.

    Threading is managed through:
    - video_id: Owning video (top-level comments only)
    - parent_comment_id: Top-level comment being replied to (replies only)
    """

    id: CommentId
    content: str = Field(min_length=1)
    owner_id: UserId
    video_id: Optional[VideoId] = None
    parent_comment_id: Optional[CommentId] = None
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @field_validator("content", mode="before")
    @classmethod
    def strip_content(cls, v: str) -> str:
        """Trim surrounding whitespace before length checks."""
        return v.strip() if isinstance(v, str) else v

    @model_validator(mode="after")
    def check_thread_link(self) -> "Comment":
        """A comment belongs either to a video or to a parent comment."""
        if self.parent_comment_id is None and self.video_id is None:
            raise ValueError("Top-level comment requires a video_id")
        if self.parent_comment_id is not None and self.video_id is not None:
            raise ValueError("Reply must not store a video_id")
        return self

    @property
    def is_reply(self) -> bool:
        return self.parent_comment_id is not None

    def with_content(self, content: str, updated_at: datetime) -> "Comment":
        """Return a copy with new content; identity and links are unchanged."""
        return Comment.model_validate(
            {**self.model_dump(), "content": content, "updated_at": updated_at}
        )
