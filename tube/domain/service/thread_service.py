"""Thread structure rules.

Threads are one level deep: videos have top-level comments, and top-level
comments have replies. Replies cannot be replied to.
"""

import logfire

from tube.domain.error import (
    DependencyError,
    InvariantViolationError,
    NotFoundError,
)
from tube.domain.model.comment import Comment
from tube.domain.repository import CommentRepository, VideoRepository
from tube.domain.value import CommentId, VideoId

from .base import Service
from .comment_service import DEFAULT_MAX_CONTENT_LENGTH, normalize_content


class ThreadService(Service):
    """Validates writes against the thread structure before they reach the store."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        video_repository: VideoRepository,
        max_content_length: int = DEFAULT_MAX_CONTENT_LENGTH,
    ) -> None:
        """Initialize thread service.

        Args:
            comment_repository: Comment repository
            video_repository: Video existence lookup
            max_content_length: Maximum content length
        """
        self.comment_repository = comment_repository
        self.video_repository = video_repository
        self.max_content_length = max_content_length

    def validate_content(self, content: str | None) -> str:
        """Trim content and reject it when empty or too long.

        Raises:
            ValidationError: If content is unusable
        """
        return normalize_content(content, self.max_content_length)

    async def check_video_target(self, video_id: VideoId) -> None:
        """Ensure a top-level comment may be attached to a video.

        Raises:
            NotFoundError: If the video does not exist
            DependencyError: If the video lookup itself failed
        """
        with logfire.span("thread_service.check_video_target", video_id=str(video_id)):
            try:
                exists = await self.video_repository.exists(video_id)
            except Exception as e:
                logfire.error(
                    "Video lookup failed", video_id=str(video_id), error=str(e)
                )
                raise DependencyError("Video lookup failed") from e

            if not exists:
                logfire.warn("Video not found", video_id=str(video_id))
                raise NotFoundError("video", str(video_id))

    async def check_reply_target(self, parent_comment_id: CommentId) -> Comment:
        """Ensure a reply may be attached to a comment.

        Returns:
            The parent comment

        Raises:
            NotFoundError: If the parent comment does not exist
            InvariantViolationError: If the parent is itself a reply
        """
        with logfire.span(
            "thread_service.check_reply_target",
            parent_comment_id=str(parent_comment_id),
        ):
            parent = await self.comment_repository.find_by_id(parent_comment_id)
            if parent is None:
                logfire.warn(
                    "Parent comment not found",
                    parent_comment_id=str(parent_comment_id),
                )
                raise NotFoundError("parent comment", str(parent_comment_id))

            if parent.is_reply:
                logfire.warn(
                    "Attempt to reply to a reply",
                    parent_comment_id=str(parent_comment_id),
                    grandparent_id=str(parent.parent_comment_id),
                )
                raise InvariantViolationError("cannot reply to a reply")

            return parent

    def check_reply_belongs(self, reply: Comment, parent_comment_id: CommentId) -> None:
        """Ensure a reply sits under the parent named in the request.

        Raises:
            InvariantViolationError: If the record is not a reply of that parent
        """
        if reply.parent_comment_id != parent_comment_id:
            logfire.warn(
                "Reply does not belong to parent comment",
                reply_id=str(reply.id),
                actual_parent_id=str(reply.parent_comment_id),
                requested_parent_id=str(parent_comment_id),
            )
            raise InvariantViolationError(
                f"Reply {reply.id} does not belong to comment {parent_comment_id}"
            )

    async def resolve_video_id(self, comment: Comment) -> VideoId:
        """Return the video a comment belongs to, following the parent for replies.

        Raises:
            NotFoundError: If a reply's parent no longer exists
        """
        if comment.video_id is not None:
            return comment.video_id

        parent = await self.comment_repository.find_by_id(comment.parent_comment_id)
        if parent is None or parent.video_id is None:
            raise NotFoundError("parent comment", str(comment.parent_comment_id))
        return parent.video_id
