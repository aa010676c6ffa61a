"""Comment domain service."""

from datetime import datetime, timezone
from uuid import uuid4

import logfire

from tube.domain.error import NotFoundError, ValidationError
from tube.domain.model.comment import Comment
from tube.domain.repository import CommentRepository
from tube.domain.value import CommentId, Page, PageRequest, UserId, VideoId
from tube.domain.value.types import SortField, SortOrder

from .base import Service

DEFAULT_MAX_CONTENT_LENGTH = 10000


def normalize_content(
    content: str | None, max_length: int = DEFAULT_MAX_CONTENT_LENGTH
) -> str:
    """Trim comment content and check it is usable.

    Args:
        content: Raw content
        max_length: Maximum allowed length after trimming

    Returns:
        Trimmed content

    Raises:
        ValidationError: If content is empty after trimming or too long
    """
    text = (content or "").strip()
    if not text:
        raise ValidationError("Comment content must not be empty")
    if len(text) > max_length:
        raise ValidationError(
            f"Comment content must be at most {max_length} characters"
        )
    return text


class CommentService(Service):
    """Domain service owning comment records.

    This is the only place comments are written. It guarantees non-empty
    content on every write but does not check that videos or parent
    comments exist; callers go through ThreadService for that.
    """

    def __init__(
        self,
        comment_repository: CommentRepository,
        max_content_length: int = DEFAULT_MAX_CONTENT_LENGTH,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            max_content_length: Maximum content length
        """
        self.comment_repository = comment_repository
        self.max_content_length = max_content_length

    async def create(
        self,
        content: str,
        owner_id: UserId,
        video_id: VideoId | None = None,
        parent_comment_id: CommentId | None = None,
    ) -> Comment:
        """Create a top-level comment or a reply.

        Args:
            content: Comment text
            owner_id: Author user ID
            video_id: Video ID for top-level comments
            parent_comment_id: Parent comment ID for replies

        Returns:
            Created comment

        Raises:
            ValidationError: If content is empty after trimming
        """
        with logfire.span(
            "comment_service.create",
            owner_id=str(owner_id),
            video_id=str(video_id) if video_id else None,
            parent_comment_id=str(parent_comment_id) if parent_comment_id else None,
        ):
            text = normalize_content(content, self.max_content_length)
            now = datetime.now(timezone.utc)
            comment = Comment(
                id=CommentId(uuid4()),
                content=text,
                owner_id=owner_id,
                video_id=None if parent_comment_id else video_id,
                parent_comment_id=parent_comment_id,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                owner_id=str(owner_id),
                is_reply=saved.is_reply,
            )
            return saved

    async def get_by_id(
        self, comment_id: CommentId, resource: str = "comment"
    ) -> Comment:
        """Get a comment by ID.

        Args:
            comment_id: Comment ID
            resource: Name used in the not-found error ("comment", "reply")

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.get_by_id", comment_id=str(comment_id)):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None:
                logfire.warn("Comment not found", comment_id=str(comment_id))
                raise NotFoundError(resource, str(comment_id))
            return comment

    async def update_content(self, comment_id: CommentId, content: str) -> Comment:
        """Replace the content of a comment.

        Only ``content`` and ``updated_at`` change; owner and thread links
        are left as they were.

        Args:
            comment_id: Comment ID
            content: New content

        Returns:
            Updated comment

        Raises:
            ValidationError: If content is empty after trimming
            NotFoundError: If the comment does not exist
        """
        with logfire.span(
            "comment_service.update_content",
            comment_id=str(comment_id),
            content_length=len(content or ""),
        ):
            text = normalize_content(content, self.max_content_length)
            updated = await self.comment_repository.update_content(
                comment_id, text, datetime.now(timezone.utc)
            )
            if updated is None:
                logfire.warn(
                    "Comment not found for content update", comment_id=str(comment_id)
                )
                raise NotFoundError("comment", str(comment_id))

            logfire.info("Comment content updated", comment_id=str(comment_id))
            return updated

    async def delete_by_id(self, comment_id: CommentId) -> None:
        """Delete one comment. Replies are not touched.

        Raises:
            NotFoundError: If the comment does not exist
        """
        with logfire.span("comment_service.delete_by_id", comment_id=str(comment_id)):
            deleted = await self.comment_repository.delete(comment_id)
            if not deleted:
                logfire.warn("Comment not found for delete", comment_id=str(comment_id))
                raise NotFoundError("comment", str(comment_id))
            logfire.info("Comment deleted", comment_id=str(comment_id))

    async def delete_many(self, comment_ids: list[CommentId]) -> int:
        """Delete several comments, ignoring IDs that are already gone.

        Returns:
            Number of comments removed
        """
        if not comment_ids:
            return 0
        with logfire.span("comment_service.delete_many", count=len(comment_ids)):
            removed = await self.comment_repository.delete_many(comment_ids)
            logfire.info(
                "Comments deleted", requested=len(comment_ids), removed=removed
            )
            return removed

    async def list_top_level_by_video(
        self,
        video_id: VideoId,
        page_request: PageRequest,
        sort_field: SortField = SortField.CREATED_AT,
        sort_order: SortOrder = SortOrder.DESC,
    ) -> Page[Comment]:
        """Get one page of top-level comments for a video."""
        with logfire.span(
            "comment_service.list_top_level_by_video",
            video_id=str(video_id),
            page=page_request.page,
            page_size=page_request.page_size,
            sort_field=sort_field.value,
            sort_order=sort_order.value,
        ):
            page = await self.comment_repository.find_top_level_by_video(
                video_id=video_id,
                page_request=page_request,
                sort_field=sort_field,
                sort_order=sort_order,
            )
            logfire.info(
                "Top-level comments retrieved",
                video_id=str(video_id),
                count=len(page.items),
                total=page.total,
            )
            return page

    async def list_replies_by_parent(
        self, parent_id: CommentId, page_request: PageRequest
    ) -> Page[Comment]:
        """Get one page of replies to a comment, oldest first."""
        with logfire.span(
            "comment_service.list_replies_by_parent",
            parent_id=str(parent_id),
            page=page_request.page,
            page_size=page_request.page_size,
        ):
            page = await self.comment_repository.find_replies(parent_id, page_request)
            logfire.info(
                "Replies retrieved",
                parent_id=str(parent_id),
                count=len(page.items),
                total=page.total,
            )
            return page

    async def list_all(self, page_request: PageRequest) -> Page[Comment]:
        """Get one page of every comment in the store."""
        with logfire.span(
            "comment_service.list_all",
            page=page_request.page,
            page_size=page_request.page_size,
        ):
            return await self.comment_repository.find_all(page_request)

    async def list_reply_ids(self, parent_id: CommentId) -> list[CommentId]:
        """List IDs of every reply to a comment."""
        with logfire.span("comment_service.list_reply_ids", parent_id=str(parent_id)):
            return await self.comment_repository.find_reply_ids(parent_id)
