"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Optional

from tube.domain.model.comment import Comment
from tube.domain.value import CommentId, Page, PageRequest, VideoId
from tube.domain.value.types import SortField, SortOrder


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_top_level_by_video(
        self,
        video_id: VideoId,
        page_request: PageRequest,
        sort_field: SortField = SortField.CREATED_AT,
        sort_order: SortOrder = SortOrder.DESC,
    ) -> Page[Comment]:
        """Find one page of top-level comments on a video.

        Ties on ``sort_field`` are broken by comment id so that paging is
        deterministic.

        Args:
            video_id: The video ID
            page_request: Page number and size
            sort_field: Timestamp to order by
            sort_order: Sort direction

        Returns:
            Page of top-level comments
        """
        pass

    @abstractmethod
    async def find_replies(
        self, parent_id: CommentId, page_request: PageRequest
    ) -> Page[Comment]:
        """Find one page of replies to a comment, oldest first.

        Args:
            parent_id: The parent comment ID
            page_request: Page number and size

        Returns:
            Page of replies
        """
        pass

    @abstractmethod
    async def find_all(self, page_request: PageRequest) -> Page[Comment]:
        """Find one page of all comments and replies, newest first."""
        pass

    @abstractmethod
    async def find_reply_ids(self, parent_id: CommentId) -> list[CommentId]:
        """List the IDs of every reply to a comment.

        Args:
            parent_id: The parent comment ID

        Returns:
            Reply IDs (unpaginated)
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment.

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def update_content(
        self, comment_id: CommentId, content: str, updated_at: datetime
    ) -> Optional[Comment]:
        """Replace the content of a comment.

        Args:
            comment_id: The comment ID
            content: New, already validated content
            updated_at: New modification timestamp

        Returns:
            The updated comment, or None if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a single comment (hard delete, no cascade).

        Args:
            comment_id: The comment ID to delete

        Returns:
            True if a record was removed
        """
        pass

    @abstractmethod
    async def delete_many(self, comment_ids: list[CommentId]) -> int:
        """Delete several comments at once.

        Args:
            comment_ids: IDs to delete; missing IDs are ignored

        Returns:
            Number of records removed
        """
        pass
