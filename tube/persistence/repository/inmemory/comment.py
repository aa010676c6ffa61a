"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional

from tube.domain.model.comment import Comment
from tube.domain.repository.comment import CommentRepository
from tube.domain.value import CommentId, Page, PageRequest, VideoId
from tube.domain.value.types import SortField, SortOrder

from .store import InMemoryStore


def _slice(comments: list[Comment], page_request: PageRequest) -> Page[Comment]:
    start = page_request.offset
    return Page.build(
        comments[start : start + page_request.page_size],
        len(comments),
        page_request,
    )


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _comments(self) -> dict[CommentId, Comment]:
        return self._store.comments

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_top_level_by_video(
        self,
        video_id: VideoId,
        page_request: PageRequest,
        sort_field: SortField = SortField.CREATED_AT,
        sort_order: SortOrder = SortOrder.DESC,
    ) -> Page[Comment]:
        """Find one page of top-level comments on a video."""
        comments = [
            c
            for c in self._comments.values()
            if c.video_id == video_id and c.parent_comment_id is None
        ]

        # Sort by the requested timestamp, ties broken by id
        comments.sort(
            key=lambda c: (getattr(c, sort_field.value), str(c.id)),
            reverse=sort_order == SortOrder.DESC,
        )

        return _slice(comments, page_request)

    async def find_replies(
        self, parent_id: CommentId, page_request: PageRequest
    ) -> Page[Comment]:
        """Find one page of replies to a comment, oldest first."""
        comments = [
            c for c in self._comments.values() if c.parent_comment_id == parent_id
        ]
        comments.sort(key=lambda c: (c.created_at, str(c.id)))
        return _slice(comments, page_request)

    async def find_all(self, page_request: PageRequest) -> Page[Comment]:
        """Find one page of all comments, newest first."""
        comments = sorted(
            self._comments.values(),
            key=lambda c: (c.created_at, str(c.id)),
            reverse=True,
        )
        return _slice(comments, page_request)

    async def find_reply_ids(self, parent_id: CommentId) -> list[CommentId]:
        """List IDs of every reply to a comment."""
        return [
            c.id for c in self._comments.values() if c.parent_comment_id == parent_id
        ]

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._comments[comment.id] = comment
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str, updated_at: datetime
    ) -> Optional[Comment]:
        """Replace the content of a comment."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None

        # Comments are immutable, store an updated copy
        updated = comment.with_content(content, updated_at)
        self._comments[comment_id] = updated
        return updated

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment."""
        return self._comments.pop(comment_id, None) is not None

    async def delete_many(self, comment_ids: list[CommentId]) -> int:
        """Delete several comments."""
        return sum(
            1
            for comment_id in comment_ids
            if self._comments.pop(comment_id, None) is not None
        )
