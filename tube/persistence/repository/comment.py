"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import Optional

import logfire
from sqlalchemy import Select, asc, delete, desc, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from tube.domain.model import Comment
from tube.domain.repository import CommentRepository
from tube.domain.value import CommentId, Page, PageRequest, VideoId
from tube.domain.value.types import SortField, SortOrder
from tube.persistence.mappers import comment_to_dict, row_to_comment
from tube.persistence.tables import comments_table

_SORT_COLUMNS = {
    SortField.CREATED_AT: comments_table.c.created_at,
    SortField.UPDATED_AT: comments_table.c.updated_at,
}


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def _paginate(
        self, stmt: Select, page_request: PageRequest
    ) -> Page[Comment]:
        """Run a filtered, ordered select as one page plus a total count.

        Args:
            stmt: Select over comments_table with filters and ordering applied
            page_request: Page number and size

        Returns:
            Page of comments
        """
        count_stmt = select(func.count()).select_from(
            stmt.order_by(None).subquery()
        )
        total = (await self.session.execute(count_stmt)).scalar() or 0

        page_stmt = stmt.limit(page_request.page_size).offset(page_request.offset)
        result = await self.session.execute(page_stmt)
        items = [row_to_comment(row._asdict()) for row in result.fetchall()]

        return Page.build(items, total, page_request)

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_top_level_by_video(
        self,
        video_id: VideoId,
        page_request: PageRequest,
        sort_field: SortField = SortField.CREATED_AT,
        sort_order: SortOrder = SortOrder.DESC,
    ) -> Page[Comment]:
        """Find one page of top-level comments on a video."""
        with logfire.span(
            "comment_repository.find_top_level_by_video",
            video_id=str(video_id),
            page=page_request.page,
            page_size=page_request.page_size,
        ):
            direction = desc if sort_order == SortOrder.DESC else asc
            stmt = (
                select(comments_table)
                .where(comments_table.c.video_id == video_id)
                .where(comments_table.c.parent_comment_id.is_(None))
                .order_by(
                    direction(_SORT_COLUMNS[sort_field]),
                    direction(comments_table.c.id),
                )
            )
            return await self._paginate(stmt, page_request)

    async def find_replies(
        self, parent_id: CommentId, page_request: PageRequest
    ) -> Page[Comment]:
        """Find one page of replies to a comment, oldest first."""
        with logfire.span(
            "comment_repository.find_replies",
            parent_id=str(parent_id),
            page=page_request.page,
            page_size=page_request.page_size,
        ):
            stmt = (
                select(comments_table)
                .where(comments_table.c.parent_comment_id == parent_id)
                .order_by(comments_table.c.created_at, comments_table.c.id)
            )
            return await self._paginate(stmt, page_request)

    async def find_all(self, page_request: PageRequest) -> Page[Comment]:
        """Find one page of all comments, newest first."""
        stmt = select(comments_table).order_by(
            desc(comments_table.c.created_at), desc(comments_table.c.id)
        )
        return await self._paginate(stmt, page_request)

    async def find_reply_ids(self, parent_id: CommentId) -> list[CommentId]:
        """List IDs of every reply to a comment."""
        stmt = select(comments_table.c.id).where(
            comments_table.c.parent_comment_id == parent_id
        )
        result = await self.session.execute(stmt)
        return [CommentId(row.id) for row in result.fetchall()]

    async def save(self, comment: Comment) -> Comment:
        """Insert a new comment."""
        stmt = comments_table.insert().values(**comment_to_dict(comment))
        await self.session.execute(stmt)
        await self.session.flush()
        return comment

    async def update_content(
        self, comment_id: CommentId, content: str, updated_at: datetime
    ) -> Optional[Comment]:
        """Replace the content of a comment."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(content=content, updated_at=updated_at)
            .returning(comments_table)
        )

        result = await self.session.execute(stmt)
        row = result.fetchone()

        if row is None:
            return None

        await self.session.flush()
        return row_to_comment(row._asdict())

    async def delete(self, comment_id: CommentId) -> bool:
        """Delete a comment (hard delete)."""
        stmt = delete(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0

    async def delete_many(self, comment_ids: list[CommentId]) -> int:
        """Delete several comments in one statement."""
        if not comment_ids:
            return 0
        stmt = delete(comments_table).where(comments_table.c.id.in_(comment_ids))
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount
