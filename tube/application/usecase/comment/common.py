"""Response models shared by comment and reply use cases."""

from datetime import datetime

from pydantic import BaseModel

from tube.domain.model import EnrichedComment
from tube.domain.value import Page
from tube.domain.value.types import Handle


class OwnerItem(BaseModel):
    """Public identity of a comment's author."""

    user_id: str
    display_name: str
    handle: Handle
    avatar_url: str | None


class CommentItem(BaseModel):
    """Comment or reply in responses."""

    comment_id: str
    content: str
    video_id: str
    parent_comment_id: str | None
    owner: OwnerItem
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_domain(cls, comment: EnrichedComment) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            content=comment.content,
            video_id=str(comment.video_id),
            parent_comment_id=(
                str(comment.parent_comment_id) if comment.parent_comment_id else None
            ),
            owner=OwnerItem(
                user_id=str(comment.owner.user_id),
                display_name=comment.owner.display_name,
                handle=comment.owner.handle,
                avatar_url=comment.owner.avatar_url,
            ),
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


class CommentPageResponse(BaseModel):
    """One page of comments with the paginator envelope."""

    items: list[CommentItem]
    total: int
    page: int
    page_size: int
    total_pages: int
    has_prev_page: bool
    has_next_page: bool
    prev_page: int | None
    next_page: int | None
    paging_counter: int

    @classmethod
    def from_page(cls, page: Page[EnrichedComment]) -> "CommentPageResponse":
        return cls(
            items=[CommentItem.from_domain(item) for item in page.items],
            total=page.total,
            page=page.page,
            page_size=page.page_size,
            total_pages=page.total_pages,
            has_prev_page=page.has_prev_page,
            has_next_page=page.has_next_page,
            prev_page=page.prev_page,
            next_page=page.next_page,
            paging_counter=page.paging_counter,
        )
