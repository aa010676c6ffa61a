"""Domain value objects for Tube."""

from tube.domain.value.identifiers import CommentId, UserId, VideoId, parse_uuid
from tube.domain.value.pagination import Page, PageRequest
from tube.domain.value.types import Handle, SortField, SortOrder

__all__ = [
    # Identifiers
    "UserId",
    "VideoId",
    "CommentId",
    "parse_uuid",
    # Pagination
    "Page",
    "PageRequest",
    # Types
    "Handle",
    "SortField",
    "SortOrder",
]
