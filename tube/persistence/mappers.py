"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from tube.domain.model import Comment, PublicProfile
from tube.domain.value import CommentId, UserId, VideoId
from tube.domain.value.types import Handle


def _uuid(value: Any) -> UUID | None:
    if value is None:
        return None
    return UUID(value) if isinstance(value, str) else value


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    video_id = _uuid(row.get("video_id"))
    parent_comment_id = _uuid(row.get("parent_comment_id"))
    return Comment(
        id=CommentId(_uuid(row["id"])),
        content=row["content"],
        owner_id=UserId(_uuid(row["owner_id"])),
        video_id=VideoId(video_id) if video_id else None,
        parent_comment_id=CommentId(parent_comment_id) if parent_comment_id else None,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Args:
        comment: Comment domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return comment.model_dump()


def row_to_profile(row: Dict[str, Any]) -> PublicProfile:
    """Convert a users row to the public profile projection.

    Args:
        row: Database row as dict

    Returns:
        PublicProfile domain model
    """
    return PublicProfile(
        user_id=UserId(_uuid(row["id"])),
        display_name=row["full_name"],
        handle=Handle(row["username"]),
        avatar_url=row.get("avatar_url"),
    )
