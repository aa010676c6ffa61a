"""SQLAlchemy table definitions for Tube.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (owned by the identity service, read for public profiles)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(255), nullable=False, unique=True),
    Column("full_name", String(255), nullable=False),
    Column("avatar_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_users_username", users_table.c.username)

# ============================================================================
# VIDEOS TABLE (owned by the media service, read for existence checks)
# ============================================================================
videos_table = Table(
    "videos",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "owner_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("title", String(300), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_videos_owner_id", videos_table.c.owner_id)

# ============================================================================
# COMMENTS TABLE (top-level comments and one level of replies)
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("content", Text, nullable=False),
    Column(
        "video_id", UUID, ForeignKey("videos.id", ondelete="CASCADE"), nullable=True
    ),
    # Video deletion removes top-level comments, which takes their replies along
    Column(
        "parent_comment_id",
        UUID,
        ForeignKey("comments.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column(
        "owner_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("length(btrim(content)) > 0", name="content_not_blank"),
    CheckConstraint(
        "(video_id IS NULL) <> (parent_comment_id IS NULL)",
        name="video_xor_parent",
    ),
)

Index(
    "idx_comments_video_id_created_at",
    comments_table.c.video_id,
    comments_table.c.created_at,
)
Index("idx_comments_parent_comment_id", comments_table.c.parent_comment_id)
Index("idx_comments_owner_id", comments_table.c.owner_id)
