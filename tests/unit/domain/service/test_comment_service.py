"""Unit tests for CommentService."""

from uuid import uuid4

import pytest

from tube.domain.error import NotFoundError, ValidationError
from tube.domain.repository import CommentRepository
from tube.domain.service import CommentService, normalize_content
from tube.domain.value import CommentId, PageRequest, UserId, VideoId
from tube.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryStore,
)
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


class TestNormalizeContent:
    """Tests for content normalization."""

    def test_trims_whitespace(self):
        assert normalize_content("  hi there \n") == "hi there"

    @pytest.mark.parametrize("content", ["", "   ", "\n\t", None])
    def test_rejects_empty(self, content):
        with pytest.raises(ValidationError, match="must not be empty"):
            normalize_content(content)

    def test_rejects_too_long(self):
        with pytest.raises(ValidationError, match="at most 5 characters"):
            normalize_content("abcdef", max_length=5)


class TestCreate:
    """Tests for create method."""

    @pytest.mark.asyncio
    async def test_create_top_level_comment(self, unit_env):
        """Top-level comment should be stored against its video."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        video_id = VideoId(uuid4())
        owner_id = UserId(uuid4())

        # Act
        result = await comment_service.create(
            content="  Great video  ", owner_id=owner_id, video_id=video_id
        )

        # Assert
        assert result.content == "Great video"
        assert result.video_id == video_id
        assert result.parent_comment_id is None
        assert result.created_at == result.updated_at
        assert result.created_at.tzinfo is not None

        saved = await comment_repo.find_by_id(result.id)
        assert saved == result

    @pytest.mark.asyncio
    async def test_create_reply_does_not_store_video(self, unit_env):
        """Replies should link to their parent only."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        parent = await comment_service.create(
            content="Parent", owner_id=UserId(uuid4()), video_id=VideoId(uuid4())
        )

        # Act
        reply = await comment_service.create(
            content="Reply",
            owner_id=UserId(uuid4()),
            video_id=parent.video_id,
            parent_comment_id=parent.id,
        )

        # Assert
        assert reply.parent_comment_id == parent.id
        assert reply.video_id is None

    @pytest.mark.asyncio
    async def test_create_with_blank_content_raises(self, unit_env):
        """Blank content should be rejected before anything is stored."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)

        # Act & Assert
        with pytest.raises(ValidationError):
            await comment_service.create(
                content="   ", owner_id=UserId(uuid4()), video_id=VideoId(uuid4())
            )

        page = await comment_repo.find_all(PageRequest())
        assert page.total == 0

    @pytest.mark.asyncio
    async def test_configured_length_limit_is_the_only_cap(self):
        """A raised limit should allow content past the default maximum."""
        # Arrange
        comment_service = CommentService(
            InMemoryCommentRepository(InMemoryStore()), max_content_length=20000
        )

        # Act
        result = await comment_service.create(
            content="x" * 15000, owner_id=UserId(uuid4()), video_id=VideoId(uuid4())
        )

        # Assert
        assert len(result.content) == 15000

    @pytest.mark.asyncio
    async def test_content_over_configured_limit_raises(self):
        """Content longer than the configured limit is a validation error."""
        comment_service = CommentService(
            InMemoryCommentRepository(InMemoryStore()), max_content_length=20
        )

        with pytest.raises(ValidationError, match="at most 20 characters"):
            await comment_service.create(
                content="x" * 21, owner_id=UserId(uuid4()), video_id=VideoId(uuid4())
            )


class TestGetById:
    """Tests for get_by_id method."""

    @pytest.mark.asyncio
    async def test_missing_comment_raises_not_found(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        missing_id = CommentId(uuid4())

        with pytest.raises(NotFoundError, match="comment not found"):
            await comment_service.get_by_id(missing_id)

    @pytest.mark.asyncio
    async def test_resource_name_is_used_in_error(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError) as exc_info:
            await comment_service.get_by_id(CommentId(uuid4()), resource="reply")

        assert exc_info.value.resource == "reply"


class TestUpdateContent:
    """Tests for update_content method."""

    @pytest.mark.asyncio
    async def test_update_changes_only_content_and_updated_at(self, unit_env):
        """Owner, video and created_at should be untouched."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        original = await comment_service.create(
            content="Before", owner_id=UserId(uuid4()), video_id=VideoId(uuid4())
        )

        # Act
        updated = await comment_service.update_content(original.id, " After ")

        # Assert
        assert updated.content == "After"
        assert updated.owner_id == original.owner_id
        assert updated.video_id == original.video_id
        assert updated.created_at == original.created_at
        assert updated.updated_at >= original.updated_at

    @pytest.mark.asyncio
    async def test_update_missing_comment_raises(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.update_content(CommentId(uuid4()), "text")

    @pytest.mark.asyncio
    async def test_update_with_empty_content_raises(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        original = await comment_service.create(
            content="Before", owner_id=UserId(uuid4()), video_id=VideoId(uuid4())
        )

        with pytest.raises(ValidationError):
            await comment_service.update_content(original.id, "")


class TestDelete:
    """Tests for delete_by_id and delete_many methods."""

    @pytest.mark.asyncio
    async def test_delete_by_id_leaves_replies(self, unit_env):
        """Single delete should not cascade."""
        # Arrange
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        parent = await comment_service.create(
            content="Parent", owner_id=UserId(uuid4()), video_id=VideoId(uuid4())
        )
        reply = await comment_service.create(
            content="Reply", owner_id=UserId(uuid4()), parent_comment_id=parent.id
        )

        # Act
        await comment_service.delete_by_id(parent.id)

        # Assert
        assert await comment_repo.find_by_id(parent.id) is None
        assert await comment_repo.find_by_id(reply.id) is not None

    @pytest.mark.asyncio
    async def test_delete_missing_comment_raises(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.delete_by_id(CommentId(uuid4()))

    @pytest.mark.asyncio
    async def test_delete_many_ignores_missing_ids(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment = await comment_service.create(
            content="One", owner_id=UserId(uuid4()), video_id=VideoId(uuid4())
        )

        removed = await comment_service.delete_many([comment.id, CommentId(uuid4())])

        assert removed == 1

    @pytest.mark.asyncio
    async def test_delete_many_with_no_ids(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        assert await comment_service.delete_many([]) == 0
