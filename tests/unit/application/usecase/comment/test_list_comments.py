"""Unit tests for ListCommentsUseCase and ListAllCommentsUseCase."""

from uuid import uuid4

import pytest

from tube.application.usecase.comment import (
    ListAllCommentsRequest,
    ListAllCommentsUseCase,
    ListCommentsRequest,
    ListCommentsUseCase,
)
from tube.domain.error import NotFoundError
from tube.domain.service import CommentService
from tube.persistence.repository.inmemory import InMemoryStore
from tests.conftest import seed_user, seed_video
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListCommentsUseCase:
    """Tests for ListCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_lenient_paging_values_fall_back(self, unit_env):
        """Bad page and limit values should not fail the listing."""
        # Arrange
        use_case = await unit_env.get(ListCommentsUseCase)
        comment_service = await unit_env.get(CommentService)
        store = await unit_env.get(InMemoryStore)
        video_id = seed_video(store)
        owner_id = seed_user(store)
        for i in range(3):
            await comment_service.create(
                content=f"Comment {i}", owner_id=owner_id, video_id=video_id
            )

        # Act
        result = await use_case.execute(
            ListCommentsRequest(
                video_id=str(video_id),
                page="abc",
                limit="0",
                sort_by="bogus",
                sort_order="sideways",
            )
        )

        # Assert
        assert result.page == 1
        assert result.page_size == 10
        assert result.total == 3
        assert len(result.items) == 3
        assert result.paging_counter == 1
        assert result.has_next_page is False

    @pytest.mark.asyncio
    async def test_page_size_and_envelope(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListCommentsUseCase)
        comment_service = await unit_env.get(CommentService)
        store = await unit_env.get(InMemoryStore)
        video_id = seed_video(store)
        owner_id = seed_user(store)
        for i in range(5):
            await comment_service.create(
                content=f"Comment {i}", owner_id=owner_id, video_id=video_id
            )

        # Act
        result = await use_case.execute(
            ListCommentsRequest(video_id=str(video_id), page="2", limit="2")
        )

        # Assert
        assert len(result.items) == 2
        assert result.total == 5
        assert result.total_pages == 3
        assert result.prev_page == 1
        assert result.next_page == 3
        assert result.paging_counter == 3

    @pytest.mark.asyncio
    async def test_unknown_video_raises_not_found(self, unit_env):
        use_case = await unit_env.get(ListCommentsUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(ListCommentsRequest(video_id=str(uuid4())))

    @pytest.mark.asyncio
    async def test_video_without_comments_is_empty(self, unit_env):
        use_case = await unit_env.get(ListCommentsUseCase)
        store = await unit_env.get(InMemoryStore)
        video_id = seed_video(store)

        result = await use_case.execute(ListCommentsRequest(video_id=str(video_id)))

        assert result.items == []
        assert result.total == 0
        assert result.total_pages == 0


class TestListAllCommentsUseCase:
    """Tests for ListAllCommentsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_across_videos(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListAllCommentsUseCase)
        comment_service = await unit_env.get(CommentService)
        store = await unit_env.get(InMemoryStore)
        owner_id = seed_user(store)
        first = await comment_service.create(
            content="On first", owner_id=owner_id, video_id=seed_video(store)
        )
        await comment_service.create(
            content="On second", owner_id=owner_id, video_id=seed_video(store)
        )
        await comment_service.create(
            content="Reply", owner_id=owner_id, parent_comment_id=first.id
        )

        # Act
        result = await use_case.execute(ListAllCommentsRequest(limit="2"))

        # Assert
        assert result.total == 3
        assert len(result.items) == 2
        assert result.has_next_page is True
