"""Unit tests for ListRepliesUseCase."""

from uuid import uuid4

import pytest

from tube.application.usecase.reply import ListRepliesRequest, ListRepliesUseCase
from tube.domain.error import NotFoundError
from tube.domain.service import CommentService
from tube.persistence.repository.inmemory import InMemoryStore
from tests.conftest import seed_user, seed_video
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListRepliesUseCase:
    """Tests for ListRepliesUseCase."""

    @pytest.mark.asyncio
    async def test_lists_only_replies_of_parent(self, unit_env):
        # Arrange
        use_case = await unit_env.get(ListRepliesUseCase)
        comment_service = await unit_env.get(CommentService)
        store = await unit_env.get(InMemoryStore)
        owner_id = seed_user(store)
        video_id = seed_video(store)
        parent = await comment_service.create(
            content="Parent", owner_id=owner_id, video_id=video_id
        )
        other = await comment_service.create(
            content="Other", owner_id=owner_id, video_id=video_id
        )
        mine = await comment_service.create(
            content="Mine", owner_id=owner_id, parent_comment_id=parent.id
        )
        await comment_service.create(
            content="Not mine", owner_id=owner_id, parent_comment_id=other.id
        )

        # Act
        result = await use_case.execute(
            ListRepliesRequest(parent_comment_id=str(parent.id))
        )

        # Assert
        assert result.total == 1
        assert result.items[0].comment_id == str(mine.id)
        assert result.items[0].video_id == str(video_id)

    @pytest.mark.asyncio
    async def test_paging_through_replies(self, unit_env):
        use_case = await unit_env.get(ListRepliesUseCase)
        comment_service = await unit_env.get(CommentService)
        store = await unit_env.get(InMemoryStore)
        owner_id = seed_user(store)
        parent = await comment_service.create(
            content="Parent", owner_id=owner_id, video_id=seed_video(store)
        )
        for i in range(4):
            await comment_service.create(
                content=f"Reply {i}", owner_id=owner_id, parent_comment_id=parent.id
            )

        result = await use_case.execute(
            ListRepliesRequest(parent_comment_id=str(parent.id), page="2", limit="3")
        )

        assert len(result.items) == 1
        assert result.total == 4
        assert result.has_prev_page is True
        assert result.has_next_page is False

    @pytest.mark.asyncio
    async def test_missing_parent_raises_not_found(self, unit_env):
        use_case = await unit_env.get(ListRepliesUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(ListRepliesRequest(parent_comment_id=str(uuid4())))
