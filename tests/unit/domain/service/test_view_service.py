"""Unit tests for CommentViewService."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest

from tube.domain.error import DependencyError
from tube.domain.model import Comment, PublicProfile
from tube.domain.repository import CommentRepository, ProfileRepository
from tube.domain.service import CommentService, CommentViewService, ThreadService
from tube.domain.value import CommentId, PageRequest, UserId, VideoId
from tube.domain.value.types import SortField, SortOrder
from tube.persistence.repository.inmemory import InMemoryStore
from tests.conftest import seed_user
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

BASE_TIME = datetime(2026, 1, 1, 12, 0, tzinfo=timezone.utc)


class FailingProfileRepository(ProfileRepository):
    """Profile lookup that is always unavailable."""

    async def find_profiles(
        self, user_ids: list[UserId]
    ) -> dict[UserId, PublicProfile]:
        raise ConnectionError("identity service unreachable")


async def _save_top_level(
    comment_repo: CommentRepository,
    video_id: VideoId,
    owner_id: UserId,
    minutes: int,
    content: str,
) -> Comment:
    comment = Comment(
        id=CommentId(uuid4()),
        content=content,
        owner_id=owner_id,
        video_id=video_id,
        created_at=BASE_TIME + timedelta(minutes=minutes),
        updated_at=BASE_TIME + timedelta(minutes=minutes),
    )
    return await comment_repo.save(comment)


class TestTopLevelPage:
    """Tests for top_level_page method."""

    @pytest.mark.asyncio
    async def test_newest_first_with_owner(self, unit_env):
        """Default listing should be newest first and carry owner profiles."""
        # Arrange
        view_service = await unit_env.get(CommentViewService)
        comment_repo = await unit_env.get(CommentRepository)
        store = await unit_env.get(InMemoryStore)
        owner_id = seed_user(store, handle="alice", display_name="Alice")
        video_id = VideoId(uuid4())
        older = await _save_top_level(comment_repo, video_id, owner_id, 1, "Older")
        newer = await _save_top_level(comment_repo, video_id, owner_id, 2, "Newer")

        # Act
        page = await view_service.top_level_page(video_id, PageRequest())

        # Assert
        assert [c.id for c in page.items] == [newer.id, older.id]
        assert page.items[0].owner.display_name == "Alice"
        assert page.items[0].owner.handle.root == "alice"
        assert page.items[0].video_id == video_id

    @pytest.mark.asyncio
    async def test_ascending_sort(self, unit_env):
        view_service = await unit_env.get(CommentViewService)
        comment_repo = await unit_env.get(CommentRepository)
        store = await unit_env.get(InMemoryStore)
        owner_id = seed_user(store)
        video_id = VideoId(uuid4())
        older = await _save_top_level(comment_repo, video_id, owner_id, 1, "Older")
        newer = await _save_top_level(comment_repo, video_id, owner_id, 2, "Newer")

        page = await view_service.top_level_page(
            video_id, PageRequest(), SortField.CREATED_AT, SortOrder.ASC
        )

        assert [c.id for c in page.items] == [older.id, newer.id]

    @pytest.mark.asyncio
    async def test_pages_are_disjoint_and_cover_all(self, unit_env):
        """Walking the pages should visit every comment exactly once."""
        # Arrange
        view_service = await unit_env.get(CommentViewService)
        comment_repo = await unit_env.get(CommentRepository)
        store = await unit_env.get(InMemoryStore)
        owner_id = seed_user(store)
        video_id = VideoId(uuid4())
        saved = [
            await _save_top_level(comment_repo, video_id, owner_id, 0, f"Same {i}")
            for i in range(7)
        ]

        # Act
        seen = []
        for number in (1, 2, 3):
            page = await view_service.top_level_page(
                video_id, PageRequest(page=number, page_size=3)
            )
            seen.extend(c.id for c in page.items)

        # Assert
        assert len(seen) == 7
        assert set(seen) == {c.id for c in saved}
        assert page.total == 7
        assert page.has_next_page is False

    @pytest.mark.asyncio
    async def test_replies_are_not_listed(self, unit_env):
        # Arrange
        view_service = await unit_env.get(CommentViewService)
        comment_service = await unit_env.get(CommentService)
        store = await unit_env.get(InMemoryStore)
        owner_id = seed_user(store)
        video_id = VideoId(uuid4())
        parent = await comment_service.create(
            content="Parent", owner_id=owner_id, video_id=video_id
        )
        await comment_service.create(
            content="Reply", owner_id=owner_id, parent_comment_id=parent.id
        )

        # Act
        page = await view_service.top_level_page(video_id, PageRequest())

        # Assert
        assert page.total == 1
        assert page.items[0].id == parent.id

    @pytest.mark.asyncio
    async def test_missing_profile_fails_the_page(self, unit_env):
        """Rows are never returned without their owner."""
        # Arrange
        view_service = await unit_env.get(CommentViewService)
        comment_repo = await unit_env.get(CommentRepository)
        video_id = VideoId(uuid4())
        await _save_top_level(comment_repo, video_id, UserId(uuid4()), 1, "Ghost")

        # Act & Assert
        with pytest.raises(DependencyError, match="Owner profile unavailable"):
            await view_service.top_level_page(video_id, PageRequest())

    @pytest.mark.asyncio
    async def test_profile_lookup_failure_raises_dependency_error(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        thread_service = await unit_env.get(ThreadService)
        comment_repo = await unit_env.get(CommentRepository)
        view_service = CommentViewService(
            comment_service=comment_service,
            thread_service=thread_service,
            profile_repository=FailingProfileRepository(),
        )
        video_id = VideoId(uuid4())
        await _save_top_level(comment_repo, video_id, UserId(uuid4()), 1, "Hello")

        # Act & Assert
        with pytest.raises(DependencyError, match="lookup failed"):
            await view_service.top_level_page(video_id, PageRequest())

    @pytest.mark.asyncio
    async def test_empty_page_needs_no_profiles(self, unit_env):
        view_service = await unit_env.get(CommentViewService)

        page = await view_service.top_level_page(VideoId(uuid4()), PageRequest())

        assert page.items == []
        assert page.total == 0


class TestRepliesPage:
    """Tests for replies_page method."""

    @pytest.mark.asyncio
    async def test_replies_oldest_first_with_parent_video(self, unit_env):
        # Arrange
        view_service = await unit_env.get(CommentViewService)
        comment_repo = await unit_env.get(CommentRepository)
        store = await unit_env.get(InMemoryStore)
        owner_id = seed_user(store)
        video_id = VideoId(uuid4())
        parent = await _save_top_level(comment_repo, video_id, owner_id, 0, "Parent")
        replies = []
        for minutes in (3, 1, 2):
            reply = Comment(
                id=CommentId(uuid4()),
                content=f"Reply at {minutes}",
                owner_id=owner_id,
                parent_comment_id=parent.id,
                created_at=BASE_TIME + timedelta(minutes=minutes),
                updated_at=BASE_TIME + timedelta(minutes=minutes),
            )
            replies.append(await comment_repo.save(reply))

        # Act
        page = await view_service.replies_page(parent, PageRequest())

        # Assert
        assert [c.content for c in page.items] == [
            "Reply at 1",
            "Reply at 2",
            "Reply at 3",
        ]
        assert all(c.video_id == video_id for c in page.items)
        assert all(c.parent_comment_id == parent.id for c in page.items)


class TestAllPage:
    """Tests for all_page method."""

    @pytest.mark.asyncio
    async def test_lists_comments_and_replies(self, unit_env):
        # Arrange
        view_service = await unit_env.get(CommentViewService)
        comment_service = await unit_env.get(CommentService)
        store = await unit_env.get(InMemoryStore)
        owner_id = seed_user(store)
        video_id = VideoId(uuid4())
        parent = await comment_service.create(
            content="Parent", owner_id=owner_id, video_id=video_id
        )
        reply = await comment_service.create(
            content="Reply", owner_id=owner_id, parent_comment_id=parent.id
        )

        # Act
        page = await view_service.all_page(PageRequest())

        # Assert
        assert page.total == 2
        assert {c.id for c in page.items} == {parent.id, reply.id}
        assert all(c.video_id == video_id for c in page.items)


class TestEnrich:
    """Tests for enrich method."""

    @pytest.mark.asyncio
    async def test_enrich_reply_derives_video(self, unit_env):
        view_service = await unit_env.get(CommentViewService)
        comment_service = await unit_env.get(CommentService)
        store = await unit_env.get(InMemoryStore)
        owner_id = seed_user(store, handle="bob")
        video_id = VideoId(uuid4())
        parent = await comment_service.create(
            content="Parent", owner_id=owner_id, video_id=video_id
        )
        reply = await comment_service.create(
            content="Reply", owner_id=owner_id, parent_comment_id=parent.id
        )

        enriched = await view_service.enrich(reply)

        assert enriched.video_id == video_id
        assert enriched.parent_comment_id == parent.id
        assert enriched.owner.user_id == owner_id
