"""Unit tests for UpdateCommentUseCase."""

from uuid import uuid4

import pytest

from tube.application.usecase.comment import UpdateCommentRequest, UpdateCommentUseCase
from tube.domain.error import (
    DependencyError,
    ForbiddenError,
    NotFoundError,
    ValidationError,
)
from tube.domain.repository import CommentRepository
from tube.domain.service import CommentService
from tube.domain.value import UserId
from tube.persistence.repository.inmemory import InMemoryStore
from tests.conftest import seed_user, seed_video
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestUpdateCommentUseCase:
    """Tests for UpdateCommentUseCase."""

    @pytest.mark.asyncio
    async def test_owner_can_edit(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpdateCommentUseCase)
        comment_service = await unit_env.get(CommentService)
        store = await unit_env.get(InMemoryStore)
        owner_id = seed_user(store)
        comment = await comment_service.create(
            content="Original", owner_id=owner_id, video_id=seed_video(store)
        )

        # Act
        result = await use_case.execute(
            UpdateCommentRequest(
                comment_id=str(comment.id),
                user_id=str(owner_id),
                content=" Edited ",
            )
        )

        # Assert
        assert result.content == "Edited"
        assert result.comment_id == str(comment.id)
        assert result.created_at == comment.created_at

    @pytest.mark.asyncio
    async def test_owner_can_edit_reply(self, unit_env):
        """Replies are editable through the comment route too."""
        use_case = await unit_env.get(UpdateCommentUseCase)
        comment_service = await unit_env.get(CommentService)
        store = await unit_env.get(InMemoryStore)
        owner_id = seed_user(store)
        video_id = seed_video(store)
        parent = await comment_service.create(
            content="Parent", owner_id=owner_id, video_id=video_id
        )
        reply = await comment_service.create(
            content="Reply", owner_id=owner_id, parent_comment_id=parent.id
        )

        result = await use_case.execute(
            UpdateCommentRequest(
                comment_id=str(reply.id), user_id=str(owner_id), content="Edited"
            )
        )

        assert result.content == "Edited"
        assert result.video_id == str(video_id)
        assert result.parent_comment_id == str(parent.id)

    @pytest.mark.asyncio
    async def test_non_owner_cannot_edit(self, unit_env):
        # Arrange
        use_case = await unit_env.get(UpdateCommentUseCase)
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        store = await unit_env.get(InMemoryStore)
        comment = await comment_service.create(
            content="Original", owner_id=seed_user(store), video_id=seed_video(store)
        )

        # Act & Assert
        with pytest.raises(ForbiddenError):
            await use_case.execute(
                UpdateCommentRequest(
                    comment_id=str(comment.id),
                    user_id=str(seed_user(store, handle="intruder")),
                    content="Hijacked",
                )
            )

        saved = await comment_repo.find_by_id(comment.id)
        assert saved.content == "Original"

    @pytest.mark.asyncio
    async def test_anonymous_cannot_edit(self, unit_env):
        use_case = await unit_env.get(UpdateCommentUseCase)
        comment_service = await unit_env.get(CommentService)
        store = await unit_env.get(InMemoryStore)
        comment = await comment_service.create(
            content="Original", owner_id=seed_user(store), video_id=seed_video(store)
        )

        with pytest.raises(ForbiddenError):
            await use_case.execute(
                UpdateCommentRequest(
                    comment_id=str(comment.id), user_id=None, content="Anon"
                )
            )

    @pytest.mark.asyncio
    async def test_missing_comment_raises_not_found(self, unit_env):
        use_case = await unit_env.get(UpdateCommentUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                UpdateCommentRequest(
                    comment_id=str(uuid4()), user_id=str(uuid4()), content="Edit"
                )
            )

    @pytest.mark.asyncio
    async def test_empty_content_rejected(self, unit_env):
        use_case = await unit_env.get(UpdateCommentUseCase)
        comment_service = await unit_env.get(CommentService)
        store = await unit_env.get(InMemoryStore)
        owner_id = seed_user(store)
        comment = await comment_service.create(
            content="Original", owner_id=owner_id, video_id=seed_video(store)
        )

        with pytest.raises(ValidationError):
            await use_case.execute(
                UpdateCommentRequest(
                    comment_id=str(comment.id), user_id=str(owner_id), content=""
                )
            )

    @pytest.mark.asyncio
    async def test_owner_without_profile_leaves_content(self, unit_env):
        """An edit that cannot be shown with its owner is not applied."""
        # Arrange
        use_case = await unit_env.get(UpdateCommentUseCase)
        comment_service = await unit_env.get(CommentService)
        store = await unit_env.get(InMemoryStore)
        ghost_id = UserId(uuid4())
        comment = await comment_service.create(
            content="Original", owner_id=ghost_id, video_id=seed_video(store)
        )

        # Act & Assert
        with pytest.raises(DependencyError):
            await use_case.execute(
                UpdateCommentRequest(
                    comment_id=str(comment.id), user_id=str(ghost_id), content="New"
                )
            )

        assert store.comments[comment.id].content == "Original"
        assert store.comments[comment.id].updated_at == comment.updated_at
