"""Update reply use case."""

from pydantic import BaseModel

from tube.application.usecase.base import BaseUseCase
from tube.application.usecase.comment.common import CommentItem
from tube.domain.service import (
    CommentService,
    CommentViewService,
    OwnershipService,
    ThreadService,
)
from tube.domain.value import CommentId, UserId, parse_uuid


class UpdateReplyRequest(BaseModel):
    """Update reply request."""

    parent_comment_id: str  # UUID string of the parent named in the route
    reply_id: str  # UUID string
    user_id: str | None  # Acting principal (must be owner)
    content: str


class UpdateReplyUseCase(BaseUseCase):
    """Use case for editing a reply under a given parent comment."""

    def __init__(
        self,
        comment_service: CommentService,
        thread_service: ThreadService,
        ownership_service: OwnershipService,
        view_service: CommentViewService,
    ) -> None:
        self.comment_service = comment_service
        self.thread_service = thread_service
        self.ownership_service = ownership_service
        self.view_service = view_service

    async def execute(self, request: UpdateReplyRequest) -> CommentItem:
        """Execute update reply flow.

        Raises:
            ValidationError: If content is empty or an id is malformed
            NotFoundError: If the parent or reply does not exist
            InvariantViolationError: If the reply belongs to another comment
            ForbiddenError: If the principal does not own the reply
            DependencyError: If the owner's profile could not be resolved
        """
        parent_comment_id = CommentId(
            parse_uuid(request.parent_comment_id, "comment")
        )
        reply_id = CommentId(parse_uuid(request.reply_id, "reply"))
        principal_id = (
            UserId(parse_uuid(request.user_id, "user")) if request.user_id else None
        )

        content = self.thread_service.validate_content(request.content)

        await self.comment_service.get_by_id(parent_comment_id)
        reply = await self.comment_service.get_by_id(reply_id, resource="reply")
        self.thread_service.check_reply_belongs(reply, parent_comment_id)
        self.ownership_service.authorize_mutation(reply, principal_id)
        owner = await self.view_service.owner_profile(reply.owner_id)

        updated = await self.comment_service.update_content(reply_id, content)
        enriched = await self.view_service.enrich(updated, owner=owner)
        return CommentItem.from_domain(enriched)
