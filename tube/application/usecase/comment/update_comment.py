"""Update comment use case."""

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


class UpdateCommentRequest(BaseModel):
    """Update comment request."""

    comment_id: str  # UUID string
    user_id: str | None  # Acting principal (must be owner)
    content: str  # New content (cannot be empty)


class UpdateCommentUseCase(BaseUseCase):
    """Use case for editing the content of a comment or reply."""

    def __init__(
        self,
        comment_service: CommentService,
        thread_service: ThreadService,
        ownership_service: OwnershipService,
        view_service: CommentViewService,
    ) -> None:
        """Initialize update comment use case.

        Args:
            comment_service: Comment domain service
            thread_service: Content validation
            ownership_service: Ownership checks
            view_service: Read projection builder
        """
        self.comment_service = comment_service
        self.thread_service = thread_service
        self.ownership_service = ownership_service
        self.view_service = view_service

    async def execute(self, request: UpdateCommentRequest) -> CommentItem:
        """Execute update comment flow.

        Raises:
            ValidationError: If content is empty or an id is malformed
            NotFoundError: If the comment does not exist
            ForbiddenError: If the principal does not own the comment
            DependencyError: If the owner's profile could not be resolved
        """
        comment_id = CommentId(parse_uuid(request.comment_id, "comment"))
        principal_id = (
            UserId(parse_uuid(request.user_id, "user")) if request.user_id else None
        )

        # 1. Validate content
        content = self.thread_service.validate_content(request.content)

        # 2. Retrieve existing comment
        comment = await self.comment_service.get_by_id(comment_id)

        # 3. Check authorization (user owns comment)
        self.ownership_service.authorize_mutation(comment, principal_id)

        # 4. Resolve the owner before writing
        owner = await self.view_service.owner_profile(comment.owner_id)

        # 5. Update via service
        updated = await self.comment_service.update_content(comment_id, content)

        enriched = await self.view_service.enrich(updated, owner=owner)
        return CommentItem.from_domain(enriched)
