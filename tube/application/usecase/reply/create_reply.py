"""Create reply use case."""

from pydantic import BaseModel

from tube.application.usecase.base import BaseUseCase
from tube.application.usecase.comment.common import CommentItem
from tube.domain.service import CommentService, CommentViewService, ThreadService
from tube.domain.value import CommentId, UserId, parse_uuid


class CreateReplyRequest(BaseModel):
    """Create reply request."""

    parent_comment_id: str  # UUID string of a top-level comment
    owner_id: str  # User ID from authenticated principal
    content: str


class CreateReplyUseCase(BaseUseCase):
    """Use case for replying to a top-level comment."""

    def __init__(
        self,
        comment_service: CommentService,
        thread_service: ThreadService,
        view_service: CommentViewService,
    ) -> None:
        """Initialize create reply use case.

        Args:
            comment_service: Comment domain service
            thread_service: Thread structure checks
            view_service: Read projection builder
        """
        self.comment_service = comment_service
        self.thread_service = thread_service
        self.view_service = view_service

    async def execute(self, request: CreateReplyRequest) -> CommentItem:
        """Execute create reply flow.

        Raises:
            ValidationError: If content is empty or an id is malformed
            NotFoundError: If the parent comment does not exist
            InvariantViolationError: If the parent is itself a reply
            DependencyError: If the owner's profile could not be resolved
        """
        parent_comment_id = CommentId(
            parse_uuid(request.parent_comment_id, "comment")
        )
        owner_id = UserId(parse_uuid(request.owner_id, "user"))

        content = self.thread_service.validate_content(request.content)
        parent = await self.thread_service.check_reply_target(parent_comment_id)
        owner = await self.view_service.owner_profile(owner_id)

        reply = await self.comment_service.create(
            content=content,
            owner_id=owner_id,
            parent_comment_id=parent.id,
        )

        enriched = await self.view_service.enrich(reply, owner=owner)
        return CommentItem.from_domain(enriched)
