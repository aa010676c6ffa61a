"""Delete comment use case."""

from pydantic import BaseModel

from tube.application.usecase.base import BaseUseCase
from tube.domain.service import CascadeDeleteService
from tube.domain.value import CommentId, UserId, parse_uuid


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment_id: str  # UUID string
    user_id: str | None  # Acting principal (must be owner)


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment and all of its replies."""

    def __init__(self, cascade_service: CascadeDeleteService) -> None:
        """Initialize delete comment use case.

        Args:
            cascade_service: Cascading delete coordinator
        """
        self.cascade_service = cascade_service

    async def execute(self, request: DeleteCommentRequest) -> None:
        """Execute delete comment flow.

        Raises:
            ValidationError: If an id is malformed
            NotFoundError: If the comment does not exist
            ForbiddenError: If the principal does not own the comment
        """
        comment_id = CommentId(parse_uuid(request.comment_id, "comment"))
        principal_id = (
            UserId(parse_uuid(request.user_id, "user")) if request.user_id else None
        )
        await self.cascade_service.delete_comment(comment_id, principal_id)
