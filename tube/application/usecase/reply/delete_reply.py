"""Delete reply use case."""

from pydantic import BaseModel

from tube.application.usecase.base import BaseUseCase
from tube.domain.service import CascadeDeleteService
from tube.domain.value import CommentId, UserId, parse_uuid


class DeleteReplyRequest(BaseModel):
    """Delete reply request."""

    parent_comment_id: str  # UUID string of the parent named in the route
    reply_id: str  # UUID string
    user_id: str | None  # Acting principal (must be owner)


class DeleteReplyUseCase(BaseUseCase):
    """Use case for deleting a single reply."""

    def __init__(self, cascade_service: CascadeDeleteService) -> None:
        self.cascade_service = cascade_service

    async def execute(self, request: DeleteReplyRequest) -> None:
        parent_comment_id = CommentId(
            parse_uuid(request.parent_comment_id, "comment")
        )
        reply_id = CommentId(parse_uuid(request.reply_id, "reply"))
        principal_id = (
            UserId(parse_uuid(request.user_id, "user")) if request.user_id else None
        )
        await self.cascade_service.delete_reply(
            parent_comment_id, reply_id, principal_id
        )
