"""List replies use case."""

from pydantic import BaseModel

from tube.application.usecase.base import BaseUseCase
from tube.application.usecase.comment.common import CommentPageResponse
from tube.config import PaginationSettings
from tube.domain.service import CommentService, CommentViewService
from tube.domain.value import CommentId, PageRequest, parse_uuid


class ListRepliesRequest(BaseModel):
    """List replies request."""

    parent_comment_id: str  # UUID string
    page: int | str | None = None
    limit: int | str | None = None


class ListRepliesUseCase(BaseUseCase):
    """Use case for listing replies to a comment, oldest first."""

    def __init__(
        self,
        comment_service: CommentService,
        view_service: CommentViewService,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize list replies use case.

        Args:
            comment_service: Comment domain service
            view_service: Read projection builder
            pagination: Page size defaults
        """
        self.comment_service = comment_service
        self.view_service = view_service
        self.pagination = pagination

    async def execute(self, request: ListRepliesRequest) -> CommentPageResponse:
        """Execute list replies flow.

        Raises:
            ValidationError: If the comment id is malformed
            NotFoundError: If the parent comment does not exist
            DependencyError: If owner profiles could not be resolved
        """
        parent_comment_id = CommentId(
            parse_uuid(request.parent_comment_id, "comment")
        )
        parent = await self.comment_service.get_by_id(parent_comment_id)

        page_request = PageRequest.parse(
            request.page,
            request.limit,
            default_page_size=self.pagination.default_page_size,
            max_page_size=self.pagination.max_page_size,
        )
        page = await self.view_service.replies_page(parent, page_request)
        return CommentPageResponse.from_page(page)
