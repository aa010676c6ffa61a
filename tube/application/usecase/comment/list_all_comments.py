"""List all comments use case (administrative)."""

from pydantic import BaseModel

from tube.application.usecase.base import BaseUseCase
from tube.application.usecase.comment.common import CommentPageResponse
from tube.config import PaginationSettings
from tube.domain.service import CommentViewService
from tube.domain.value import PageRequest


class ListAllCommentsRequest(BaseModel):
    """List all comments request."""

    page: int | str | None = None
    limit: int | str | None = None


class ListAllCommentsUseCase(BaseUseCase):
    """Use case for listing every comment and reply, newest first."""

    def __init__(
        self, view_service: CommentViewService, pagination: PaginationSettings
    ) -> None:
        self.view_service = view_service
        self.pagination = pagination

    async def execute(self, request: ListAllCommentsRequest) -> CommentPageResponse:
        page_request = PageRequest.parse(
            request.page,
            request.limit,
            default_page_size=self.pagination.default_page_size,
            max_page_size=self.pagination.max_page_size,
        )
        page = await self.view_service.all_page(page_request)
        return CommentPageResponse.from_page(page)
