"""List top-level comments use case."""

from pydantic import BaseModel

from tube.application.usecase.base import BaseUseCase
from tube.application.usecase.comment.common import CommentPageResponse
from tube.config import PaginationSettings
from tube.domain.service import CommentViewService, ThreadService
from tube.domain.value import PageRequest, VideoId, parse_uuid
from tube.domain.value.types import SortField, SortOrder


class ListCommentsRequest(BaseModel):
    """List top-level comments request.

    Paging and sorting values are passed through raw; unusable values fall
    back to defaults.
    """

    video_id: str  # UUID string
    page: int | str | None = None
    limit: int | str | None = None
    sort_by: str | None = None
    sort_order: str | None = None


class ListCommentsUseCase(BaseUseCase):
    """Use case for listing a video's top-level comments."""

    def __init__(
        self,
        thread_service: ThreadService,
        view_service: CommentViewService,
        pagination: PaginationSettings,
    ) -> None:
        """Initialize list comments use case.

        Args:
            thread_service: Thread structure checks (video existence)
            view_service: Read projection builder
            pagination: Page size defaults
        """
        self.thread_service = thread_service
        self.view_service = view_service
        self.pagination = pagination

    async def execute(self, request: ListCommentsRequest) -> CommentPageResponse:
        """Execute list comments flow.

        Comments are sorted by creation time, newest first, unless the
        request asks otherwise.

        Raises:
            ValidationError: If the video id is malformed
            NotFoundError: If the video does not exist
            DependencyError: If owner profiles could not be resolved
        """
        video_id = VideoId(parse_uuid(request.video_id, "video"))
        await self.thread_service.check_video_target(video_id)

        page_request = PageRequest.parse(
            request.page,
            request.limit,
            default_page_size=self.pagination.default_page_size,
            max_page_size=self.pagination.max_page_size,
        )
        page = await self.view_service.top_level_page(
            video_id=video_id,
            page_request=page_request,
            sort_field=SortField.parse(request.sort_by, SortField.CREATED_AT),
            sort_order=SortOrder.parse(request.sort_order, SortOrder.DESC),
        )
        return CommentPageResponse.from_page(page)
