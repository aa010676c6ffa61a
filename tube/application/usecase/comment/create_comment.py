"""Create comment use case."""

from pydantic import BaseModel

from tube.application.usecase.base import BaseUseCase
from tube.application.usecase.comment.common import CommentItem
from tube.domain.service import CommentService, CommentViewService, ThreadService
from tube.domain.value import UserId, VideoId, parse_uuid


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    video_id: str  # UUID string
    owner_id: str  # User ID from authenticated principal
    content: str


class CreateCommentUseCase(BaseUseCase):
    """Use case for adding a top-level comment to a video."""

    def __init__(
        self,
        comment_service: CommentService,
        thread_service: ThreadService,
        view_service: CommentViewService,
    ) -> None:
        """Initialize create comment use case.

        Args:
            comment_service: Comment domain service
            thread_service: Thread structure checks
            view_service: Read projection builder
        """
        self.comment_service = comment_service
        self.thread_service = thread_service
        self.view_service = view_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Steps:
        1. Validate content
        2. Verify the video exists
        3. Resolve the owner's profile
        4. Create the comment
        5. Enrich it with that profile

        Raises:
            ValidationError: If content is empty or an id is malformed
            NotFoundError: If the video does not exist
            DependencyError: If a collaborator lookup failed
        """
        video_id = VideoId(parse_uuid(request.video_id, "video"))
        owner_id = UserId(parse_uuid(request.owner_id, "user"))

        content = self.thread_service.validate_content(request.content)
        await self.thread_service.check_video_target(video_id)
        owner = await self.view_service.owner_profile(owner_id)

        comment = await self.comment_service.create(
            content=content,
            owner_id=owner_id,
            video_id=video_id,
        )

        enriched = await self.view_service.enrich(comment, owner=owner)
        return CommentItem.from_domain(enriched)
