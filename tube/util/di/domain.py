"""Domain layer DI providers."""

from dishka import Scope, provide

from tube.config import AuthSettings, Settings
from tube.domain.repository import (
    CommentRepository,
    ProfileRepository,
    VideoRepository,
)
from tube.domain.service import (
    CascadeDeleteService,
    CommentService,
    CommentViewService,
    JWTService,
    OwnershipService,
    ThreadService,
)
from tube.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository, settings: Settings
    ) -> CommentService:
        """Provide comment store service."""
        return CommentService(
            comment_repository=comment_repository,
            max_content_length=settings.comments.max_length,
        )

    @provide
    def get_thread_service(
        self,
        comment_repository: CommentRepository,
        video_repository: VideoRepository,
        settings: Settings,
    ) -> ThreadService:
        """Provide thread structure service."""
        return ThreadService(
            comment_repository=comment_repository,
            video_repository=video_repository,
            max_content_length=settings.comments.max_length,
        )

    @provide
    def get_ownership_service(self) -> OwnershipService:
        """Provide ownership service."""
        return OwnershipService()

    @provide
    def get_cascade_delete_service(
        self,
        comment_service: CommentService,
        thread_service: ThreadService,
        ownership_service: OwnershipService,
    ) -> CascadeDeleteService:
        """Provide cascading delete coordinator."""
        return CascadeDeleteService(
            comment_service=comment_service,
            thread_service=thread_service,
            ownership_service=ownership_service,
        )

    @provide
    def get_comment_view_service(
        self,
        comment_service: CommentService,
        thread_service: ThreadService,
        profile_repository: ProfileRepository,
    ) -> CommentViewService:
        """Provide comment view composer."""
        return CommentViewService(
            comment_service=comment_service,
            thread_service=thread_service,
            profile_repository=profile_repository,
        )
