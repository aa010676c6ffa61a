"""Application layer DI providers."""

from dishka import Scope, provide

from tube.application.usecase.comment import (
    CreateCommentUseCase,
    DeleteCommentUseCase,
    ListAllCommentsUseCase,
    ListCommentsUseCase,
    UpdateCommentUseCase,
)
from tube.application.usecase.reply import (
    CreateReplyUseCase,
    DeleteReplyUseCase,
    ListRepliesUseCase,
    UpdateReplyUseCase,
)
from tube.config import PaginationSettings
from tube.domain.service import (
    CascadeDeleteService,
    CommentService,
    CommentViewService,
    OwnershipService,
    ThreadService,
)
from tube.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self,
        comment_service: CommentService,
        thread_service: ThreadService,
        view_service: CommentViewService,
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            comment_service=comment_service,
            thread_service=thread_service,
            view_service=view_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_comments_use_case(
        self,
        thread_service: ThreadService,
        view_service: CommentViewService,
        pagination: PaginationSettings,
    ) -> ListCommentsUseCase:
        """Provide list comments use case."""
        return ListCommentsUseCase(
            thread_service=thread_service,
            view_service=view_service,
            pagination=pagination,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_all_comments_use_case(
        self, view_service: CommentViewService, pagination: PaginationSettings
    ) -> ListAllCommentsUseCase:
        """Provide list all comments use case."""
        return ListAllCommentsUseCase(view_service=view_service, pagination=pagination)

    @provide(scope=Scope.REQUEST)
    def get_update_comment_use_case(
        self,
        comment_service: CommentService,
        thread_service: ThreadService,
        ownership_service: OwnershipService,
        view_service: CommentViewService,
    ) -> UpdateCommentUseCase:
        """Provide update comment use case."""
        return UpdateCommentUseCase(
            comment_service=comment_service,
            thread_service=thread_service,
            ownership_service=ownership_service,
            view_service=view_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, cascade_service: CascadeDeleteService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(cascade_service=cascade_service)

    # Reply use cases
    @provide(scope=Scope.REQUEST)
    def get_create_reply_use_case(
        self,
        comment_service: CommentService,
        thread_service: ThreadService,
        view_service: CommentViewService,
    ) -> CreateReplyUseCase:
        """Provide create reply use case."""
        return CreateReplyUseCase(
            comment_service=comment_service,
            thread_service=thread_service,
            view_service=view_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_replies_use_case(
        self,
        comment_service: CommentService,
        view_service: CommentViewService,
        pagination: PaginationSettings,
    ) -> ListRepliesUseCase:
        """Provide list replies use case."""
        return ListRepliesUseCase(
            comment_service=comment_service,
            view_service=view_service,
            pagination=pagination,
        )

    @provide(scope=Scope.REQUEST)
    def get_update_reply_use_case(
        self,
        comment_service: CommentService,
        thread_service: ThreadService,
        ownership_service: OwnershipService,
        view_service: CommentViewService,
    ) -> UpdateReplyUseCase:
        """Provide update reply use case."""
        return UpdateReplyUseCase(
            comment_service=comment_service,
            thread_service=thread_service,
            ownership_service=ownership_service,
            view_service=view_service,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_reply_use_case(
        self, cascade_service: CascadeDeleteService
    ) -> DeleteReplyUseCase:
        """Provide delete reply use case."""
        return DeleteReplyUseCase(cascade_service=cascade_service)
