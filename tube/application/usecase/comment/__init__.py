"""Comment use cases."""

from .common import CommentItem, CommentPageResponse, OwnerItem
from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .delete_comment import DeleteCommentRequest, DeleteCommentUseCase
from .list_all_comments import ListAllCommentsRequest, ListAllCommentsUseCase
from .list_comments import ListCommentsRequest, ListCommentsUseCase
from .update_comment import UpdateCommentRequest, UpdateCommentUseCase

__all__ = [
    "CommentItem",
    "CommentPageResponse",
    "OwnerItem",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "DeleteCommentRequest",
    "DeleteCommentUseCase",
    "ListAllCommentsRequest",
    "ListAllCommentsUseCase",
    "ListCommentsRequest",
    "ListCommentsUseCase",
    "UpdateCommentRequest",
    "UpdateCommentUseCase",
]
