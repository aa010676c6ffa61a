"""Reply use cases."""

from .create_reply import CreateReplyRequest, CreateReplyUseCase
from .delete_reply import DeleteReplyRequest, DeleteReplyUseCase
from .list_replies import ListRepliesRequest, ListRepliesUseCase
from .update_reply import UpdateReplyRequest, UpdateReplyUseCase

__all__ = [
    "CreateReplyRequest",
    "CreateReplyUseCase",
    "DeleteReplyRequest",
    "DeleteReplyUseCase",
    "ListRepliesRequest",
    "ListRepliesUseCase",
    "UpdateReplyRequest",
    "UpdateReplyUseCase",
]
