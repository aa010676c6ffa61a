"""Domain services."""

from .base import Service
from .cascade_service import CascadeDeleteService
from .comment_service import CommentService, normalize_content
from .jwt_service import JWTService
from .ownership_service import OwnershipService
from .thread_service import ThreadService
from .view_service import CommentViewService

__all__ = [
    "CascadeDeleteService",
    "CommentService",
    "CommentViewService",
    "JWTService",
    "OwnershipService",
    "Service",
    "ThreadService",
    "normalize_content",
]
