"""Cascading deletion of comments and their replies."""

import logfire

from tube.domain.value import CommentId, UserId

from .base import Service
from .comment_service import CommentService
from .ownership_service import OwnershipService
from .thread_service import ThreadService


class CascadeDeleteService(Service):
    """Deletes comments so that no reply outlives its parent.

    The cascade is not atomic on its own: replies are removed first, then
    the comment. A reply created between enumeration and deletion of the
    comment is caught by a second sweep. Stores that run the whole request
    in one transaction (PostgreSQL) make the cascade all-or-nothing.
    """

    def __init__(
        self,
        comment_service: CommentService,
        thread_service: ThreadService,
        ownership_service: OwnershipService,
    ) -> None:
        """Initialize cascade delete service.

        Args:
            comment_service: Comment store
            thread_service: Thread structure checks
            ownership_service: Ownership checks
        """
        self.comment_service = comment_service
        self.thread_service = thread_service
        self.ownership_service = ownership_service

    async def delete_comment(
        self, comment_id: CommentId, principal_id: UserId | None
    ) -> None:
        """Delete a comment together with all of its replies.

        Deleting a reply through this method removes just that reply.

        Args:
            comment_id: Comment to delete
            principal_id: Acting user

        Raises:
            NotFoundError: If the comment does not exist
            ForbiddenError: If the principal does not own the comment
        """
        with logfire.span(
            "cascade_service.delete_comment",
            comment_id=str(comment_id),
            principal_id=str(principal_id) if principal_id else None,
        ):
            comment = await self.comment_service.get_by_id(comment_id)
            self.ownership_service.authorize_mutation(comment, principal_id)

            reply_ids = await self.comment_service.list_reply_ids(comment_id)
            removed = await self.comment_service.delete_many(reply_ids)
            await self.comment_service.delete_by_id(comment_id)

            # Replies created after enumeration would otherwise be orphaned
            late_reply_ids = await self.comment_service.list_reply_ids(comment_id)
            if late_reply_ids:
                logfire.warn(
                    "Sweeping replies created during cascade delete",
                    comment_id=str(comment_id),
                    count=len(late_reply_ids),
                )
                removed += await self.comment_service.delete_many(late_reply_ids)

            logfire.info(
                "Comment deleted with replies",
                comment_id=str(comment_id),
                replies_removed=removed,
            )

    async def delete_reply(
        self,
        parent_comment_id: CommentId,
        reply_id: CommentId,
        principal_id: UserId | None,
    ) -> None:
        """Delete a single reply under the given parent.

        Args:
            parent_comment_id: Parent named in the request
            reply_id: Reply to delete
            principal_id: Acting user

        Raises:
            NotFoundError: If the parent or reply does not exist
            InvariantViolationError: If the reply belongs to another comment
            ForbiddenError: If the principal does not own the reply
        """
        with logfire.span(
            "cascade_service.delete_reply",
            parent_comment_id=str(parent_comment_id),
            reply_id=str(reply_id),
        ):
            await self.comment_service.get_by_id(parent_comment_id)
            reply = await self.comment_service.get_by_id(reply_id, resource="reply")
            self.thread_service.check_reply_belongs(reply, parent_comment_id)
            self.ownership_service.authorize_mutation(reply, principal_id)

            await self.comment_service.delete_by_id(reply_id)
            logfire.info(
                "Reply deleted",
                parent_comment_id=str(parent_comment_id),
                reply_id=str(reply_id),
            )
