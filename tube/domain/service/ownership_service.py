"""Ownership checks for comment mutations."""

import logfire

from tube.domain.error import ForbiddenError
from tube.domain.model.comment import Comment
from tube.domain.value import UserId

from .base import Service


class OwnershipService(Service):
    """Authorizes edits and deletes of comments and replies.

    Only the author of a record may change or remove it. Anonymous
    principals are always rejected.
    """

    def authorize_mutation(self, record: Comment, principal_id: UserId | None) -> None:
        """Check that the acting principal owns a record.

        Args:
            record: Comment or reply being modified
            principal_id: Acting user, None when anonymous

        Raises:
            ForbiddenError: If the principal is anonymous or not the owner
        """
        if principal_id is None:
            logfire.warn("Anonymous mutation attempt", comment_id=str(record.id))
            raise ForbiddenError()

        if record.owner_id != principal_id:
            logfire.warn(
                "Unauthorized mutation attempt",
                comment_id=str(record.id),
                owner_id=str(record.owner_id),
                principal_id=str(principal_id),
            )
            raise ForbiddenError()
