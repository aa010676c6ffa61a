"""Strongly typed identifiers for Tube domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

from tube.domain.error import ValidationError

UserId = NewType("UserId", UUID)
VideoId = NewType("VideoId", UUID)
CommentId = NewType("CommentId", UUID)


def parse_uuid(value: str | UUID, kind: str) -> UUID:
    """Parse a raw identifier.

    Args:
        value: Identifier as received from a client
        kind: Resource name used in the error message

    Returns:
        Parsed UUID

    Raises:
        ValidationError: If the value is not a valid UUID
    """
    if isinstance(value, UUID):
        return value
    try:
        return UUID(str(value))
    except ValueError:
        raise ValidationError(f"Invalid {kind} id: {value}")
