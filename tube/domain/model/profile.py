"""Public identity projection of a user."""

from typing import Optional

from tube.domain.model.common import DomainModel
from tube.domain.value import UserId
from tube.domain.value.types import Handle


class PublicProfile(DomainModel):
    """The fields of a user that may be shown next to their comments."""

    user_id: UserId
    display_name: str
    handle: Handle
    avatar_url: Optional[str] = None
