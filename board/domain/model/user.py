"""User entity.

Users are managed by the account service; the board only looks them up
to attribute posts and votes.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import UserId
from board.util.clock import utcnow


class User(DomainModel):
    """User entity (lookup only)."""

    id: Optional[UserId] = None
    nickname: str = Field(min_length=1, max_length=50)
    created_at: datetime = Field(default_factory=utcnow)
