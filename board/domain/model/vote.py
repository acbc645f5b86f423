"""Vote entity.

A vote is one user's like/dislike on one post. The row is created on the
first vote and afterwards only mutated: toggling a vote off stores null
instead of deleting the row.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import PostId, UserId, VoteId
from board.util.clock import utcnow


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per user per post (enforced by database unique constraint)
    - is_like is tri-state: True (liked), False (disliked), None (neutral)
    """

    id: Optional[VoteId] = None
    post_id: PostId
    user_id: UserId
    is_like: Optional[bool] = None
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
