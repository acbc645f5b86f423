"""Recommended post ledger entry."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import PostId, RecommendedPostId
from board.util.clock import utcnow


class RecommendedPost(DomainModel):
    """Ledger row marking a post as a recommendation candidate.

    Derived data, not a source of truth: the refresher bumps updated_at
    every run in which the post still qualifies, and the read path serves
    the most recently bumped rows. post_id is a plain attribute, not a
    relation.
    """

    id: Optional[RecommendedPostId] = None
    post_id: PostId
    updated_at: datetime = Field(default_factory=utcnow)
