"""Hashtag entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import HashtagId, HashtagTitle
from board.util.clock import utcnow


class Hashtag(DomainModel):
    """Hashtag entity. Titles are unique."""

    id: Optional[HashtagId] = None
    title: HashtagTitle
    created_at: datetime = Field(default_factory=utcnow)
