"""Attached file entity."""

from datetime import datetime
from typing import Optional

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.value import FileId, PostId
from board.util.clock import utcnow


class File(DomainModel):
    """A stored file (usually an image) that can be attached to a post.

    Files are uploaded elsewhere; a post claims them by id. A file created
    recently and attached to a post makes that post a recommendation
    candidate.
    """

    id: Optional[FileId] = None
    post_id: Optional[PostId] = None
    url: str = Field(min_length=1, max_length=2048)
    created_at: datetime = Field(default_factory=utcnow)
