"""Post aggregate root.

Posts own their like/dislike counters; the counters are kept in step with
the votes on the post by the vote service.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from board.domain.model.common import DomainModel
from board.domain.model.file import File
from board.domain.value import HashtagTitle, PostId, UserId
from board.util.clock import utcnow


class Post(DomainModel):
    """Post aggregate root.

    Business rules:
    - like_count / dislike_count equal the number of votes with
      is_like = true / false
    - Deleting a post only stamps deleted_at (soft delete)
    """

    id: Optional[PostId] = None
    title: str = Field(min_length=1, max_length=200)
    content: str = Field(min_length=1, max_length=20000)
    category: Optional[str] = Field(default=None, max_length=50)
    poster_id: UserId
    views: int = Field(default=0, ge=0)
    like_count: int = Field(default=0, ge=0)
    dislike_count: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)
    deleted_at: Optional[datetime] = None

    # Loaded by the repository from their own tables
    files: list[File] = Field(default_factory=list)
    hashtags: list[HashtagTitle] = Field(default_factory=list)

    @property
    def is_deleted(self) -> bool:
        """Whether the post has been soft-deleted."""
        return self.deleted_at is not None
