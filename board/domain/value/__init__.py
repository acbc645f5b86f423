"""Domain value objects for the board."""

from board.domain.value.identifiers import (
    FileId,
    HashtagId,
    PostId,
    RecommendedPostId,
    UserId,
    VoteId,
)
from board.domain.value.types import FeedKind, HashtagTitle, PostSortOrder

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "VoteId",
    "FileId",
    "HashtagId",
    "RecommendedPostId",
    # Types
    "FeedKind",
    "HashtagTitle",
    "PostSortOrder",
]
