"""Strongly typed identifiers for board domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType

# Database-assigned integer identifiers
UserId = NewType("UserId", int)
PostId = NewType("PostId", int)
VoteId = NewType("VoteId", int)
FileId = NewType("FileId", int)
HashtagId = NewType("HashtagId", int)
RecommendedPostId = NewType("RecommendedPostId", int)
