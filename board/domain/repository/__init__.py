"""Repository interfaces for the board domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from board.domain.repository.file import FileRepository
from board.domain.repository.hashtag import HashtagRepository
from board.domain.repository.post import PostRepository
from board.domain.repository.recommended_post import RecommendedPostRepository
from board.domain.repository.user import UserRepository
from board.domain.repository.vote import VoteRepository

__all__ = [
    "UserRepository",
    "PostRepository",
    "VoteRepository",
    "FileRepository",
    "HashtagRepository",
    "RecommendedPostRepository",
]
