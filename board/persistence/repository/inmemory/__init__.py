"""In-memory repository implementations for testing."""

from .file import InMemoryFileRepository
from .hashtag import InMemoryHashtagRepository
from .post import InMemoryPostRepository
from .recommended_post import InMemoryRecommendedPostRepository
from .user import InMemoryUserRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryFileRepository",
    "InMemoryHashtagRepository",
    "InMemoryPostRepository",
    "InMemoryRecommendedPostRepository",
    "InMemoryUserRepository",
    "InMemoryVoteRepository",
]
