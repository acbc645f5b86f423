"""PostgreSQL repository implementations."""

from board.persistence.repository.file import PostgresFileRepository
from board.persistence.repository.hashtag import PostgresHashtagRepository
from board.persistence.repository.post import PostgresPostRepository
from board.persistence.repository.recommended_post import (
    PostgresRecommendedPostRepository,
)
from board.persistence.repository.user import PostgresUserRepository
from board.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresUserRepository",
    "PostgresPostRepository",
    "PostgresVoteRepository",
    "PostgresFileRepository",
    "PostgresHashtagRepository",
    "PostgresRecommendedPostRepository",
]
