"""Domain model entities for the board."""

from board.domain.model.file import File
from board.domain.model.hashtag import Hashtag
from board.domain.model.post import Post
from board.domain.model.recommended_post import RecommendedPost
from board.domain.model.user import User
from board.domain.model.vote import Vote

__all__ = [
    "User",
    "Post",
    "Vote",
    "File",
    "Hashtag",
    "RecommendedPost",
]
