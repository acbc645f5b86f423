"""Domain services."""

from .base import Service
from .hashtag_service import HashtagService
from .post_service import PostPage, PostService
from .recommendation_service import RecommendationService
from .user_service import UserService
from .vote_service import VoteService, VoteTransition, resolve_transition

__all__ = [
    "HashtagService",
    "PostPage",
    "PostService",
    "RecommendationService",
    "Service",
    "UserService",
    "VoteService",
    "VoteTransition",
    "resolve_transition",
]
