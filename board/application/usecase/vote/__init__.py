"""Vote use cases."""

from .vote_post import VoteItem, VotePostRequest, VotePostResponse, VotePostUseCase

__all__ = [
    "VoteItem",
    "VotePostRequest",
    "VotePostResponse",
    "VotePostUseCase",
]
