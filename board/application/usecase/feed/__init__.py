"""Feed use cases."""

from .get_feed import GetFeedRequest, GetFeedResponse, GetFeedUseCase

__all__ = [
    "GetFeedRequest",
    "GetFeedResponse",
    "GetFeedUseCase",
]
