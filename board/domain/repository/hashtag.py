"""Hashtag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from board.domain.model.hashtag import Hashtag
from board.domain.value import HashtagId, HashtagTitle, PostId


class HashtagRepository(ABC):
    """Repository for Hashtag entity and its post links."""

    @abstractmethod
    async def save(self, hashtag: Hashtag) -> Hashtag:
        """Insert a hashtag.

        Args:
            hashtag: Hashtag to save

        Returns:
            Saved hashtag with its ID
        """
        pass

    @abstractmethod
    async def find_by_titles(self, titles: Sequence[HashtagTitle]) -> list[Hashtag]:
        """Find multiple hashtags by title in a single query.

        Args:
            titles: Hashtag titles

        Returns:
            Found hashtags (may be fewer than requested)
        """
        pass

    @abstractmethod
    async def link_to_post(
        self, post_id: PostId, hashtag_ids: Sequence[HashtagId]
    ) -> None:
        """Link hashtags to a post. Existing links are left as they are.

        Args:
            post_id: Post ID
            hashtag_ids: Hashtags to link
        """
        pass

    @abstractmethod
    async def find_titles_by_posts(
        self, post_ids: Sequence[PostId]
    ) -> dict[PostId, list[HashtagTitle]]:
        """Find hashtag titles for multiple posts (batch query).

        Args:
            post_ids: Post IDs

        Returns:
            Mapping of post ID to its hashtag titles
        """
        pass

    @abstractmethod
    async def find_post_ids(
        self,
        hashtag_id: Optional[HashtagId] = None,
        title: Optional[HashtagTitle] = None,
    ) -> list[PostId]:
        """Find IDs of posts linked to a hashtag, given by ID or title.

        Args:
            hashtag_id: Hashtag ID
            title: Hashtag title (used when no ID is given)

        Returns:
            Linked post IDs
        """
        pass
