"""Post repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional, Sequence

from board.domain.model.post import Post
from board.domain.value import PostId, PostSortOrder


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.

    Returned posts carry no files or hashtags; those live in their own
    repositories and are attached by the post service.
    """

    @abstractmethod
    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID (soft-deleted posts included).

        Args:
            post_id: The post's unique identifier

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        sort: PostSortOrder = PostSortOrder.RECENT,
        category: Optional[str] = None,
        post_ids: Optional[Sequence[PostId]] = None,
        created_after: Optional[datetime] = None,
        include_deleted: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> List[Post]:
        """Find posts with filtering and pagination.

        Args:
            sort: Sort order
            category: Only posts in this category
            post_ids: Only posts with these IDs (empty sequence matches nothing)
            created_after: Only posts created at or after this time
            include_deleted: Whether to include soft-deleted posts
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            List of posts matching the criteria
        """
        pass

    @abstractmethod
    async def count(
        self,
        category: Optional[str] = None,
        post_ids: Optional[Sequence[PostId]] = None,
        include_deleted: bool = False,
    ) -> int:
        """Count posts matching the given filters.

        Args:
            category: Only posts in this category
            post_ids: Only posts with these IDs
            include_deleted: Whether to include soft-deleted posts

        Returns:
            Total number of posts matching the criteria
        """
        pass

    @abstractmethod
    async def search(self, keyword: str, limit: int = 20, offset: int = 0) -> List[Post]:
        """Find posts whose title or content contains the keyword.

        Matching is case-insensitive; soft-deleted posts are excluded.

        Args:
            keyword: Substring to look for
            limit: Maximum number of posts to return
            offset: Number of posts to skip

        Returns:
            Matching posts, newest first
        """
        pass

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (insert when it has no ID, update otherwise).

        Counters and views are not written on update; they only change
        through the atomic increment methods.

        Args:
            post: The post to save

        Returns:
            The saved post, with its database-assigned ID
        """
        pass

    @abstractmethod
    async def apply_vote_delta(
        self, post_id: PostId, like_delta: int, dislike_delta: int
    ) -> None:
        """Atomically add deltas to the like and dislike counters.

        Uses SQL-level arithmetic so concurrent votes by different users
        never overwrite each other.

        Args:
            post_id: The post ID
            like_delta: Change to like_count (-1, 0 or 1)
            dislike_delta: Change to dislike_count (-1, 0 or 1)
        """
        pass

    @abstractmethod
    async def increment_views(self, post_id: PostId) -> None:
        """Atomically increment the view counter by 1.

        Args:
            post_id: The post ID
        """
        pass
