"""In-memory post repository for testing."""

from datetime import datetime
from itertools import count
from typing import Optional, Sequence

from board.domain.model.post import Post
from board.domain.repository.post import PostRepository
from board.domain.value import PostId, PostSortOrder

# Written only through apply_vote_delta / increment_views
_COUNTER_FIELDS = ("views", "like_count", "dislike_count")


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing."""

    def __init__(self) -> None:
        self._posts: dict[PostId, Post] = {}
        self._ids = count(1)

    def _filter(
        self,
        category: Optional[str] = None,
        post_ids: Optional[Sequence[PostId]] = None,
        created_after: Optional[datetime] = None,
        include_deleted: bool = False,
    ) -> list[Post]:
        posts = list(self._posts.values())

        if category is not None:
            posts = [p for p in posts if p.category == category]
        if post_ids is not None:
            wanted = set(post_ids)
            posts = [p for p in posts if p.id in wanted]
        if created_after is not None:
            posts = [p for p in posts if p.created_at >= created_after]
        if not include_deleted:
            posts = [p for p in posts if p.deleted_at is None]

        return posts

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        return self._posts.get(post_id)

    async def find_all(
        self,
        sort: PostSortOrder = PostSortOrder.RECENT,
        category: Optional[str] = None,
        post_ids: Optional[Sequence[PostId]] = None,
        created_after: Optional[datetime] = None,
        include_deleted: bool = False,
        limit: int = 20,
        offset: int = 0,
    ) -> list[Post]:
        """Find posts with filtering and pagination."""
        posts = self._filter(category, post_ids, created_after, include_deleted)

        # Newest first as the tie-breaker
        posts.sort(key=lambda p: (p.created_at, p.id), reverse=True)
        if sort == PostSortOrder.VIEWS:
            posts.sort(key=lambda p: p.views, reverse=True)
        elif sort == PostSortOrder.LIKES:
            posts.sort(key=lambda p: p.like_count, reverse=True)

        # Paginate
        return posts[offset : offset + limit]

    async def count(
        self,
        category: Optional[str] = None,
        post_ids: Optional[Sequence[PostId]] = None,
        include_deleted: bool = False,
    ) -> int:
        """Count posts matching the given filters."""
        return len(self._filter(category, post_ids, include_deleted=include_deleted))

    async def search(self, keyword: str, limit: int = 20, offset: int = 0) -> list[Post]:
        """Case-insensitive substring search on title and content."""
        needle = keyword.lower()
        posts = [
            p
            for p in self._filter()
            if needle in p.title.lower() or needle in p.content.lower()
        ]
        posts.sort(key=lambda p: (p.created_at, p.id), reverse=True)
        return posts[offset : offset + limit]

    async def save(self, post: Post) -> Post:
        """Save or update a post."""
        post = post.model_copy(update={"files": [], "hashtags": []})

        if post.id is None:
            post = post.model_copy(update={"id": PostId(next(self._ids))})
        else:
            existing = self._posts.get(post.id)
            if existing is not None:
                post = post.model_copy(
                    update={name: getattr(existing, name) for name in _COUNTER_FIELDS}
                )

        self._posts[post.id] = post
        return post

    async def apply_vote_delta(
        self, post_id: PostId, like_delta: int, dislike_delta: int
    ) -> None:
        """Add deltas to the like and dislike counters."""
        post = self._posts.get(post_id)
        if post:
            # Create updated post (since posts are immutable)
            self._posts[post_id] = post.model_copy(
                update={
                    "like_count": post.like_count + like_delta,
                    "dislike_count": post.dislike_count + dislike_delta,
                }
            )

    async def increment_views(self, post_id: PostId) -> None:
        """Increment views by 1."""
        post = self._posts.get(post_id)
        if post:
            self._posts[post_id] = post.model_copy(update={"views": post.views + 1})
