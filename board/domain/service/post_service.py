"""Post domain service."""

from dataclasses import dataclass
from datetime import timedelta
from typing import Optional, Sequence

import logfire

from board.domain.error import NotFoundError, ValidationError
from board.domain.model.post import Post
from board.domain.repository import FileRepository, PostRepository
from board.domain.value import FileId, HashtagId, PostId, PostSortOrder, UserId
from board.util.clock import Clock

from .base import Service
from .hashtag_service import HashtagService
from .user_service import UserService

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


@dataclass
class PostPage:
    """One page of a post listing."""

    posts: list[Post]
    total: int
    page: int
    take: int


class PostService(Service):
    """Domain service for post operations."""

    def __init__(
        self,
        post_repository: PostRepository,
        file_repository: FileRepository,
        hashtag_service: HashtagService,
        user_service: UserService,
        clock: Clock,
        max_page_size: int = MAX_PAGE_SIZE,
    ) -> None:
        """Initialize post service.

        Args:
            post_repository: Post repository
            file_repository: File repository
            hashtag_service: Hashtag domain service
            user_service: User domain service
            clock: Source of "now"
            max_page_size: Largest accepted page size
        """
        self.post_repository = post_repository
        self.file_repository = file_repository
        self.hashtag_service = hashtag_service
        self.user_service = user_service
        self.clock = clock
        self.max_page_size = max_page_size

    async def create_post(
        self,
        title: str,
        content: str,
        poster_id: UserId,
        category: Optional[str] = None,
        hashtags: Sequence[str] = (),
        file_ids: Sequence[FileId] = (),
    ) -> Post:
        """Create a post, link its hashtags and attach its files.

        Args:
            title: Post title
            content: Post body
            poster_id: Author's user ID
            category: Board category
            hashtags: Hashtag titles as typed by the user
            file_ids: Previously uploaded files to attach

        Returns:
            The created post with files and hashtags

        Raises:
            NotFoundError: If the poster doesn't exist
            ValidationError: If a hashtag title is invalid
        """
        with logfire.span(
            "post_service.create_post", title=title, poster_id=poster_id
        ):
            await self.user_service.get_by_id(poster_id)
            titles = self.hashtag_service.normalize_titles(hashtags)

            now = self.clock.now()
            post = await self.post_repository.save(
                Post(
                    title=title,
                    content=content,
                    category=category,
                    poster_id=poster_id,
                    created_at=now,
                    updated_at=now,
                )
            )

            await self.hashtag_service.attach(post.id, [t.root for t in titles])
            if file_ids:
                attached = await self.file_repository.attach_to_post(post.id, file_ids)
                logfire.info("Files attached", post_id=post.id, count=attached)

            logfire.info("Post created", post_id=post.id)
            return (await self._hydrate([post]))[0]

    async def get_post(self, post_id: PostId) -> Post:
        """Get a live post with its files and hashtags.

        Args:
            post_id: Post ID

        Returns:
            The post

        Raises:
            NotFoundError: If the post doesn't exist or is soft-deleted
        """
        with logfire.span("post_service.get_post", post_id=post_id):
            post = await self.ensure_post_exists(post_id)
            return (await self._hydrate([post]))[0]

    async def ensure_post_exists(self, post_id: PostId) -> Post:
        """Load a live post without its files and hashtags.

        Raises:
            NotFoundError: If the post doesn't exist or is soft-deleted
        """
        post = await self.post_repository.find_by_id(post_id)
        if post is None or post.is_deleted:
            logfire.warn("Post not found", post_id=post_id)
            raise NotFoundError("Post", str(post_id))
        return post

    async def read_post(self, post_id: PostId) -> Post:
        """Get a post on behalf of a reader, counting the view.

        Args:
            post_id: Post ID

        Returns:
            The post with the view already counted

        Raises:
            NotFoundError: If the post doesn't exist or is soft-deleted
        """
        with logfire.span("post_service.read_post", post_id=post_id):
            await self.ensure_post_exists(post_id)
            await self.post_repository.increment_views(post_id)
            return await self.get_post(post_id)

    async def list_posts(
        self,
        page: int = 1,
        take: int = DEFAULT_PAGE_SIZE,
        category: Optional[str] = None,
        hashtag_id: Optional[HashtagId] = None,
        hashtag_title: Optional[str] = None,
    ) -> PostPage:
        """List live posts, newest first.

        Args:
            page: 1-based page number
            take: Page size
            category: Only posts in this category
            hashtag_id: Only posts tagged with this hashtag
            hashtag_title: Only posts tagged with this hashtag (if no ID given)

        Returns:
            The requested page and the total number of matching posts
        """
        limit, offset = self._page_window(page, take)

        with logfire.span(
            "post_service.list_posts",
            page=page,
            take=take,
            category=category,
            hashtag_id=hashtag_id,
            hashtag_title=hashtag_title,
        ):
            post_ids: Optional[list[PostId]] = None
            if hashtag_id is not None or hashtag_title:
                post_ids = await self.hashtag_service.find_post_ids(
                    hashtag_id=hashtag_id, title=hashtag_title
                )

            total = await self.post_repository.count(category=category, post_ids=post_ids)
            posts = await self.post_repository.find_all(
                sort=PostSortOrder.RECENT,
                category=category,
                post_ids=post_ids,
                limit=limit,
                offset=offset,
            )

            logfire.info("Posts listed", count=len(posts), total=total)
            return PostPage(
                posts=await self._hydrate(posts), total=total, page=page, take=take
            )

    async def search_posts(
        self, keyword: str, page: int = 1, take: int = DEFAULT_PAGE_SIZE
    ) -> list[Post]:
        """Find live posts whose title or content contains the keyword.

        Raises:
            ValidationError: If the keyword is blank
        """
        keyword = (keyword or "").strip()
        if not keyword:
            raise ValidationError("Search keyword is required")
        limit, offset = self._page_window(page, take)

        with logfire.span("post_service.search_posts", keyword=keyword, page=page):
            posts = await self.post_repository.search(keyword, limit=limit, offset=offset)
            logfire.info("Posts searched", keyword=keyword, count=len(posts))
            return await self._hydrate(posts)

    async def get_recent_posts(self, limit: int = 5) -> list[Post]:
        """Newest live posts."""
        with logfire.span("post_service.get_recent_posts", limit=limit):
            posts = await self.post_repository.find_all(
                sort=PostSortOrder.RECENT, limit=limit
            )
            return await self._hydrate(posts)

    async def get_popular_posts(self, limit: int = 5, window_days: int = 7) -> list[Post]:
        """Most viewed live posts created within the trailing window."""
        with logfire.span(
            "post_service.get_popular_posts", limit=limit, window_days=window_days
        ):
            posts = await self.post_repository.find_all(
                sort=PostSortOrder.VIEWS,
                created_after=self.clock.now() - timedelta(days=window_days),
                limit=limit,
            )
            return await self._hydrate(posts)

    async def get_emphasized_posts(
        self, category: Optional[str] = None, limit: int = 5
    ) -> list[Post]:
        """Most liked live posts, optionally within one category."""
        with logfire.span(
            "post_service.get_emphasized_posts", category=category, limit=limit
        ):
            posts = await self.post_repository.find_all(
                sort=PostSortOrder.LIKES, category=category, limit=limit
            )
            return await self._hydrate(posts)

    async def get_posts_by_ids(
        self,
        post_ids: Sequence[PostId],
        sort: PostSortOrder = PostSortOrder.LIKES,
        limit: int = 6,
    ) -> list[Post]:
        """Live posts among the given IDs, in the given order.

        Args:
            post_ids: Candidate post IDs
            sort: Sort order
            limit: Maximum number of posts

        Returns:
            Posts with files and hashtags
        """
        if not post_ids:
            return []
        posts = await self.post_repository.find_all(
            sort=sort, post_ids=post_ids, limit=limit
        )
        return await self._hydrate(posts)

    async def update_post(
        self,
        post_id: PostId,
        title: Optional[str] = None,
        content: Optional[str] = None,
        file_ids: Optional[Sequence[FileId]] = None,
    ) -> Post:
        """Edit a post.

        Args:
            post_id: Post ID
            title: New title (unchanged if None)
            content: New content (unchanged if None)
            file_ids: Replacement set of attached files (unchanged if None)

        Returns:
            The updated post

        Raises:
            NotFoundError: If the post doesn't exist or is soft-deleted
        """
        with logfire.span("post_service.update_post", post_id=post_id):
            post = await self.ensure_post_exists(post_id)

            changes: dict = {"updated_at": self.clock.now()}
            if title is not None:
                changes["title"] = title
            if content is not None:
                changes["content"] = content

            # Re-validate the edited fields
            updated = Post.model_validate({**post.model_dump(), **changes})
            await self.post_repository.save(updated)

            if file_ids is not None:
                attached = await self.file_repository.attach_to_post(
                    post_id, file_ids, replace=True
                )
                logfire.info("Files replaced", post_id=post_id, count=attached)

            logfire.info("Post updated", post_id=post_id)
            return await self.get_post(post_id)

    async def delete_post(self, post_id: PostId) -> Post:
        """Soft-delete a post.

        Raises:
            NotFoundError: If the post doesn't exist or is already deleted
        """
        with logfire.span("post_service.delete_post", post_id=post_id):
            post = await self.ensure_post_exists(post_id)
            deleted = await self.post_repository.save(
                post.model_copy(update={"deleted_at": self.clock.now()})
            )
            logfire.info("Post soft-deleted", post_id=post_id)
            return deleted

    async def apply_vote_delta(
        self, post_id: PostId, like_delta: int, dislike_delta: int
    ) -> None:
        """Atomically shift the post's like and dislike counters.

        Args:
            post_id: Post ID
            like_delta: Change to like_count
            dislike_delta: Change to dislike_count
        """
        if like_delta == 0 and dislike_delta == 0:
            return
        with logfire.span(
            "post_service.apply_vote_delta",
            post_id=post_id,
            like_delta=like_delta,
            dislike_delta=dislike_delta,
        ):
            await self.post_repository.apply_vote_delta(
                post_id, like_delta, dislike_delta
            )

    async def _hydrate(self, posts: list[Post]) -> list[Post]:
        """Attach files and hashtags to posts with one query each."""
        if not posts:
            return []

        post_ids = [post.id for post in posts]
        files = await self.file_repository.find_by_posts(post_ids)
        hashtags = await self.hashtag_service.titles_for_posts(post_ids)

        return [
            post.model_copy(
                update={
                    "files": files.get(post.id, []),
                    "hashtags": hashtags.get(post.id, []),
                }
            )
            for post in posts
        ]

    def _page_window(self, page: int, take: int) -> tuple[int, int]:
        """Convert 1-based page and size into limit/offset.

        Raises:
            ValidationError: If page < 1 or take is outside 1..max_page_size
        """
        if page < 1:
            raise ValidationError("Page must be 1 or greater")
        if take < 1 or take > self.max_page_size:
            raise ValidationError(f"Take must be between 1 and {self.max_page_size}")
        return take, (page - 1) * take
