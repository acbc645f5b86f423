"""PostgreSQL implementation of Post repository."""

from datetime import datetime
from typing import List, Optional, Sequence

import logfire
from sqlalchemy import desc, func, insert, or_, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import Post
from board.domain.repository import PostRepository
from board.domain.value import PostId, PostSortOrder
from board.persistence.mappers import post_to_dict, row_to_post
from board.persistence.tables import posts_table

# Written only through apply_vote_delta / increment_views
_COUNTER_COLUMNS = ("views", "like_count", "dislike_count")


class PostgresPostRepository(PostRepository):
    """PostgreSQL implementation of PostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    def _filtered(
        self,
        stmt,
        category: Optional[str] = None,
        post_ids: Optional[Sequence[PostId]] = None,
        created_after: Optional[datetime] = None,
        include_deleted: bool = False,
    ):
        """Apply the shared listing filters to a statement."""
        if category is not None:
            stmt = stmt.where(posts_table.c.category == category)
        if post_ids is not None:
            stmt = stmt.where(posts_table.c.id.in_(list(post_ids)))
        if created_after is not None:
            stmt = stmt.where(posts_table.c.created_at >= created_after)
        if not include_deleted:
            stmt = stmt.where(posts_table.c.deleted_at.is_(None))
        return stmt

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        with logfire.span("post_repository.find_by_id", post_id=post_id):
            stmt = select(posts_table).where(posts_table.c.id == post_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()
            return row_to_post(row._asdict()) if row else None

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
        """Find posts with filtering and pagination."""
        with logfire.span(
            "post_repository.find_all",
            sort=sort.value,
            category=category,
            include_deleted=include_deleted,
            limit=limit,
            offset=offset,
        ):
            if post_ids is not None and not post_ids:
                return []

            stmt = self._filtered(
                select(posts_table),
                category=category,
                post_ids=post_ids,
                created_after=created_after,
                include_deleted=include_deleted,
            )

            # Sort order, newest first as the tie-breaker
            if sort == PostSortOrder.VIEWS:
                stmt = stmt.order_by(desc(posts_table.c.views))
            elif sort == PostSortOrder.LIKES:
                stmt = stmt.order_by(desc(posts_table.c.like_count))
            stmt = stmt.order_by(desc(posts_table.c.created_at), desc(posts_table.c.id))

            stmt = stmt.limit(limit).offset(offset)

            result = await self.session.execute(stmt)
            posts = [row_to_post(row._asdict()) for row in result.fetchall()]

            logfire.info("Found posts", count=len(posts))
            return posts

    async def count(
        self,
        category: Optional[str] = None,
        post_ids: Optional[Sequence[PostId]] = None,
        include_deleted: bool = False,
    ) -> int:
        """Count posts matching the given filters."""
        with logfire.span(
            "post_repository.count",
            category=category,
            include_deleted=include_deleted,
        ):
            if post_ids is not None and not post_ids:
                return 0

            stmt = self._filtered(
                select(func.count()).select_from(posts_table),
                category=category,
                post_ids=post_ids,
                include_deleted=include_deleted,
            )
            result = await self.session.execute(stmt)
            return result.scalar() or 0

    async def search(self, keyword: str, limit: int = 20, offset: int = 0) -> List[Post]:
        """Find posts whose title or content contains the keyword."""
        with logfire.span("post_repository.search", keyword=keyword):
            # Match % and _ in the keyword literally
            escaped = (
                keyword.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")
            )
            pattern = f"%{escaped}%"
            stmt = (
                select(posts_table)
                .where(
                    or_(
                        posts_table.c.title.ilike(pattern, escape="\\"),
                        posts_table.c.content.ilike(pattern, escape="\\"),
                    )
                )
                .where(posts_table.c.deleted_at.is_(None))
                .order_by(desc(posts_table.c.created_at), desc(posts_table.c.id))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            return [row_to_post(row._asdict()) for row in result.fetchall()]

    async def save(self, post: Post) -> Post:
        """Save a post (create or update)."""
        with logfire.span("post_repository.save", post_id=post.id, title=post.title):
            post_dict = post_to_dict(post)

            if post.id is None:
                stmt = insert(posts_table).values(**post_dict).returning(posts_table)
                result = await self.session.execute(stmt)
                saved = row_to_post(result.fetchone()._asdict())
                logfire.info("Inserted new post", post_id=saved.id)
            else:
                for column in _COUNTER_COLUMNS:
                    post_dict.pop(column, None)
                stmt = (
                    update(posts_table)
                    .where(posts_table.c.id == post.id)
                    .values(**post_dict)
                    .returning(posts_table)
                )
                result = await self.session.execute(stmt)
                saved = row_to_post(result.fetchone()._asdict())
                logfire.info("Updated post", post_id=saved.id)

            await self.session.flush()
            return saved

    async def apply_vote_delta(
        self, post_id: PostId, like_delta: int, dislike_delta: int
    ) -> None:
        """Atomically add deltas to the like and dislike counters."""
        stmt = (
            posts_table.update()
            .where(posts_table.c.id == post_id)
            .values(
                like_count=posts_table.c.like_count + like_delta,
                dislike_count=posts_table.c.dislike_count + dislike_delta,
            )
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def increment_views(self, post_id: PostId) -> None:
        """Atomically increment views by 1."""
        stmt = (
            posts_table.update()
            .where(posts_table.c.id == post_id)
            .values(views=posts_table.c.views + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()
