"""PostgreSQL implementation of Hashtag repository."""

from collections import defaultdict
from typing import Optional, Sequence

from sqlalchemy import insert, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import Hashtag
from board.domain.repository import HashtagRepository
from board.domain.value import HashtagId, HashtagTitle, PostId
from board.persistence.mappers import hashtag_to_dict, row_to_hashtag
from board.persistence.tables import hashtags_table, post_hashtags_table


class PostgresHashtagRepository(HashtagRepository):
    """PostgreSQL implementation of HashtagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, hashtag: Hashtag) -> Hashtag:
        """Insert a hashtag."""
        stmt = (
            insert(hashtags_table)
            .values(**hashtag_to_dict(hashtag))
            .returning(hashtags_table)
        )
        result = await self.session.execute(stmt)
        saved = row_to_hashtag(result.fetchone()._asdict())
        await self.session.flush()
        return saved

    async def find_by_titles(self, titles: Sequence[HashtagTitle]) -> list[Hashtag]:
        """Find multiple hashtags by title in a single query."""
        if not titles:
            return []
        stmt = select(hashtags_table).where(
            hashtags_table.c.title.in_([title.root for title in titles])
        )
        result = await self.session.execute(stmt)
        return [row_to_hashtag(row._asdict()) for row in result.fetchall()]

    async def link_to_post(
        self, post_id: PostId, hashtag_ids: Sequence[HashtagId]
    ) -> None:
        """Link hashtags to a post, skipping links that already exist."""
        if not hashtag_ids:
            return
        stmt = (
            pg_insert(post_hashtags_table)
            .values(
                [
                    {"post_id": post_id, "hashtag_id": hashtag_id}
                    for hashtag_id in hashtag_ids
                ]
            )
            .on_conflict_do_nothing()
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def find_titles_by_posts(
        self, post_ids: Sequence[PostId]
    ) -> dict[PostId, list[HashtagTitle]]:
        """Fetch hashtag titles for multiple posts in a single query."""
        if not post_ids:
            return {}

        stmt = (
            select(post_hashtags_table.c.post_id, hashtags_table.c.title)
            .select_from(post_hashtags_table)
            .join(hashtags_table, post_hashtags_table.c.hashtag_id == hashtags_table.c.id)
            .where(post_hashtags_table.c.post_id.in_(list(post_ids)))
            .order_by(hashtags_table.c.id)
        )
        result = await self.session.execute(stmt)

        # Build lookup: post_id -> [titles]
        titles_by_post: dict[PostId, list[HashtagTitle]] = defaultdict(list)
        for row in result.fetchall():
            titles_by_post[PostId(row.post_id)].append(HashtagTitle(row.title))
        return dict(titles_by_post)

    async def find_post_ids(
        self,
        hashtag_id: Optional[HashtagId] = None,
        title: Optional[HashtagTitle] = None,
    ) -> list[PostId]:
        """Find IDs of posts linked to a hashtag."""
        stmt = select(post_hashtags_table.c.post_id)
        if hashtag_id is not None:
            stmt = stmt.where(post_hashtags_table.c.hashtag_id == hashtag_id)
        elif title is not None:
            stmt = stmt.join(
                hashtags_table, post_hashtags_table.c.hashtag_id == hashtags_table.c.id
            ).where(hashtags_table.c.title == title.root)
        else:
            return []

        result = await self.session.execute(stmt)
        return [PostId(post_id) for post_id in result.scalars().all()]
