"""PostgreSQL implementation of RecommendedPost repository."""

from datetime import datetime
from typing import Optional

import logfire
from sqlalchemy import desc, func, select
from sqlalchemy.dialects.postgresql import insert
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import RecommendedPost
from board.domain.repository import RecommendedPostRepository
from board.domain.value import PostId
from board.persistence.mappers import row_to_recommended_post
from board.persistence.tables import recommended_posts_table


class PostgresRecommendedPostRepository(RecommendedPostRepository):
    """PostgreSQL implementation of RecommendedPostRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def upsert(self, post_id: PostId, updated_at: datetime) -> RecommendedPost:
        """Insert or bump the ledger row with a single INSERT ... ON CONFLICT."""
        with logfire.span("recommended_post_repository.upsert", post_id=post_id):
            stmt = insert(recommended_posts_table).values(
                post_id=post_id, updated_at=updated_at
            )
            stmt = stmt.on_conflict_do_update(
                index_elements=[recommended_posts_table.c.post_id],
                set_={
                    "updated_at": func.greatest(
                        recommended_posts_table.c.updated_at,
                        stmt.excluded.updated_at,
                    )
                },
            ).returning(recommended_posts_table)

            result = await self.session.execute(stmt)
            row = result.fetchone()
            await self.session.flush()
            return row_to_recommended_post(row._asdict())

    async def find_by_post_id(self, post_id: PostId) -> Optional[RecommendedPost]:
        """Find the ledger row for a post."""
        stmt = select(recommended_posts_table).where(
            recommended_posts_table.c.post_id == post_id
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_recommended_post(row._asdict()) if row else None

    async def find_recent(self, limit: int = 6) -> list[RecommendedPost]:
        """Most recently refreshed ledger rows."""
        stmt = (
            select(recommended_posts_table)
            .order_by(
                desc(recommended_posts_table.c.updated_at),
                desc(recommended_posts_table.c.id),
            )
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [row_to_recommended_post(row._asdict()) for row in result.fetchall()]
