"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional

from sqlalchemy import and_, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import Vote
from board.domain.repository import VoteRepository
from board.domain.value import PostId, UserId
from board.persistence.mappers import row_to_vote, vote_to_dict
from board.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_post_and_user(
        self, post_id: PostId, user_id: UserId, for_update: bool = False
    ) -> Optional[Vote]:
        """Find a user's vote on a post, optionally locking the row."""
        stmt = select(votes_table).where(
            and_(
                votes_table.c.post_id == post_id,
                votes_table.c.user_id == user_id,
            )
        )
        if for_update:
            stmt = stmt.with_for_update()
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_vote(row._asdict()) if row else None

    async def find_by_post(self, post_id: PostId) -> List[Vote]:
        """Find all votes on a post, oldest first."""
        stmt = (
            select(votes_table)
            .where(votes_table.c.post_id == post_id)
            .order_by(votes_table.c.created_at, votes_table.c.id)
        )
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Save a vote (create or update).

        Raises:
            IntegrityError: If inserting a second vote for the same post/user
        """
        if vote.id is None:
            stmt = insert(votes_table).values(**vote_to_dict(vote)).returning(votes_table)
            # Savepoint: a unique violation must not poison the transaction
            async with self.session.begin_nested():
                result = await self.session.execute(stmt)
        else:
            stmt = (
                update(votes_table)
                .where(votes_table.c.id == vote.id)
                .values(is_like=vote.is_like, updated_at=vote.updated_at)
                .returning(votes_table)
            )
            result = await self.session.execute(stmt)
        saved = row_to_vote(result.fetchone()._asdict())
        await self.session.flush()
        return saved
