"""PostgreSQL implementation of File repository."""

from collections import defaultdict
from datetime import datetime
from typing import Sequence

import logfire
from sqlalchemy import and_, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from board.domain.model import File
from board.domain.repository import FileRepository
from board.domain.value import FileId, PostId
from board.persistence.mappers import file_to_dict, row_to_file
from board.persistence.tables import files_table


class PostgresFileRepository(FileRepository):
    """PostgreSQL implementation of FileRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, file: File) -> File:
        """Save a file record (create or update)."""
        file_dict = file_to_dict(file)
        if file.id is None:
            stmt = insert(files_table).values(**file_dict).returning(files_table)
        else:
            stmt = (
                update(files_table)
                .where(files_table.c.id == file.id)
                .values(**file_dict)
                .returning(files_table)
            )
        result = await self.session.execute(stmt)
        saved = row_to_file(result.fetchone()._asdict())
        await self.session.flush()
        return saved

    async def find_by_ids(self, file_ids: Sequence[FileId]) -> list[File]:
        """Find files by ID."""
        if not file_ids:
            return []
        stmt = select(files_table).where(files_table.c.id.in_(list(file_ids)))
        result = await self.session.execute(stmt)
        return [row_to_file(row._asdict()) for row in result.fetchall()]

    async def attach_to_post(
        self, post_id: PostId, file_ids: Sequence[FileId], replace: bool = False
    ) -> int:
        """Point the given files at a post."""
        with logfire.span(
            "file_repository.attach_to_post",
            post_id=post_id,
            file_ids=list(file_ids),
            replace=replace,
        ):
            if replace:
                detach = (
                    update(files_table)
                    .where(files_table.c.post_id == post_id)
                    .values(post_id=None)
                )
                await self.session.execute(detach)

            attached = 0
            if file_ids:
                stmt = (
                    update(files_table)
                    .where(files_table.c.id.in_(list(file_ids)))
                    .values(post_id=post_id)
                )
                result = await self.session.execute(stmt)
                attached = result.rowcount  # type: ignore[attr-defined]

            await self.session.flush()
            return attached

    async def find_by_posts(
        self, post_ids: Sequence[PostId]
    ) -> dict[PostId, list[File]]:
        """Fetch files for multiple posts in a single query."""
        if not post_ids:
            return {}

        stmt = (
            select(files_table)
            .where(files_table.c.post_id.in_(list(post_ids)))
            .order_by(files_table.c.created_at, files_table.c.id)
        )
        result = await self.session.execute(stmt)

        # Build lookup: post_id -> [files]
        files_by_post: dict[PostId, list[File]] = defaultdict(list)
        for row in result.fetchall():
            files_by_post[PostId(row.post_id)].append(row_to_file(row._asdict()))
        return dict(files_by_post)

    async def find_post_ids_created_between(
        self, start: datetime, end: datetime
    ) -> list[PostId]:
        """Distinct IDs of posts with a file created in the window."""
        with logfire.span(
            "file_repository.find_post_ids_created_between",
            start=start.isoformat(),
            end=end.isoformat(),
        ):
            stmt = (
                select(files_table.c.post_id)
                .where(
                    and_(
                        files_table.c.post_id.is_not(None),
                        files_table.c.created_at >= start,
                        files_table.c.created_at <= end,
                    )
                )
                .distinct()
                .order_by(files_table.c.post_id)
            )
            result = await self.session.execute(stmt)
            return [PostId(post_id) for post_id in result.scalars().all()]
