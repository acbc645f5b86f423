"""In-memory file repository for testing."""

from collections import defaultdict
from datetime import datetime
from itertools import count
from typing import Sequence

from board.domain.model.file import File
from board.domain.repository.file import FileRepository
from board.domain.value import FileId, PostId


class InMemoryFileRepository(FileRepository):
    """In-memory implementation of FileRepository for testing."""

    def __init__(self) -> None:
        self._files: dict[FileId, File] = {}
        self._ids = count(1)

    async def save(self, file: File) -> File:
        """Save or update a file."""
        if file.id is None:
            file = file.model_copy(update={"id": FileId(next(self._ids))})
        self._files[file.id] = file
        return file

    async def find_by_ids(self, file_ids: Sequence[FileId]) -> list[File]:
        """Find files by ID."""
        return [self._files[fid] for fid in file_ids if fid in self._files]

    async def attach_to_post(
        self, post_id: PostId, file_ids: Sequence[FileId], replace: bool = False
    ) -> int:
        """Point the given files at a post."""
        if replace:
            for file in list(self._files.values()):
                if file.post_id == post_id:
                    self._files[file.id] = file.model_copy(update={"post_id": None})

        attached = 0
        for file_id in set(file_ids):
            file = self._files.get(file_id)
            if file:
                self._files[file_id] = file.model_copy(update={"post_id": post_id})
                attached += 1
        return attached

    async def find_by_posts(
        self, post_ids: Sequence[PostId]
    ) -> dict[PostId, list[File]]:
        """Files per post, oldest first."""
        wanted = set(post_ids)
        files = sorted(self._files.values(), key=lambda f: (f.created_at, f.id))

        files_by_post: dict[PostId, list[File]] = defaultdict(list)
        for file in files:
            if file.post_id in wanted:
                files_by_post[file.post_id].append(file)
        return dict(files_by_post)

    async def find_post_ids_created_between(
        self, start: datetime, end: datetime
    ) -> list[PostId]:
        """Distinct IDs of posts with a file created in the window."""
        return sorted(
            {
                file.post_id
                for file in self._files.values()
                if file.post_id is not None and start <= file.created_at <= end
            }
        )
