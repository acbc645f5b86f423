"""File repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Sequence

from board.domain.model.file import File
from board.domain.value import FileId, PostId


class FileRepository(ABC):
    """Repository for File entity."""

    @abstractmethod
    async def save(self, file: File) -> File:
        """Save a file record (insert when it has no ID, update otherwise).

        Args:
            file: The file to save

        Returns:
            The saved file
        """
        pass

    @abstractmethod
    async def find_by_ids(self, file_ids: Sequence[FileId]) -> list[File]:
        """Find files by ID.

        Args:
            file_ids: File IDs

        Returns:
            Found files (may be fewer than requested)
        """
        pass

    @abstractmethod
    async def attach_to_post(
        self, post_id: PostId, file_ids: Sequence[FileId], replace: bool = False
    ) -> int:
        """Attach files to a post.

        Args:
            post_id: The post to attach to
            file_ids: Files to attach
            replace: Detach the post's other files first

        Returns:
            Number of files attached
        """
        pass

    @abstractmethod
    async def find_by_posts(
        self, post_ids: Sequence[PostId]
    ) -> dict[PostId, list[File]]:
        """Find the files attached to each post (batch query).

        Args:
            post_ids: Post IDs

        Returns:
            Mapping of post ID to its files, oldest first
        """
        pass

    @abstractmethod
    async def find_post_ids_created_between(
        self, start: datetime, end: datetime
    ) -> list[PostId]:
        """Distinct IDs of posts that have a file created in [start, end].

        Args:
            start: Window start (inclusive)
            end: Window end (inclusive)

        Returns:
            Post IDs in ascending order
        """
        pass
