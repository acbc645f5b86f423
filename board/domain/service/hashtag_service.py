"""Hashtag domain service."""

from typing import Iterable, Optional, Sequence

import logfire
from pydantic import ValidationError as PydanticValidationError

from board.domain.error import ValidationError
from board.domain.model.hashtag import Hashtag
from board.domain.repository import HashtagRepository
from board.domain.value import HashtagId, HashtagTitle, PostId

from .base import Service


class HashtagService(Service):
    """Domain service for hashtag operations."""

    def __init__(self, hashtag_repository: HashtagRepository) -> None:
        """Initialize hashtag service.

        Args:
            hashtag_repository: Hashtag repository
        """
        self.hashtag_repository = hashtag_repository

    @staticmethod
    def normalize_titles(raw_titles: Iterable[str]) -> list[HashtagTitle]:
        """Turn user input into distinct hashtag titles, keeping input order.

        Blank entries (including a bare '#') are dropped.

        Raises:
            ValidationError: If a title is too long
        """
        titles: list[HashtagTitle] = []
        seen: set[str] = set()
        for raw in raw_titles:
            if not raw.strip().lstrip("#").strip():
                continue
            try:
                title = HashtagTitle(raw)
            except PydanticValidationError as e:
                raise ValidationError(f"Invalid hashtag '{raw}': {e.errors()[0]['msg']}")
            if title.root not in seen:
                seen.add(title.root)
                titles.append(title)
        return titles

    async def attach(
        self, post_id: PostId, raw_titles: Iterable[str]
    ) -> list[HashtagTitle]:
        """Link hashtags to a post, creating the ones that don't exist yet.

        Args:
            post_id: Post ID
            raw_titles: Hashtag titles as typed by the user

        Returns:
            Normalized titles linked to the post
        """
        titles = self.normalize_titles(raw_titles)
        if not titles:
            return []

        with logfire.span(
            "hashtag_service.attach", post_id=post_id, titles=[t.root for t in titles]
        ):
            existing = await self.hashtag_repository.find_by_titles(titles)
            by_title = {hashtag.title.root: hashtag for hashtag in existing}

            for title in titles:
                if title.root not in by_title:
                    by_title[title.root] = await self.hashtag_repository.save(
                        Hashtag(title=title)
                    )
                    logfire.info("Hashtag created", title=title.root)

            await self.hashtag_repository.link_to_post(
                post_id, [by_title[t.root].id for t in titles]
            )
            return titles

    async def find_post_ids(
        self,
        hashtag_id: Optional[HashtagId] = None,
        title: Optional[str] = None,
    ) -> list[PostId]:
        """IDs of posts tagged with a hashtag, looked up by ID or else title.

        Args:
            hashtag_id: Hashtag ID
            title: Hashtag title

        Returns:
            Linked post IDs (empty if the hashtag doesn't exist)
        """
        with logfire.span(
            "hashtag_service.find_post_ids", hashtag_id=hashtag_id, title=title
        ):
            if hashtag_id is not None:
                return await self.hashtag_repository.find_post_ids(hashtag_id=hashtag_id)
            titles = self.normalize_titles([title or ""])
            if not titles:
                raise ValidationError("Hashtag ID or title is required")
            return await self.hashtag_repository.find_post_ids(title=titles[0])

    async def titles_for_posts(
        self, post_ids: Sequence[PostId]
    ) -> dict[PostId, list[HashtagTitle]]:
        """Hashtag titles per post (batch query)."""
        if not post_ids:
            return {}
        return await self.hashtag_repository.find_titles_by_posts(post_ids)
