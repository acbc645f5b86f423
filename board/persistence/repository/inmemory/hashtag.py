"""In-memory hashtag repository for testing."""

from collections import defaultdict
from itertools import count
from typing import Optional, Sequence

from sqlalchemy.exc import IntegrityError

from board.domain.model.hashtag import Hashtag
from board.domain.repository.hashtag import HashtagRepository
from board.domain.value import HashtagId, HashtagTitle, PostId


class InMemoryHashtagRepository(HashtagRepository):
    """In-memory implementation of HashtagRepository for testing."""

    def __init__(self) -> None:
        self._hashtags: dict[HashtagId, Hashtag] = {}
        self._links: list[tuple[PostId, HashtagId]] = []
        self._ids = count(1)

    async def save(self, hashtag: Hashtag) -> Hashtag:
        """Insert a hashtag.

        Raises:
            IntegrityError: If the title is taken
        """
        if any(h.title == hashtag.title for h in self._hashtags.values()):
            raise IntegrityError("Duplicate hashtag", None, Exception())
        hashtag = hashtag.model_copy(update={"id": HashtagId(next(self._ids))})
        self._hashtags[hashtag.id] = hashtag
        return hashtag

    async def find_by_titles(self, titles: Sequence[HashtagTitle]) -> list[Hashtag]:
        """Find hashtags by title."""
        wanted = {title.root for title in titles}
        return [h for h in self._hashtags.values() if h.title.root in wanted]

    async def link_to_post(
        self, post_id: PostId, hashtag_ids: Sequence[HashtagId]
    ) -> None:
        """Link hashtags to a post, skipping existing links."""
        for hashtag_id in hashtag_ids:
            if (post_id, hashtag_id) not in self._links:
                self._links.append((post_id, hashtag_id))

    async def find_titles_by_posts(
        self, post_ids: Sequence[PostId]
    ) -> dict[PostId, list[HashtagTitle]]:
        """Hashtag titles per post."""
        wanted = set(post_ids)
        titles_by_post: dict[PostId, list[HashtagTitle]] = defaultdict(list)
        for post_id, hashtag_id in sorted(self._links, key=lambda link: link[1]):
            if post_id in wanted:
                titles_by_post[post_id].append(self._hashtags[hashtag_id].title)
        return dict(titles_by_post)

    async def find_post_ids(
        self,
        hashtag_id: Optional[HashtagId] = None,
        title: Optional[HashtagTitle] = None,
    ) -> list[PostId]:
        """Find IDs of posts linked to a hashtag."""
        if hashtag_id is None and title is not None:
            matches = [h for h in self._hashtags.values() if h.title == title]
            if not matches:
                return []
            hashtag_id = matches[0].id
        if hashtag_id is None:
            return []
        return [post_id for post_id, hid in self._links if hid == hashtag_id]
