"""Post representations shared by the post and feed use cases."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel

from board.domain.model import File, Post


class FileItem(BaseModel):
    """Attached file in a response."""

    file_id: int
    url: str
    created_at: datetime

    @classmethod
    def from_file(cls, file: File) -> "FileItem":
        return cls(file_id=file.id, url=file.url, created_at=file.created_at)


class PostItem(BaseModel):
    """Post in a response."""

    post_id: int
    title: str
    content: str
    category: Optional[str]
    poster_id: int
    views: int
    like_count: int
    dislike_count: int
    hashtags: list[str]
    files: list[FileItem]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_post(cls, post: Post) -> "PostItem":
        """Build the response item from a hydrated post."""
        return cls(
            post_id=post.id,
            title=post.title,
            content=post.content,
            category=post.category,
            poster_id=post.poster_id,
            views=post.views,
            like_count=post.like_count,
            dislike_count=post.dislike_count,
            hashtags=[tag.root for tag in post.hashtags],
            files=[FileItem.from_file(file) for file in post.files],
            created_at=post.created_at,
            updated_at=post.updated_at,
        )
