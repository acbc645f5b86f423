"""Test configuration and shared seeding helpers."""

from datetime import datetime
from typing import Optional

from dishka import AsyncContainer

from board.domain.model import File, Post, User
from board.domain.repository import FileRepository, PostRepository, UserRepository
from board.domain.value import PostId, UserId
from board.util.clock import Clock


async def seed_user(env: AsyncContainer, nickname: str = "alice") -> User:
    """Insert a user directly through the repository.

    Users are owned by the account service, so there is no API for this.
    """
    user_repo = await env.get(UserRepository)
    return await user_repo.save(User(nickname=nickname))


async def seed_post(
    env: AsyncContainer,
    poster_id: UserId,
    title: str = "Test Post",
    content: str = "Test content",
    category: Optional[str] = None,
    created_at: Optional[datetime] = None,
    views: int = 0,
    like_count: int = 0,
    dislike_count: int = 0,
) -> Post:
    """Insert a post with preset counters, bypassing the post service."""
    post_repo = await env.get(PostRepository)
    clock = await env.get(Clock)
    created_at = created_at or clock.now()

    return await post_repo.save(
        Post(
            title=title,
            content=content,
            category=category,
            poster_id=poster_id,
            views=views,
            like_count=like_count,
            dislike_count=dislike_count,
            created_at=created_at,
            updated_at=created_at,
        )
    )


async def seed_file(
    env: AsyncContainer,
    post_id: Optional[PostId] = None,
    created_at: Optional[datetime] = None,
    url: str = "https://cdn.example.com/image.png",
) -> File:
    """Insert an uploaded file, optionally already attached to a post."""
    file_repo = await env.get(FileRepository)
    clock = await env.get(Clock)

    return await file_repo.save(
        File(post_id=post_id, url=url, created_at=created_at or clock.now())
    )
