"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict

from board.domain.model import File, Hashtag, Post, RecommendedPost, User, Vote
from board.domain.value import (
    FileId,
    HashtagId,
    HashtagTitle,
    PostId,
    RecommendedPostId,
    UserId,
    VoteId,
)


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        nickname=row["nickname"],
        created_at=row["created_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to database dict.

    The ID is left out when unset so the database assigns one.
    """
    return user.model_dump(exclude_none=True, include={"id", "nickname", "created_at"})


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Files and hashtags are not loaded here.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(row["id"]),
        title=row["title"],
        content=row["content"],
        category=row.get("category"),
        poster_id=UserId(row["poster_id"]),
        views=row["views"],
        like_count=row["like_count"],
        dislike_count=row["dislike_count"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion (files and hashtags excluded)
    """
    data = post.model_dump(exclude={"files", "hashtags"})
    if data["id"] is None:
        del data["id"]
    return data


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(row["id"]),
        post_id=PostId(row["post_id"]),
        user_id=UserId(row["user_id"]),
        is_like=row["is_like"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    data = vote.model_dump()
    if data["id"] is None:
        del data["id"]
    return data


def row_to_file(row: Dict[str, Any]) -> File:
    """Convert database row to File domain model."""
    return File(
        id=FileId(row["id"]),
        post_id=PostId(row["post_id"]) if row.get("post_id") is not None else None,
        url=row["url"],
        created_at=row["created_at"],
    )


def file_to_dict(file: File) -> Dict[str, Any]:
    """Convert File domain model to database dict."""
    data = file.model_dump()
    if data["id"] is None:
        del data["id"]
    return data


def row_to_hashtag(row: Dict[str, Any]) -> Hashtag:
    """Convert database row to Hashtag domain model."""
    return Hashtag(
        id=HashtagId(row["id"]),
        title=HashtagTitle(row["title"]),
        created_at=row["created_at"],
    )


def hashtag_to_dict(hashtag: Hashtag) -> Dict[str, Any]:
    """Convert Hashtag domain model to database dict.

    model_dump() unwraps the title value object to its string.
    """
    data = hashtag.model_dump()
    if data["id"] is None:
        del data["id"]
    return data


def row_to_recommended_post(row: Dict[str, Any]) -> RecommendedPost:
    """Convert database row to RecommendedPost domain model."""
    return RecommendedPost(
        id=RecommendedPostId(row["id"]),
        post_id=PostId(row["post_id"]),
        updated_at=row["updated_at"],
    )
