"""Domain value objects for the board.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from pydantic import field_validator

from board.domain.value.common import RootValueObject


class PostSortOrder(str, Enum):
    """Sort order for post listings."""

    RECENT = "recent"  # created_at DESC
    VIEWS = "views"  # views DESC, then created_at DESC
    LIKES = "likes"  # like_count DESC, then created_at DESC


class FeedKind(str, Enum):
    """Curated post feeds shown next to the main listing."""

    RECENT = "recent"
    POPULAR = "popular"
    RECOMMENDED = "recommended"
    EMPHASIZED = "emphasized"


class HashtagTitle(RootValueObject[str]):
    """Hashtag title.

    Stored without the leading '#', trimmed, 1-50 characters.
    Examples: 'travel', '맛집'
    """

    @field_validator("root", mode="before")
    @classmethod
    def normalize_title(cls, v: str) -> str:
        """Strip whitespace and leading '#' characters."""
        if isinstance(v, str):
            return v.strip().lstrip("#").strip()
        return v

    @field_validator("root")
    @classmethod
    def validate_title(cls, v: str) -> str:
        """Validate title length."""
        if len(v) < 1 or len(v) > 50:
            raise ValueError("Hashtag title must be 1-50 characters")
        return v
