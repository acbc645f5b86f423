"""SQLAlchemy table definitions for the board.

These table definitions are used with SQLAlchemy Core.
They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    BigInteger,
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (lookup only, owned by the account service)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("nickname", String(50), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("title", String(200), nullable=False),
    Column("content", Text, nullable=False),
    Column("category", String(50), nullable=True),
    Column(
        "poster_id",
        BigInteger,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("views", BigInteger, nullable=False, server_default="0"),
    Column("like_count", BigInteger, nullable=False, server_default="0"),
    Column("dislike_count", BigInteger, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("deleted_at", TIMESTAMP(timezone=True), nullable=True),
    CheckConstraint("like_count >= 0", name="like_count_non_negative"),
    CheckConstraint("dislike_count >= 0", name="dislike_count_non_negative"),
)

Index("idx_posts_created_at", posts_table.c.created_at.desc())
Index("idx_posts_category", posts_table.c.category)
Index("idx_posts_deleted_at", posts_table.c.deleted_at)

# ============================================================================
# FILES TABLE
# ============================================================================
files_table = Table(
    "files",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column(
        "post_id",
        BigInteger,
        ForeignKey("posts.id", ondelete="SET NULL"),
        nullable=True,
    ),
    Column("url", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_files_post_id", files_table.c.post_id)
Index("idx_files_created_at", files_table.c.created_at)

# ============================================================================
# HASHTAGS TABLE
# ============================================================================
hashtags_table = Table(
    "hashtags",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("title", String(50), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("title", name="uq_hashtag_title"),
)

# ============================================================================
# POST_HASHTAGS TABLE (junction table for many-to-many relationship)
# ============================================================================
post_hashtags_table = Table(
    "post_hashtags",
    metadata,
    Column(
        "post_id",
        BigInteger,
        ForeignKey("posts.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "hashtag_id",
        BigInteger,
        ForeignKey("hashtags.id", ondelete="CASCADE"),
        primary_key=True,
    ),
)

Index("idx_post_hashtags_hashtag_id", post_hashtags_table.c.hashtag_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column(
        "post_id",
        BigInteger,
        ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "user_id",
        BigInteger,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("is_like", Boolean, nullable=True),  # NULL = neutral
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("post_id", "user_id", name="uq_vote_post_user"),
)

Index("idx_votes_user_id", votes_table.c.user_id)

# ============================================================================
# RECOMMENDED_POSTS TABLE (derived ledger, post_id is not a foreign key)
# ============================================================================
recommended_posts_table = Table(
    "recommended_posts",
    metadata,
    Column("id", BigInteger, primary_key=True, autoincrement=True),
    Column("post_id", BigInteger, nullable=False),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("post_id", name="uq_recommended_post_post_id"),
)

Index("idx_recommended_posts_updated_at", recommended_posts_table.c.updated_at.desc())
