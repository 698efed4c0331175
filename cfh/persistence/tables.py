"""SQLAlchemy table definitions.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("email", String(255), nullable=False, unique=True),  # Lower-case
    Column("username", String(30), nullable=False, unique=True),
    Column("password_hash", Text, nullable=True),  # NULL for social accounts
    Column("display_name", String(255), nullable=True),
    Column("avatar", Text, nullable=True),
    Column("bio", Text, nullable=True),
    Column("provider", String(50), nullable=False, server_default="local"),
    Column("provider_id", String(255), nullable=True),
    Column("level", Integer, nullable=False, server_default="1"),
    Column("xp", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# MEMES TABLE
# ============================================================================
memes_table = Table(
    "memes",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("author_id", Integer, ForeignKey("users.id"), nullable=False),
    Column("image_url", Text, nullable=False),
    Column("caption", Text, nullable=True),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column("downvotes", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("upvotes >= 0", name="ck_memes_upvotes_non_negative"),
    CheckConstraint("downvotes >= 0", name="ck_memes_downvotes_non_negative"),
)

Index("idx_memes_author_id", memes_table.c.author_id)
Index("idx_memes_created_at", memes_table.c.created_at)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("meme_id", Integer, ForeignKey("memes.id"), nullable=False),
    Column("author_id", Integer, ForeignKey("users.id"), nullable=False),
    Column("body", Text, nullable=False),
    Column("parent_id", Integer, ForeignKey("comments.id"), nullable=True),
    Column("upvotes", Integer, nullable=False, server_default="0"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("upvotes >= 0", name="ck_comments_upvotes_non_negative"),
)

Index("idx_comments_meme_id", comments_table.c.meme_id)

# ============================================================================
# RESOURCES TABLE
# ============================================================================
resources_table = Table(
    "resources",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(300), nullable=False),
    Column("category", String(100), nullable=True),
    Column("markdown", Text, nullable=True),
    Column("download_url", Text, nullable=True),
    Column("votes", Integer, nullable=False, server_default="0"),  # Signed
    Column("created_by", Integer, ForeignKey("users.id"), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_resources_category", resources_table.c.category)

# ============================================================================
# GAME SESSIONS TABLE
# ============================================================================
game_sessions_table = Table(
    "game_sessions",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("user_id", Integer, ForeignKey("users.id"), nullable=False),
    Column("score", Integer, nullable=True),
    Column("sanity_left", Integer, nullable=True),
    Column("choices", JSONB, nullable=False, server_default="[]"),
    Column("ended_at", TIMESTAMP(timezone=True), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_game_sessions_user_id", game_sessions_table.c.user_id)

# ============================================================================
# VOTES TABLE (one row per subject and user)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("subject_kind", String(20), nullable=False),  # meme, comment, resource
    Column("subject_id", Integer, nullable=False),
    Column("user_id", Integer, ForeignKey("users.id"), nullable=False),
    Column("direction", String(10), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("subject_kind", "subject_id", "user_id", name="pk_votes"),
    CheckConstraint(
        "subject_kind IN ('meme', 'comment', 'resource')", name="ck_votes_subject_kind"
    ),
    CheckConstraint("direction IN ('up', 'down')", name="ck_votes_direction"),
    CheckConstraint(
        "subject_kind <> 'comment' OR direction = 'up'",
        name="ck_votes_comment_up_only",
    ),
)

Index("idx_votes_user_id", votes_table.c.user_id)

# ============================================================================
# NEWSLETTER SUBSCRIBERS TABLE
# ============================================================================
newsletter_subscribers_table = Table(
    "newsletter_subscribers",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("email", String(255), nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)
