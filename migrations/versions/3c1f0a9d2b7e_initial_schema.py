"""initial_schema

Create the schema for Client From Hell:
- Users (password accounts; provider fields kept for social logins)
- Memes (upvote and downvote counters)
- Comments (upvote counter, optional parent)
- Resources (signed vote total)
- Game sessions
- Votes (one row per subject and user)
- Newsletter subscribers

The three starter resources are seeded.

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2026-10-17 10:12:04.118532

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql

from cfh.persistence.seed import STARTER_RESOURCES


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("username", sa.String(30), nullable=False),
        sa.Column("password_hash", sa.Text(), nullable=True),
        sa.Column("display_name", sa.String(255), nullable=True),
        sa.Column("avatar", sa.Text(), nullable=True),
        sa.Column("bio", sa.Text(), nullable=True),
        sa.Column("provider", sa.String(50), nullable=False, server_default="local"),
        sa.Column("provider_id", sa.String(255), nullable=True),
        sa.Column("level", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("xp", sa.Integer(), nullable=False, server_default="0"),
        _created_at(),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
        sa.UniqueConstraint("username"),
    )

    # ========================================================================
    # MEMES table
    # ========================================================================
    op.create_table(
        "memes",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("author_id", sa.Integer(), nullable=False),
        sa.Column("image_url", sa.Text(), nullable=False),
        sa.Column("caption", sa.Text(), nullable=True),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("downvotes", sa.Integer(), nullable=False, server_default="0"),
        _created_at(),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("upvotes >= 0", name="ck_memes_upvotes_non_negative"),
        sa.CheckConstraint("downvotes >= 0", name="ck_memes_downvotes_non_negative"),
    )
    op.create_index("idx_memes_author_id", "memes", ["author_id"])
    op.create_index("idx_memes_created_at", "memes", ["created_at"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("meme_id", sa.Integer(), nullable=False),
        sa.Column("author_id", sa.Integer(), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("parent_id", sa.Integer(), nullable=True),
        sa.Column("upvotes", sa.Integer(), nullable=False, server_default="0"),
        _created_at(),
        sa.ForeignKeyConstraint(["meme_id"], ["memes.id"]),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"]),
        sa.ForeignKeyConstraint(["parent_id"], ["comments.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint("upvotes >= 0", name="ck_comments_upvotes_non_negative"),
    )
    op.create_index("idx_comments_meme_id", "comments", ["meme_id"])

    # ========================================================================
    # RESOURCES table
    # ========================================================================
    op.create_table(
        "resources",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(300), nullable=False),
        sa.Column("category", sa.String(100), nullable=True),
        sa.Column("markdown", sa.Text(), nullable=True),
        sa.Column("download_url", sa.Text(), nullable=True),
        sa.Column("votes", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("created_by", sa.Integer(), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(["created_by"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_resources_category", "resources", ["category"])

    # ========================================================================
    # GAME_SESSIONS table
    # ========================================================================
    op.create_table(
        "game_sessions",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("score", sa.Integer(), nullable=True),
        sa.Column("sanity_left", sa.Integer(), nullable=True),
        sa.Column(
            "choices",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column("ended_at", sa.TIMESTAMP(timezone=True), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_game_sessions_user_id", "game_sessions", ["user_id"])

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column("subject_kind", sa.String(20), nullable=False),
        sa.Column("subject_id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), nullable=False),
        sa.Column("direction", sa.String(10), nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"]),
        sa.PrimaryKeyConstraint(
            "subject_kind", "subject_id", "user_id", name="pk_votes"
        ),
        sa.CheckConstraint(
            "subject_kind IN ('meme', 'comment', 'resource')",
            name="ck_votes_subject_kind",
        ),
        sa.CheckConstraint("direction IN ('up', 'down')", name="ck_votes_direction"),
        sa.CheckConstraint(
            "subject_kind <> 'comment' OR direction = 'up'",
            name="ck_votes_comment_up_only",
        ),
    )
    op.create_index("idx_votes_user_id", "votes", ["user_id"])

    # ========================================================================
    # NEWSLETTER_SUBSCRIBERS table
    # ========================================================================
    op.create_table(
        "newsletter_subscribers",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email"),
    )

    # Starter resources
    resources_table = sa.table(
        "resources",
        sa.column("title", sa.String),
        sa.column("category", sa.String),
        sa.column("markdown", sa.Text),
        sa.column("download_url", sa.Text),
    )
    op.bulk_insert(resources_table, STARTER_RESOURCES)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_table("newsletter_subscribers")
    op.drop_index("idx_votes_user_id", table_name="votes")
    op.drop_table("votes")
    op.drop_index("idx_game_sessions_user_id", table_name="game_sessions")
    op.drop_table("game_sessions")
    op.drop_index("idx_resources_category", table_name="resources")
    op.drop_table("resources")
    op.drop_index("idx_comments_meme_id", table_name="comments")
    op.drop_table("comments")
    op.drop_index("idx_memes_created_at", table_name="memes")
    op.drop_index("idx_memes_author_id", table_name="memes")
    op.drop_table("memes")
    op.drop_table("users")
