"""initial_schema

Create the blog schema:
- Permission enum and groups (seeded with admin, author and default)
- Users
- Articles (pretty urls, published flag)
- Sessions
- Comments (threaded through ``parent``, guest or registered authorship)

Revision ID: 3f1c0d2a9b7e
Revises:
Create Date: 2026-10-18 10:12:44.519310

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f1c0d2a9b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

PERMISSIONS = (
    "all",
    "create_article",
    "edit_article",
    "delete_article",
    "edit_foreign_article",
    "delete_foreign_article",
    "create_comment",
    "edit_comment",
    "delete_comment",
    "edit_foreign_comment",
    "delete_foreign_comment",
    "create_user",
    "edit_foreign_user",
    "delete_foreign_user",
)

SEED_GROUPS = {
    "admin": ["all"],
    "author": [
        "create_article",
        "edit_article",
        "delete_article",
        "create_comment",
        "edit_comment",
        "edit_foreign_comment",
        "delete_comment",
        "delete_foreign_comment",
    ],
    "default": ["create_comment", "edit_comment", "delete_comment"],
}


def upgrade() -> None:
    """Upgrade schema."""
    permission = postgresql.ENUM(*PERMISSIONS, name="permission", create_type=False)
    permission.create(op.get_bind(), checkfirst=True)

    # ========================================================================
    # GROUPS table
    # ========================================================================
    groups = op.create_table(
        "groups",
        sa.Column("id", sa.String(255), nullable=False),
        sa.Column("permissions", postgresql.ARRAY(permission), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column("id", sa.String(255), nullable=False),  # Username
        sa.Column("password_hash", sa.String(255), nullable=False, server_default=""),
        sa.Column("name", sa.String(255), nullable=False),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("group", sa.String(255), nullable=False),
        sa.ForeignKeyConstraint(["group"], ["groups.id"]),
        sa.PrimaryKeyConstraint("id"),
    )

    # ========================================================================
    # ARTICLES table
    # ========================================================================
    op.create_table(
        "articles",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("author", sa.String(255), nullable=False),
        sa.Column("url", sa.String(255), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "date",
            sa.TIMESTAMP(),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("visible", sa.Boolean(), nullable=False),
        sa.ForeignKeyConstraint(["author"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("url"),
    )
    op.create_index("idx_articles_date", "articles", [sa.text("date DESC")])
    op.create_index("idx_articles_author", "articles", ["author"])

    # ========================================================================
    # SESSIONS table
    # ========================================================================
    op.create_table(
        "sessions",
        sa.Column("id", sa.String(255), nullable=False),
        sa.Column("user", sa.String(255), nullable=False),
        sa.Column("expires", sa.TIMESTAMP(), nullable=False),
        sa.ForeignKeyConstraint(["user"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_sessions_user", "sessions", ["user"])

    # ========================================================================
    # COMMENTS table
    # ========================================================================
    op.create_table(
        "comments",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("parent", sa.Integer(), nullable=True),
        sa.Column("article", sa.Integer(), nullable=False),
        sa.Column("author", sa.String(255), nullable=True),
        sa.Column("name", sa.String(255), nullable=True),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column(
            "date",
            sa.TIMESTAMP(),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.Column("visible", sa.Boolean(), nullable=False),
        sa.CheckConstraint("(author IS NULL) <> (name IS NULL)", name="chk_author"),
        sa.ForeignKeyConstraint(["article"], ["articles.id"]),
        sa.ForeignKeyConstraint(["author"], ["users.id"]),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_comments_article", "comments", ["article"])
    op.create_index("idx_comments_parent", "comments", ["parent"])
    op.create_index("idx_comments_author", "comments", ["author"])

    # ========================================================================
    # SEED groups
    # ========================================================================
    op.bulk_insert(
        groups,
        [
            {"id": group_id, "permissions": permissions}
            for group_id, permissions in SEED_GROUPS.items()
        ],
    )


def downgrade() -> None:
    """Downgrade schema."""
    # Drop tables (in reverse order of dependencies)
    op.drop_table("comments")
    op.drop_table("sessions")
    op.drop_table("articles")
    op.drop_table("users")
    op.drop_table("groups")

    op.execute("DROP TYPE IF EXISTS permission")
