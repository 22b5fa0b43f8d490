"""SQLAlchemy table definitions for Quill.

These table definitions match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import ARRAY, TIMESTAMP

from quill.domain.value import Permission

# Metadata object for all tables
metadata = MetaData()

# Mirrors the Permission enum; the type is created by the initial migration
permission_enum = postgresql.ENUM(
    *[permission.value for permission in Permission],
    name="permission",
    create_type=False,
)

# ============================================================================
# GROUPS TABLE
# ============================================================================
groups_table = Table(
    "groups",
    metadata,
    Column("id", String(255), primary_key=True),
    Column("permissions", ARRAY(permission_enum), nullable=False),
)

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", String(255), primary_key=True),  # Username
    Column("password_hash", String(255), nullable=False, server_default=""),
    Column("name", String(255), nullable=False),  # Display name
    Column("email", String(255), nullable=False),
    Column("group", String(255), ForeignKey("groups.id"), nullable=False),
)

# ============================================================================
# ARTICLES TABLE
# ============================================================================
articles_table = Table(
    "articles",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    Column("title", String(255), nullable=False),
    Column("author", String(255), ForeignKey("users.id"), nullable=False),
    Column("url", String(255), nullable=False, unique=True),
    Column("content", Text, nullable=False),
    Column("date", TIMESTAMP, nullable=False, server_default="NOW()"),
    Column("visible", Boolean, nullable=False),
)

Index("idx_articles_date", articles_table.c.date.desc())
Index("idx_articles_author", articles_table.c.author)

# ============================================================================
# SESSIONS TABLE
# ============================================================================
sessions_table = Table(
    "sessions",
    metadata,
    Column("id", String(255), primary_key=True),  # Random url-safe token
    Column(
        "user", String(255), ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("expires", TIMESTAMP, nullable=False),
)

Index("idx_sessions_user", sessions_table.c.user)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Integer, primary_key=True, autoincrement=True),
    # No foreign key: orphaned replies are tolerated and skipped by the tree
    Column("parent", Integer, nullable=True),
    Column("article", Integer, ForeignKey("articles.id"), nullable=False),
    Column("author", String(255), ForeignKey("users.id"), nullable=True),
    Column("name", String(255), nullable=True),  # Guest name or "[deleted]"
    Column("content", Text, nullable=False),
    Column("date", TIMESTAMP, nullable=False, server_default="NOW()"),
    Column("visible", Boolean, nullable=False),
    CheckConstraint("(author IS NULL) <> (name IS NULL)", name="chk_author"),
)

Index("idx_comments_article", comments_table.c.article)
Index("idx_comments_parent", comments_table.c.parent)
Index("idx_comments_author", comments_table.c.author)
