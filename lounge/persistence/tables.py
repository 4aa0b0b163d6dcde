"""SQLAlchemy table definitions for Lounge.

``metadata`` describes the current schema, matching the latest Alembic
revision. The comments table has been through several layouts; adapters
that must talk to an older layout get their table from
``comments_table_for`` instead of using ``comments_table`` directly.
"""

from functools import lru_cache

from sqlalchemy import (
    Boolean,
    Column,
    DateTime,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    Uuid,
)

from lounge.persistence.schema import SchemaCapabilities

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POSTS TABLE
# ============================================================================
posts_table = Table(
    "posts",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("author_id", Uuid, nullable=False),
    Column("title", String(300), nullable=False),
    Column("body", Text, nullable=False, server_default=""),
    Column("lounge", String(50), nullable=False, server_default="general"),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=True),
)

Index("idx_posts_author_id", posts_table.c.author_id)
Index("idx_posts_created_at", posts_table.c.created_at)

# ============================================================================
# COMMENTS TABLE
# ============================================================================
comments_table = Table(
    "comments",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("post_id", Uuid, ForeignKey("posts.id", ondelete="CASCADE"), nullable=False),
    Column(
        "parent_id", Uuid, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column("author_id", Uuid, nullable=False),
    Column("body", Text, nullable=False),
    Column("created_at", DateTime(timezone=True), nullable=False),
    Column("updated_at", DateTime(timezone=True), nullable=True),
)

Index("idx_comments_post_id_created_at", comments_table.c.post_id, comments_table.c.created_at)
Index("idx_comments_parent_id", comments_table.c.parent_id)

# ============================================================================
# NOTIFICATIONS TABLE
# ============================================================================
notifications_table = Table(
    "notifications",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("user_id", Uuid, nullable=False),
    Column("actor_user_id", Uuid, nullable=True),
    Column("type", String(20), nullable=False),  # 'comment', 'reply'
    Column("post_id", Uuid, ForeignKey("posts.id", ondelete="CASCADE"), nullable=True),
    Column(
        "comment_id", Uuid, ForeignKey("comments.id", ondelete="CASCADE"), nullable=True
    ),
    Column("is_read", Boolean, nullable=False, server_default="false"),
    Column("created_at", DateTime(timezone=True), nullable=False),
)

Index(
    "idx_notifications_user_id_created_at",
    notifications_table.c.user_id,
    notifications_table.c.created_at,
)


@lru_cache
def comments_table_for(capabilities: SchemaCapabilities) -> Table:
    """Describe the comments table as it physically exists.

    The returned table lives in its own MetaData so differently shaped
    descriptions of "comments" never collide. Only the columns present in
    that layout are declared; no constraints are declared since the table
    is never created from this description.

    Args:
        capabilities: Probed or configured schema capabilities

    Returns:
        Table description for building statements against that layout
    """
    columns = [
        Column(capabilities.comment_id_column, Uuid, primary_key=True),
        Column("post_id", Uuid, nullable=False),
        Column("author_id", Uuid, nullable=False),
        Column("body", Text, nullable=False),
        Column("created_at", DateTime(timezone=True), nullable=False),
    ]
    if capabilities.comment_parent_link:
        columns.append(Column("parent_id", Uuid, nullable=True))
    if capabilities.comment_updated_at:
        columns.append(Column("updated_at", DateTime(timezone=True), nullable=True))

    return Table("comments", MetaData(), *columns)
