"""Detection of the physical comments schema.

The comments table has existed in several migration states. Rather than
reacting to database error text at query time, the layout is determined
once (by probing the catalog, or from configuration) and the matching
adapter is used for every request.
"""

from typing import Literal

import logfire
from pydantic import BaseModel, ConfigDict
from sqlalchemy import inspect
from sqlalchemy.engine import Connection
from sqlalchemy.ext.asyncio import AsyncEngine

from lounge.config import CommentSchemaShapeName
from lounge.domain.error import SchemaIncompatibleError
from lounge.util.error import ConfigurationError

COMMENTS_TABLE = "comments"
NOTIFICATIONS_TABLE = "notifications"

_REQUIRED_COMMENT_COLUMNS = frozenset({"post_id", "author_id", "body", "created_at"})


class SchemaCapabilities(BaseModel):
    """What the comment store can hold in its current layout."""

    model_config = ConfigDict(frozen=True)

    comments_table: bool = True
    comment_id_column: Literal["id", "comment_id"] = "id"
    comment_parent_link: bool = True
    comment_updated_at: bool = True
    notifications_table: bool = True

    @property
    def shape_name(self) -> str:
        """Configuration name of the comments layout."""
        if not self.comments_table:
            return "missing"
        name = "legacy_id" if self.comment_id_column == "comment_id" else "current"
        if not self.comment_parent_link:
            name = "flat" if name == "current" else "legacy_id_flat"
        return name

    @classmethod
    def from_shape_name(cls, shape: CommentSchemaShapeName) -> "SchemaCapabilities":
        """Build capabilities from an explicitly configured layout.

        Only the current layout has the columns and tables added by the
        later migrations (``updated_at``, notifications).

        Args:
            shape: Configured layout name (not "auto")

        Returns:
            Capabilities for that layout

        Raises:
            ConfigurationError: If shape is "auto"
        """
        if shape == "auto":
            raise ConfigurationError(
                "Layout 'auto' must be probed, not configured",
                setting="comments.schema_shape",
            )

        current = shape == "current"
        return cls(
            comment_id_column="comment_id" if shape.startswith("legacy_id") else "id",
            comment_parent_link=shape in ("current", "legacy_id"),
            comment_updated_at=current,
            notifications_table=current,
        )


def _inspect_capabilities(connection: Connection) -> SchemaCapabilities:
    inspector = inspect(connection)
    tables = set(inspector.get_table_names())
    has_notifications = NOTIFICATIONS_TABLE in tables

    if COMMENTS_TABLE not in tables:
        return SchemaCapabilities(
            comments_table=False,
            comment_parent_link=False,
            comment_updated_at=False,
            notifications_table=has_notifications,
        )

    columns = {column["name"] for column in inspector.get_columns(COMMENTS_TABLE)}

    if "id" in columns:
        id_column = "id"
    elif "comment_id" in columns:
        id_column = "comment_id"
    else:
        raise SchemaIncompatibleError(
            "comments table has neither an 'id' nor a 'comment_id' column"
        )

    missing = _REQUIRED_COMMENT_COLUMNS - columns
    if missing:
        raise SchemaIncompatibleError(
            f"comments table is missing columns: {', '.join(sorted(missing))}"
        )

    return SchemaCapabilities(
        comment_id_column=id_column,
        comment_parent_link="parent_id" in columns,
        comment_updated_at="updated_at" in columns,
        notifications_table=has_notifications,
    )


async def probe_schema(engine: AsyncEngine) -> SchemaCapabilities:
    """Inspect the database catalog and report the comment store's layout.

    Args:
        engine: Database engine

    Returns:
        Detected capabilities

    Raises:
        SchemaIncompatibleError: If the comments table exists in a layout
            no adapter supports
    """
    with logfire.span("schema.probe"):
        async with engine.connect() as connection:
            capabilities = await connection.run_sync(_inspect_capabilities)

        if not capabilities.comments_table:
            logfire.error("Comments table not found; comment writes are disabled")
        elif not capabilities.comment_parent_link:
            logfire.warn(
                "Comments table has no parent link column; replies are disabled",
                shape=capabilities.shape_name,
            )
        else:
            logfire.info("Comment schema detected", shape=capabilities.shape_name)

        if not capabilities.notifications_table:
            logfire.warn("Notifications table not found; notifications are disabled")

        return capabilities


async def resolve_capabilities(
    engine: AsyncEngine, shape: CommentSchemaShapeName
) -> SchemaCapabilities:
    """Use the configured layout, probing only when it is "auto"."""
    if shape == "auto":
        return await probe_schema(engine)

    logfire.info("Comment schema configured explicitly", shape=shape)
    return SchemaCapabilities.from_shape_name(shape)
