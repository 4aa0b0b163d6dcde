"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from lounge.domain.model import Comment, CommentLink, Notification, Post
from lounge.domain.value import (
    CommentId,
    NotificationId,
    NotificationType,
    PostId,
    UserId,
)


def _uuid(value: Any) -> UUID | None:
    if value is None:
        return None
    return UUID(value) if isinstance(value, str) else value


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model
    """
    return Post(
        id=PostId(_uuid(row["id"])),
        author_id=UserId(_uuid(row["author_id"])),
        title=row["title"],
        body=row.get("body") or "",
        lounge=row.get("lounge") or "general",
        created_at=row["created_at"],
        updated_at=row.get("updated_at"),
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return post.model_dump()


def row_to_comment(row: Dict[str, Any], id_column: str = "id") -> Comment:
    """Convert database row to Comment domain model.

    Rows from layouts without a parent link or ``updated_at`` column map
    to ``None`` for those fields.

    Args:
        row: Database row as dict
        id_column: Name of the primary key column in this layout

    Returns:
        Comment domain model
    """
    parent_id = _uuid(row.get("parent_id"))
    return Comment(
        id=CommentId(_uuid(row[id_column])),
        post_id=PostId(_uuid(row["post_id"])),
        author_id=UserId(_uuid(row["author_id"])),
        body=row["body"],
        parent_id=CommentId(parent_id) if parent_id else None,
        created_at=row["created_at"],
        updated_at=row.get("updated_at"),
    )


def row_to_comment_link(row: Dict[str, Any], id_column: str = "id") -> CommentLink:
    """Convert database row to CommentLink.

    Args:
        row: Database row as dict
        id_column: Name of the primary key column in this layout

    Returns:
        CommentLink value
    """
    parent_id = _uuid(row.get("parent_id"))
    return CommentLink(
        id=CommentId(_uuid(row[id_column])),
        post_id=PostId(_uuid(row["post_id"])),
        parent_id=CommentId(parent_id) if parent_id else None,
    )


def comment_to_dict(
    comment: Comment,
    id_column: str = "id",
    parent_link: bool = True,
    updated_at: bool = True,
) -> Dict[str, Any]:
    """Convert Comment domain model to a dict for the given layout.

    Args:
        comment: Comment domain model
        id_column: Name of the primary key column in this layout
        parent_link: Whether the layout has a parent_id column
        updated_at: Whether the layout has an updated_at column

    Returns:
        Dict suitable for database insertion
    """
    data = comment.model_dump()
    data[id_column] = data.pop("id")
    if not parent_link:
        data.pop("parent_id")
    if not updated_at:
        data.pop("updated_at")
    return data


def row_to_notification(row: Dict[str, Any]) -> Notification:
    """Convert database row to Notification domain model.

    Args:
        row: Database row as dict

    Returns:
        Notification domain model
    """
    actor_id = _uuid(row.get("actor_user_id"))
    post_id = _uuid(row.get("post_id"))
    comment_id = _uuid(row.get("comment_id"))
    return Notification(
        id=NotificationId(_uuid(row["id"])),
        user_id=UserId(_uuid(row["user_id"])),
        actor_user_id=UserId(actor_id) if actor_id else None,
        type=NotificationType(row["type"]),
        post_id=PostId(post_id) if post_id else None,
        comment_id=CommentId(comment_id) if comment_id else None,
        is_read=row["is_read"],
        created_at=row["created_at"],
    )


def notification_to_dict(notification: Notification) -> Dict[str, Any]:
    """Convert Notification domain model to database dict.

    Args:
        notification: Notification domain model

    Returns:
        Dict suitable for database insertion
    """
    data = notification.model_dump()
    data["type"] = notification.type.value
    return data
