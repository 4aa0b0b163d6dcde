"""SQL implementations of the Comment repository.

One adapter exists per supported layout of the comments table. Which one
serves a request is decided from ``SchemaCapabilities`` by
``build_comment_repository``; an adapter never retries a statement against
a different layout.
"""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import Table, select
from sqlalchemy.ext.asyncio import AsyncSession

from lounge.domain.error import SchemaIncompatibleError
from lounge.domain.model import Comment, CommentLink
from lounge.domain.repository import CommentRepository
from lounge.domain.value import CommentId, PostId
from lounge.persistence.mappers import (
    comment_to_dict,
    row_to_comment,
    row_to_comment_link,
)
from lounge.persistence.schema import SchemaCapabilities
from lounge.persistence.tables import comments_table_for


class PostgresCommentRepository(CommentRepository):
    """CommentRepository over a comments table with a parent_id column."""

    supports_parent_link = True

    def __init__(
        self,
        session: AsyncSession,
        capabilities: Optional[SchemaCapabilities] = None,
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            capabilities: Layout of the comments table (current layout if omitted)
        """
        self.session = session
        self.capabilities = capabilities or SchemaCapabilities()
        self.table: Table = comments_table_for(self.capabilities)
        self.id_column = self.capabilities.comment_id_column

    @property
    def _pk(self):
        return self.table.c[self.id_column]

    def _row_to_comment(self, row) -> Comment:
        return row_to_comment(row._asdict(), id_column=self.id_column)

    async def insert(self, comment: Comment) -> Comment:
        """Insert a new comment as a single row."""
        values = comment_to_dict(
            comment,
            id_column=self.id_column,
            parent_link=self.capabilities.comment_parent_link,
            updated_at=self.capabilities.comment_updated_at,
        )
        await self.session.execute(self.table.insert().values(**values))
        await self.session.flush()
        return comment

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(self.table).where(self._pk == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return self._row_to_comment(row) if row else None

    async def find_link(self, comment_id: CommentId) -> Optional[CommentLink]:
        """Find the id/post/parent triple of a comment."""
        columns = [self._pk, self.table.c.post_id]
        if self.capabilities.comment_parent_link:
            columns.append(self.table.c.parent_id)

        result = await self.session.execute(select(*columns).where(self._pk == comment_id))
        row = result.fetchone()
        return row_to_comment_link(row._asdict(), id_column=self.id_column) if row else None

    async def find_by_post(self, post_id: PostId, limit: int = 50) -> List[Comment]:
        """Find a post's comments, oldest first."""
        stmt = (
            select(self.table)
            .where(self.table.c.post_id == post_id)
            .order_by(self.table.c.created_at)
            .limit(limit)
        )
        result = await self.session.execute(stmt)
        return [self._row_to_comment(row) for row in result.fetchall()]

    async def update_body(self, comment_id: CommentId, body: str) -> Optional[Comment]:
        """Replace a comment's body, stamping updated_at where the column exists."""
        values: dict = {"body": body}
        if self.capabilities.comment_updated_at:
            values["updated_at"] = datetime.now()

        stmt = self.table.update().where(self._pk == comment_id).values(**values)
        result = await self.session.execute(stmt)
        if result.rowcount == 0:
            return None

        await self.session.flush()
        return await self.find_by_id(comment_id)

    async def _subtree_ids(self, comment_id: CommentId) -> List[CommentId]:
        """Collect a comment's id and the ids of all its descendants."""
        collected = [comment_id]
        seen = {comment_id}
        frontier = [comment_id]

        while frontier:
            stmt = select(self._pk).where(self.table.c.parent_id.in_(frontier))
            result = await self.session.execute(stmt)
            frontier = [cid for cid in result.scalars().all() if cid not in seen]
            seen.update(frontier)
            collected.extend(frontier)

        return collected

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment and every reply beneath it (hard delete)."""
        ids = await self._subtree_ids(comment_id)
        await self.session.execute(self.table.delete().where(self._pk.in_(ids)))
        await self.session.flush()
        if len(ids) > 1:
            logfire.info(
                "Deleted comment with replies",
                comment_id=str(comment_id),
                replies=len(ids) - 1,
            )

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment of a post."""
        stmt = self.table.delete().where(self.table.c.post_id == post_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0


class PostgresFlatCommentRepository(PostgresCommentRepository):
    """CommentRepository over a comments table without a parent_id column.

    Every stored comment reads back as a root. Replies cannot be stored, so
    inserting one fails instead of silently dropping its parent.
    """

    supports_parent_link = False

    async def insert(self, comment: Comment) -> Comment:
        """Insert a top-level comment.

        Raises:
            SchemaIncompatibleError: If the comment is a reply
        """
        if comment.parent_id is not None:
            raise SchemaIncompatibleError(
                "comments table has no parent_id column; cannot store a reply"
            )
        return await super().insert(comment)

    async def _subtree_ids(self, comment_id: CommentId) -> List[CommentId]:
        return [comment_id]


class UnavailableCommentRepository(CommentRepository):
    """CommentRepository used when the comments table does not exist.

    Reads degrade to empty results. Writes that would store data raise;
    deletes have nothing to remove.
    """

    supports_parent_link = False

    async def insert(self, comment: Comment) -> Comment:
        raise SchemaIncompatibleError("comments table does not exist")

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        return None

    async def find_link(self, comment_id: CommentId) -> Optional[CommentLink]:
        return None

    async def find_by_post(self, post_id: PostId, limit: int = 50) -> List[Comment]:
        return []

    async def update_body(self, comment_id: CommentId, body: str) -> Optional[Comment]:
        raise SchemaIncompatibleError("comments table does not exist")

    async def delete(self, comment_id: CommentId) -> None:
        return None

    async def delete_by_post(self, post_id: PostId) -> int:
        return 0


def build_comment_repository(
    session: AsyncSession, capabilities: SchemaCapabilities
) -> CommentRepository:
    """Select the comment adapter for the store's layout.

    Args:
        session: SQLAlchemy async session
        capabilities: Probed or configured layout

    Returns:
        Adapter bound to the session
    """
    if not capabilities.comments_table:
        return UnavailableCommentRepository()
    if not capabilities.comment_parent_link:
        return PostgresFlatCommentRepository(session, capabilities)
    return PostgresCommentRepository(session, capabilities)
