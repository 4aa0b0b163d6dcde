"""SQL implementation of the Post repository."""

from typing import Optional

from sqlalchemy import delete, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from lounge.domain.model import Post
from lounge.domain.repository import PostRepository
from lounge.domain.value import PostId
from lounge.persistence.mappers import post_to_dict, row_to_post
from lounge.persistence.tables import posts_table


class PostgresPostRepository(PostRepository):
    """PostRepository over the posts table."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, post_id: PostId) -> Optional[Post]:
        """Find a post by ID."""
        result = await self.session.execute(
            select(posts_table).where(posts_table.c.id == post_id)
        )
        row = result.fetchone()
        return row_to_post(row._asdict()) if row else None

    async def save(self, post: Post) -> Post:
        """Overwrite the stored post, inserting it when none matched."""
        values = post_to_dict(post)
        result = await self.session.execute(
            update(posts_table).where(posts_table.c.id == post.id).values(**values)
        )
        if result.rowcount == 0:
            await self.session.execute(insert(posts_table).values(**values))

        await self.session.flush()
        return post

    async def delete(self, post_id: PostId) -> bool:
        """Hard-delete a post."""
        result = await self.session.execute(
            delete(posts_table).where(posts_table.c.id == post_id)
        )
        await self.session.flush()
        return bool(result.rowcount)
