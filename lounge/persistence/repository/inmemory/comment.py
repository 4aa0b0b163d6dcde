"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional

from lounge.domain.error import SchemaIncompatibleError
from lounge.domain.model.comment import Comment, CommentLink
from lounge.domain.repository.comment import CommentRepository
from lounge.domain.value import CommentId, PostId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    ``insert`` stores whatever it is given (no integrity checks), so tests
    can plant malformed chains. With ``parent_link=False`` it behaves like
    a store without a parent column.
    """

    def __init__(self, parent_link: bool = True) -> None:
        self._comments: dict[CommentId, Comment] = {}
        self.supports_parent_link = parent_link
        self.insert_calls = 0

    async def insert(self, comment: Comment) -> Comment:
        """Insert a comment."""
        self.insert_calls += 1
        if comment.parent_id is not None and not self.supports_parent_link:
            raise SchemaIncompatibleError("store has no parent link; cannot store a reply")
        self._comments[comment.id] = comment
        return comment

    def _as_stored(self, comment: Comment) -> Comment:
        """Reads from a store without a parent column never carry a parent."""
        if self.supports_parent_link or comment.parent_id is None:
            return comment
        return comment.model_copy(update={"parent_id": None})

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        comment = self._comments.get(comment_id)
        return self._as_stored(comment) if comment else None

    async def find_link(self, comment_id: CommentId) -> Optional[CommentLink]:
        """Find the id/post/parent triple of a comment."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        comment = self._as_stored(comment)
        return CommentLink(
            id=comment.id, post_id=comment.post_id, parent_id=comment.parent_id
        )

    async def find_by_post(self, post_id: PostId, limit: int = 50) -> list[Comment]:
        """Find a post's comments, oldest first."""
        comments = [c for c in self._comments.values() if c.post_id == post_id]
        comments.sort(key=lambda c: c.created_at)
        return [self._as_stored(c) for c in comments[:limit]]

    async def update_body(self, comment_id: CommentId, body: str) -> Optional[Comment]:
        """Replace a comment's body."""
        comment = self._comments.get(comment_id)
        if comment is None:
            return None
        updated = comment.model_copy(update={"body": body, "updated_at": datetime.now()})
        self._comments[comment_id] = updated
        return self._as_stored(updated)

    async def delete(self, comment_id: CommentId) -> None:
        """Delete a comment and its descendants."""
        doomed = {comment_id}
        frontier = [comment_id]
        while frontier:
            frontier = [
                c.id
                for c in self._comments.values()
                if c.parent_id in frontier and c.id not in doomed
            ]
            doomed.update(frontier)

        for cid in doomed:
            self._comments.pop(cid, None)

    async def delete_by_post(self, post_id: PostId) -> int:
        """Delete every comment of a post."""
        doomed = [cid for cid, c in self._comments.items() if c.post_id == post_id]
        for cid in doomed:
            del self._comments[cid]
        return len(doomed)
