"""Integration tests for the SQL comment adapters against SQLite."""

from uuid import uuid4

import pytest

from lounge.domain.error import SchemaIncompatibleError
from lounge.domain.value import CommentId, PostId
from lounge.persistence.database import create_session_factory
from lounge.persistence.repository import build_comment_repository
from lounge.persistence.schema import SchemaCapabilities
from tests.conftest import make_comment
from tests.integration.persistence.sqlite_support import (
    create_layout,
    sqlite_engine_fixture,
)

engine = sqlite_engine_fixture()


async def open_repository(engine, capabilities: SchemaCapabilities):
    """Create the layout and return a session plus the adapter for it."""
    await create_layout(engine, capabilities)
    session = create_session_factory(engine)()
    return session, build_comment_repository(session, capabilities)


class TestThreadedCommentAdapter:
    """Tests against the current layout (id key, parent_id column)."""

    @pytest.mark.asyncio
    async def test_insert_and_read_back(self, engine, post_id):
        """A stored reply reads back with the same fields."""
        # Arrange
        session, repository = await open_repository(engine, SchemaCapabilities())
        root = make_comment(post_id)
        reply = make_comment(post_id, parent_id=root.id, minutes=1)

        # Act
        async with session:
            await repository.insert(root)
            await repository.insert(reply)
            found = await repository.find_by_id(reply.id)
            link = await repository.find_link(reply.id)

        # Assert
        assert found == reply
        assert link.id == reply.id
        assert link.post_id == post_id
        assert link.parent_id == root.id

    @pytest.mark.asyncio
    async def test_missing_comment(self, engine):
        """Unknown ids read as None."""
        session, repository = await open_repository(engine, SchemaCapabilities())

        async with session:
            assert await repository.find_by_id(CommentId(uuid4())) is None
            assert await repository.find_link(CommentId(uuid4())) is None

    @pytest.mark.asyncio
    async def test_find_by_post_orders_and_limits(self, engine, post_id):
        """Comments come back oldest first, capped at the limit, for one post only."""
        # Arrange
        session, repository = await open_repository(engine, SchemaCapabilities())
        later = make_comment(post_id, minutes=5)
        earlier = make_comment(post_id, minutes=1)
        middle = make_comment(post_id, minutes=3)
        elsewhere = make_comment(PostId(uuid4()), minutes=0)

        # Act
        async with session:
            for comment in (later, earlier, middle, elsewhere):
                await repository.insert(comment)
            everything = await repository.find_by_post(post_id)
            first_two = await repository.find_by_post(post_id, limit=2)

        # Assert
        assert [c.id for c in everything] == [earlier.id, middle.id, later.id]
        assert [c.id for c in first_two] == [earlier.id, middle.id]

    @pytest.mark.asyncio
    async def test_update_body_stamps_updated_at(self, engine, post_id):
        """Editing replaces the body and records the edit time."""
        # Arrange
        session, repository = await open_repository(engine, SchemaCapabilities())
        comment = make_comment(post_id, body="Before")

        # Act
        async with session:
            await repository.insert(comment)
            updated = await repository.update_body(comment.id, "After")
            missing = await repository.update_body(CommentId(uuid4()), "Nobody")

        # Assert
        assert updated.body == "After"
        assert updated.updated_at is not None
        assert missing is None

    @pytest.mark.asyncio
    async def test_delete_removes_subtree(self, engine, post_id):
        """Deleting a comment removes every reply beneath it."""
        # Arrange
        session, repository = await open_repository(engine, SchemaCapabilities())
        root = make_comment(post_id)
        child = make_comment(post_id, parent_id=root.id, minutes=1)
        grandchild = make_comment(post_id, parent_id=child.id, minutes=2)
        other_root = make_comment(post_id, minutes=3)

        # Act
        async with session:
            for comment in (root, child, grandchild, other_root):
                await repository.insert(comment)
            await repository.delete(root.id)
            remaining = await repository.find_by_post(post_id)

        # Assert
        assert [c.id for c in remaining] == [other_root.id]

    @pytest.mark.asyncio
    async def test_delete_by_post(self, engine, post_id):
        """All of a post's comments go; other posts keep theirs."""
        # Arrange
        session, repository = await open_repository(engine, SchemaCapabilities())
        other_post = PostId(uuid4())
        root = make_comment(post_id)

        # Act
        async with session:
            await repository.insert(root)
            await repository.insert(make_comment(post_id, parent_id=root.id, minutes=1))
            await repository.insert(make_comment(other_post))
            removed = await repository.delete_by_post(post_id)
            remaining_here = await repository.find_by_post(post_id)
            remaining_there = await repository.find_by_post(other_post)

        # Assert
        assert removed == 2
        assert remaining_here == []
        assert len(remaining_there) == 1


class TestLegacyIdCommentAdapter:
    """Tests against the layout keyed by comment_id."""

    @pytest.mark.asyncio
    async def test_reads_map_comment_id_to_id(self, engine, post_id):
        """Comments read back identically shaped to the current layout."""
        # Arrange
        capabilities = SchemaCapabilities.from_shape_name("legacy_id")
        session, repository = await open_repository(engine, capabilities)
        root = make_comment(post_id)
        reply = make_comment(post_id, parent_id=root.id, minutes=1)

        # Act
        async with session:
            await repository.insert(root)
            await repository.insert(reply)
            comments = await repository.find_by_post(post_id)
            link = await repository.find_link(reply.id)

        # Assert
        assert comments == [root, reply]
        assert link.parent_id == root.id

    @pytest.mark.asyncio
    async def test_update_without_updated_at_column(self, engine, post_id):
        """Edits work; there is nowhere to record the edit time."""
        # Arrange
        capabilities = SchemaCapabilities.from_shape_name("legacy_id")
        session, repository = await open_repository(engine, capabilities)
        comment = make_comment(post_id)

        # Act
        async with session:
            await repository.insert(comment)
            updated = await repository.update_body(comment.id, "Edited")

        # Assert
        assert updated.body == "Edited"
        assert updated.updated_at is None

    @pytest.mark.asyncio
    async def test_delete_removes_subtree(self, engine, post_id):
        """Cascade works through the comment_id key."""
        # Arrange
        capabilities = SchemaCapabilities.from_shape_name("legacy_id")
        session, repository = await open_repository(engine, capabilities)
        root = make_comment(post_id)
        reply = make_comment(post_id, parent_id=root.id, minutes=1)

        # Act
        async with session:
            await repository.insert(root)
            await repository.insert(reply)
            await repository.delete(root.id)
            remaining = await repository.find_by_post(post_id)

        # Assert
        assert remaining == []


class TestFlatCommentAdapter:
    """Tests against layouts without a parent_id column."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("shape", ["flat", "legacy_id_flat"])
    async def test_roots_read_back_without_parent(self, engine, post_id, shape):
        """Top-level comments are stored and read as roots."""
        # Arrange
        capabilities = SchemaCapabilities.from_shape_name(shape)
        session, repository = await open_repository(engine, capabilities)
        comment = make_comment(post_id)

        # Act
        async with session:
            await repository.insert(comment)
            found = await repository.find_by_id(comment.id)
            link = await repository.find_link(comment.id)

        # Assert
        assert found == comment
        assert link.parent_id is None

    @pytest.mark.asyncio
    async def test_reply_is_refused_and_not_stored(self, engine, post_id):
        """A reply cannot be stored without losing its parent, so nothing is written."""
        # Arrange
        capabilities = SchemaCapabilities.from_shape_name("flat")
        session, repository = await open_repository(engine, capabilities)
        root = make_comment(post_id)
        reply = make_comment(post_id, parent_id=root.id, minutes=1)

        # Act
        async with session:
            await repository.insert(root)
            with pytest.raises(SchemaIncompatibleError):
                await repository.insert(reply)
            comments = await repository.find_by_post(post_id)

        # Assert
        assert [c.id for c in comments] == [root.id]

    @pytest.mark.asyncio
    async def test_delete_removes_only_the_comment(self, engine, post_id):
        """Without a parent link there are no replies to cascade to."""
        # Arrange
        capabilities = SchemaCapabilities.from_shape_name("flat")
        session, repository = await open_repository(engine, capabilities)
        first = make_comment(post_id)
        second = make_comment(post_id, minutes=1)

        # Act
        async with session:
            await repository.insert(first)
            await repository.insert(second)
            await repository.delete(first.id)
            remaining = await repository.find_by_post(post_id)

        # Assert
        assert [c.id for c in remaining] == [second.id]
