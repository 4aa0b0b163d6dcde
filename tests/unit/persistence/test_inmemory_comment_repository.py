"""Unit tests for the in-memory comment store in its flat mode."""

import pytest

from lounge.domain.error import SchemaIncompatibleError
from lounge.persistence.repository.inmemory import InMemoryCommentRepository
from tests.conftest import make_comment


@pytest.fixture
def flat_repo_with_reply(post_id):
    """A flat store holding a reply written before the parent column was dropped."""
    repo = InMemoryCommentRepository(parent_link=False)
    root = make_comment(post_id)
    reply = make_comment(post_id, parent_id=root.id, minutes=1)
    repo._comments[root.id] = root
    repo._comments[reply.id] = reply
    return repo, root, reply


class TestFlatInMemoryCommentRepository:
    """Reads from a flat store look like reads from the flat SQL adapter."""

    @pytest.mark.asyncio
    async def test_list_has_no_parents(self, flat_repo_with_reply, post_id):
        """Every listed comment comes back as a root."""
        # Arrange
        repo, root, reply = flat_repo_with_reply

        # Act
        comments = await repo.find_by_post(post_id)

        # Assert
        assert [c.id for c in comments] == [root.id, reply.id]
        assert all(c.parent_id is None for c in comments)

    @pytest.mark.asyncio
    async def test_lookups_have_no_parents(self, flat_repo_with_reply):
        """Single reads and links drop the parent too."""
        # Arrange
        repo, _, reply = flat_repo_with_reply

        # Act
        found = await repo.find_by_id(reply.id)
        link = await repo.find_link(reply.id)
        updated = await repo.update_body(reply.id, "Edited")

        # Assert
        assert found.parent_id is None
        assert link.parent_id is None
        assert updated.parent_id is None
        assert updated.body == "Edited"

    @pytest.mark.asyncio
    async def test_reply_insert_is_refused(self, post_id):
        """A flat store cannot hold a new reply."""
        # Arrange
        repo = InMemoryCommentRepository(parent_link=False)
        root = make_comment(post_id)
        await repo.insert(root)

        # Act / Assert
        with pytest.raises(SchemaIncompatibleError):
            await repo.insert(make_comment(post_id, parent_id=root.id))
        assert await repo.find_by_post(post_id) == [root]
