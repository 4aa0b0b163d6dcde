"""Unit tests for DeletePostUseCase."""

from uuid import uuid4

import pytest

from lounge.application.usecase.post import DeletePostRequest, DeletePostUseCase
from lounge.domain.error import NotAuthorizedError, NotFoundError
from lounge.domain.repository import CommentRepository, PostRepository
from lounge.domain.value import AuthenticatedUser, UserId
from tests.conftest import make_post, plant_chain
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestDeletePostUseCase:
    """Tests for DeletePostUseCase."""

    @pytest.mark.asyncio
    async def test_author_deletes_post_with_comments(self, unit_env):
        """The post and all of its comments are removed."""
        # Arrange
        use_case = await unit_env.get(DeletePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        author = UserId(uuid4())
        post = await post_repo.save(make_post(author_id=author))
        await plant_chain(comment_repo, post.id, 4)

        # Act
        response = await use_case.execute(
            DeletePostRequest(post_id=str(post.id), user=AuthenticatedUser(id=author))
        )

        # Assert
        assert response.comments_removed == 4
        assert await post_repo.find_by_id(post.id) is None
        assert await comment_repo.find_by_post(post.id) == []

    @pytest.mark.asyncio
    async def test_admin_deletes_any_post(self, unit_env):
        """Admins may delete posts they don't own."""
        # Arrange
        use_case = await unit_env.get(DeletePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        post = await post_repo.save(make_post())

        # Act
        await use_case.execute(
            DeletePostRequest(
                post_id=str(post.id),
                user=AuthenticatedUser(id=UserId(uuid4()), is_admin=True),
            )
        )

        # Assert
        assert await post_repo.find_by_id(post.id) is None

    @pytest.mark.asyncio
    async def test_other_user_cannot_delete(self, unit_env):
        """Non-authors are refused and nothing is removed."""
        # Arrange
        use_case = await unit_env.get(DeletePostUseCase)
        post_repo = await unit_env.get(PostRepository)
        comment_repo = await unit_env.get(CommentRepository)
        post = await post_repo.save(make_post())
        await plant_chain(comment_repo, post.id, 2)

        # Act / Assert
        with pytest.raises(NotAuthorizedError):
            await use_case.execute(
                DeletePostRequest(
                    post_id=str(post.id), user=AuthenticatedUser(id=UserId(uuid4()))
                )
            )
        assert await post_repo.find_by_id(post.id) is not None
        assert len(await comment_repo.find_by_post(post.id)) == 2

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        """Deleting an unknown post raises NotFoundError."""
        # Arrange
        use_case = await unit_env.get(DeletePostUseCase)

        # Act / Assert
        with pytest.raises(NotFoundError):
            await use_case.execute(
                DeletePostRequest(
                    post_id=str(uuid4()), user=AuthenticatedUser(id=UserId(uuid4()))
                )
            )
