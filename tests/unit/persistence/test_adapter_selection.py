"""Unit tests for choosing a persistence adapter from the store's layout."""

from datetime import datetime
from unittest.mock import MagicMock
from uuid import uuid4

import pytest

from lounge.domain.error import SchemaIncompatibleError
from lounge.domain.model import Notification
from lounge.domain.value import (
    CommentId,
    NotificationId,
    NotificationType,
    PostId,
    UserId,
)
from lounge.persistence.repository import (
    DisabledNotificationRepository,
    PostgresCommentRepository,
    PostgresFlatCommentRepository,
    PostgresNotificationRepository,
    UnavailableCommentRepository,
    build_comment_repository,
    build_notification_repository,
)
from lounge.persistence.schema import SchemaCapabilities
from tests.conftest import make_comment


class TestBuildCommentRepository:
    """Tests for build_comment_repository."""

    def test_threaded_layout(self):
        """A parent link selects the threaded adapter."""
        repository = build_comment_repository(MagicMock(), SchemaCapabilities())

        assert type(repository) is PostgresCommentRepository
        assert repository.supports_parent_link is True

    @pytest.mark.parametrize("shape", ["flat", "legacy_id_flat"])
    def test_flat_layouts(self, shape):
        """No parent link selects the flat adapter."""
        capabilities = SchemaCapabilities.from_shape_name(shape)

        repository = build_comment_repository(MagicMock(), capabilities)

        assert isinstance(repository, PostgresFlatCommentRepository)
        assert repository.supports_parent_link is False
        assert repository.id_column == capabilities.comment_id_column

    def test_missing_table(self):
        """No comments table selects the unavailable adapter."""
        repository = build_comment_repository(
            MagicMock(), SchemaCapabilities(comments_table=False)
        )

        assert isinstance(repository, UnavailableCommentRepository)


class TestUnavailableCommentRepository:
    """Tests for UnavailableCommentRepository."""

    @pytest.mark.asyncio
    async def test_reads_are_empty(self):
        """Reads degrade to empty results."""
        repository = UnavailableCommentRepository()

        assert await repository.find_by_post(PostId(uuid4())) == []
        assert await repository.find_by_id(CommentId(uuid4())) is None
        assert await repository.find_link(CommentId(uuid4())) is None

    @pytest.mark.asyncio
    async def test_writes_raise(self):
        """Storing data fails loudly."""
        repository = UnavailableCommentRepository()

        with pytest.raises(SchemaIncompatibleError):
            await repository.insert(make_comment(PostId(uuid4())))
        with pytest.raises(SchemaIncompatibleError):
            await repository.update_body(CommentId(uuid4()), "text")

    @pytest.mark.asyncio
    async def test_deletes_remove_nothing(self):
        """There is nothing to delete."""
        repository = UnavailableCommentRepository()

        assert await repository.delete_by_post(PostId(uuid4())) == 0


class TestBuildNotificationRepository:
    """Tests for build_notification_repository."""

    def test_with_table(self):
        """The notifications table selects the SQL adapter."""
        repository = build_notification_repository(MagicMock(), SchemaCapabilities())

        assert isinstance(repository, PostgresNotificationRepository)

    @pytest.mark.asyncio
    async def test_without_table(self):
        """Without the table notifications are dropped."""
        repository = build_notification_repository(
            MagicMock(), SchemaCapabilities(notifications_table=False)
        )
        notification = Notification(
            id=NotificationId(uuid4()),
            user_id=UserId(uuid4()),
            actor_user_id=UserId(uuid4()),
            type=NotificationType.REPLY,
            post_id=PostId(uuid4()),
            comment_id=CommentId(uuid4()),
            created_at=datetime.now(),
        )

        assert isinstance(repository, DisabledNotificationRepository)
        assert await repository.save(notification) is notification
        assert await repository.find_by_user(notification.user_id) == []
        assert await repository.mark_read(notification.user_id) == 0
