"""Unit tests for DeleteCommentUseCase."""

import pytest

from shaka.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
)
from shaka.domain.repository import CommentRepository, NotificationRepository
from shaka.domain.service import CommentService
from shaka.domain.value import OperationStatus
from tests.conftest import make_comment, make_post
from tests.harness import create_env_fixture

# Unit test fixture - in-memory store
unit_env = create_env_fixture()


class FailingCommentService(CommentService):
    async def delete_comment(self, comment):
        raise RuntimeError("permission denied")


class TestDeleteCommentUseCase:
    """Tests for DeleteCommentUseCase."""

    @pytest.mark.asyncio
    async def test_delete_keeps_notifications(self, unit_env):
        """Deleting a comment leaves the notifications it caused."""
        # Arrange
        add_comment = await unit_env.get(AddCommentUseCase)
        delete_comment = await unit_env.get(DeleteCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        post = make_post(owner_id="user-owner")
        added = await add_comment.execute(AddCommentRequest(post=post, text="hi"))

        # Act
        result = await delete_comment.execute(
            DeleteCommentRequest(comment=added.comment)
        )

        # Assert
        assert result.ok
        assert result.resource_id == added.comment.id
        assert comment_repo.snapshot(post.id, post.type) == []
        assert len(notification_repo.for_user("user-owner")) == 1

    @pytest.mark.asyncio
    async def test_delete_missing_comment_succeeds(self, unit_env):
        delete_comment = await unit_env.get(DeleteCommentUseCase)

        result = await delete_comment.execute(DeleteCommentRequest(comment=make_comment()))

        assert result.ok

    @pytest.mark.asyncio
    async def test_failure_reported_not_raised(self, unit_env):
        comment_repo = await unit_env.get(CommentRepository)
        delete_comment = DeleteCommentUseCase(
            comment_service=FailingCommentService(comment_repo)
        )
        comment = make_comment()

        result = await delete_comment.execute(DeleteCommentRequest(comment=comment))

        assert result.status is OperationStatus.FAILED
        assert result.error == "permission denied"
        assert result.resource_id == comment.id
