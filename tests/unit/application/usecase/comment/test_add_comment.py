"""Unit tests for AddCommentUseCase."""

import pytest

from shaka.application.usecase.comment import AddCommentRequest, AddCommentUseCase
from shaka.domain.repository import CommentRepository, NotificationRepository
from shaka.domain.service import (
    CommentService,
    IdentityProvider,
    NotificationService,
)
from shaka.domain.value import NotificationType, OperationStatus
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixtures - in-memory store
unit_env = create_env_fixture(user_id="user-author", display_name="Author")
anonymous_env = create_env_fixture(user_id=None, display_name="Guest")


class FailingCommentService(CommentService):
    async def create_comment(self, draft):
        raise RuntimeError("offline")


class TestAddCommentUseCase:
    """Tests for AddCommentUseCase."""

    @pytest.mark.asyncio
    async def test_adds_comment_as_signed_in_user(self, unit_env):
        # Arrange
        use_case = await unit_env.get(AddCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        post = make_post(owner_id="user-owner")

        # Act
        response = await use_case.execute(
            AddCommentRequest(post=post, text="  Great work  ")
        )

        # Assert
        assert response.result.ok
        assert response.comment is not None
        assert response.result.resource_id == response.comment.id
        [stored] = comment_repo.snapshot(post.id, post.type)
        assert stored.text == "Great work"
        assert stored.user_id == "user-author"
        assert stored.display_name == "Author"
        assert stored.post_user_id == "user-owner"

    @pytest.mark.asyncio
    async def test_notifies_owner_and_mentions(self, unit_env):
        use_case = await unit_env.get(AddCommentUseCase)
        notification_repo = await unit_env.get(NotificationRepository)
        post = make_post(owner_id="user-owner")

        response = await use_case.execute(
            AddCommentRequest(
                post=post,
                text="@Alice see this",
                mentioned_user_ids=["user-alice", "user-author"],
            )
        )

        assert [n.status for n in response.notifications] == [
            OperationStatus.OK,
            OperationStatus.OK,
        ]
        [mention] = notification_repo.for_user("user-alice")
        assert mention.type is NotificationType.MENTION
        [comment] = notification_repo.for_user("user-owner")
        assert comment.type is NotificationType.COMMENT
        assert notification_repo.for_user("user-author") == []

    @pytest.mark.asyncio
    async def test_whitespace_only_text_is_skipped(self, unit_env):
        use_case = await unit_env.get(AddCommentUseCase)
        comment_repo = await unit_env.get(CommentRepository)
        post = make_post()

        response = await use_case.execute(AddCommentRequest(post=post, text="   \n"))

        assert response.result.status is OperationStatus.SKIPPED
        assert response.comment is None
        assert comment_repo.snapshot(post.id, post.type) == []

    @pytest.mark.asyncio
    async def test_signed_out_user_posts_anonymously_without_notifications(
        self, anonymous_env
    ):
        use_case = await anonymous_env.get(AddCommentUseCase)
        notification_repo = await anonymous_env.get(NotificationRepository)

        response = await use_case.execute(
            AddCommentRequest(post=make_post(owner_id="user-owner"), text="hello")
        )

        assert response.result.ok
        assert response.comment.user_id == "anonymous"
        assert response.comment.display_name == "Guest"
        assert response.notifications == []
        assert notification_repo.count() == 0

    @pytest.mark.asyncio
    async def test_write_failure_reported_not_raised(self, unit_env):
        comment_repo = await unit_env.get(CommentRepository)
        notification_service = await unit_env.get(NotificationService)
        notification_repo = await unit_env.get(NotificationRepository)
        use_case = AddCommentUseCase(
            comment_service=FailingCommentService(comment_repo),
            notification_service=notification_service,
            identity_provider=await unit_env.get(IdentityProvider),
        )

        response = await use_case.execute(
            AddCommentRequest(post=make_post(owner_id="user-owner"), text="hello")
        )

        assert response.result.status is OperationStatus.FAILED
        assert response.result.error == "offline"
        assert notification_repo.count() == 0
