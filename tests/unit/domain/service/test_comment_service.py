"""Unit tests for CommentService."""

import pytest

from shaka.domain.error import NotFoundError
from shaka.domain.model import CommentDraft
from shaka.domain.repository import CommentRepository
from shaka.domain.service import CommentService
from shaka.domain.value import PostType, UserId
from tests.conftest import make_comment, make_post, next_snapshot
from tests.harness import create_env_fixture

# Unit test fixture - in-memory store
unit_env = create_env_fixture()


def make_draft(post, text="Interesting result", user_id="user-author"):
    return CommentDraft(
        post_id=post.id,
        post_type=post.type,
        post_user_id=post.owner_id,
        text=text,
        user_id=UserId(user_id),
        display_name="Author",
    )


class TestCreateComment:
    """Tests for create_comment method."""

    @pytest.mark.asyncio
    async def test_create_comment_assigns_id_and_defaults(self, unit_env):
        # Arrange
        comment_service = await unit_env.get(CommentService)
        post = make_post(post_type=PostType.QUESTION)

        # Act
        comment = await comment_service.create_comment(make_draft(post))

        # Assert
        assert comment.id
        assert comment.post_id == post.id
        assert comment.post_type is PostType.QUESTION
        assert comment.text == "Interesting result"
        assert comment.liked_by == []
        assert comment.is_private is False
        assert comment.post_user_id == post.owner_id

    @pytest.mark.asyncio
    async def test_created_comment_reaches_subscribers(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        post = make_post()

        async with comment_service.watch_comments(post.id, post.type) as subscription:
            assert await next_snapshot(subscription) == []

            comment = await comment_service.create_comment(make_draft(post))

            snapshot = await next_snapshot(subscription)
            assert [c.id for c in snapshot] == [comment.id]


class TestDeleteComment:
    """Tests for delete_comment method."""

    @pytest.mark.asyncio
    async def test_delete_removes_comment(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = make_post()
        comment = await comment_service.create_comment(make_draft(post))

        await comment_service.delete_comment(comment)

        assert comment_repo.snapshot(post.id, post.type) == []

    @pytest.mark.asyncio
    async def test_delete_missing_comment_is_noop(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        await comment_service.delete_comment(make_comment())


class TestToggleLike:
    """Tests for toggle_like method."""

    @pytest.mark.asyncio
    async def test_toggle_twice_restores_state(self, unit_env):
        comment_service = await unit_env.get(CommentService)
        comment_repo = await unit_env.get(CommentRepository)
        post = make_post()
        comment = await comment_service.create_comment(make_draft(post))
        liker = UserId("user-alice")

        first = await comment_service.toggle_like(comment, liker)
        second = await comment_service.toggle_like(comment, liker)

        assert first.liked is True
        assert second.liked is False
        [stored] = comment_repo.snapshot(post.id, post.type)
        assert stored.liked_by == []

    @pytest.mark.asyncio
    async def test_toggle_deleted_comment_raises(self, unit_env):
        comment_service = await unit_env.get(CommentService)

        with pytest.raises(NotFoundError):
            await comment_service.toggle_like(make_comment(), UserId("user-alice"))
