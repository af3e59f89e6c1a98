"""Unit tests for FirestoreCommentRepository against a mocked client."""

from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from firebase_admin import firestore

from shaka.domain.error import NotFoundError
from shaka.domain.model import CommentDraft
from shaka.domain.value import PostType, UserId
from shaka.persistence.repository import FirestoreCommentRepository
from tests.conftest import make_comment, make_post, next_snapshot


def make_doc(doc_id, data, exists=True):
    doc = MagicMock()
    doc.id = doc_id
    doc.exists = exists
    doc.to_dict.return_value = data
    return doc


@pytest.fixture
def client():
    return MagicMock()


@pytest.fixture
def comments_ref(client):
    return client.collection.return_value.document.return_value.collection.return_value


class TestSubscribe:
    """Tests for subscribe method."""

    @pytest.mark.asyncio
    async def test_listens_on_post_comments_ordered(self, client, comments_ref):
        repo = FirestoreCommentRepository(client)
        post = make_post(post_id="p1", post_type=PostType.QUESTION)

        subscription = repo.subscribe(post.id, post.type)

        client.collection.assert_called_once_with("questions")
        client.collection.return_value.document.assert_called_once_with("p1")
        client.collection.return_value.document.return_value.collection.assert_called_once_with(
            "comments"
        )
        comments_ref.order_by.assert_called_once_with(
            "createdAt", direction=firestore.Query.ASCENDING
        )
        await subscription.close()

    @pytest.mark.asyncio
    async def test_listener_snapshots_are_decoded(self, comments_ref, client):
        repo = FirestoreCommentRepository(client)
        post = make_post()
        query = comments_ref.order_by.return_value

        subscription = repo.subscribe(post.id, post.type)
        [on_snapshot], _ = query.on_snapshot.call_args
        on_snapshot(
            [
                make_doc("c1", {"text": "hi", "userID": "abcdef99"}),
                make_doc("c2", {"text": 7, "userID": "u2"}),
            ],
            [],
            datetime.now(),
        )

        snapshot = await next_snapshot(subscription)
        await subscription.close()

        assert [c.id for c in snapshot] == ["c1"]
        assert snapshot[0].display_name == "User_abcdef"

    @pytest.mark.asyncio
    async def test_listener_error_ends_delivery(self, comments_ref, client):
        repo = FirestoreCommentRepository(client)
        post = make_post()
        broken = MagicMock()
        broken.to_dict.side_effect = RuntimeError("stream reset")

        subscription = repo.subscribe(post.id, post.type)
        [on_snapshot], _ = comments_ref.order_by.return_value.on_snapshot.call_args
        on_snapshot([broken], [], datetime.now())

        received = [snapshot async for snapshot in subscription]
        await subscription.close()

        assert received == []

    @pytest.mark.asyncio
    async def test_close_unsubscribes_listener(self, comments_ref, client):
        repo = FirestoreCommentRepository(client)
        post = make_post()
        watch = comments_ref.order_by.return_value.on_snapshot.return_value

        subscription = repo.subscribe(post.id, post.type)
        await subscription.close()
        await subscription.close()

        watch.unsubscribe.assert_called_once_with()


class TestAdd:
    """Tests for add method."""

    @pytest.mark.asyncio
    async def test_add_writes_server_timestamp_and_reads_back(self, comments_ref, client):
        created_at = datetime(2024, 5, 1, 9, 30, tzinfo=timezone.utc)
        doc_ref = MagicMock()
        doc_ref.id = "new-id"
        comments_ref.add.return_value = (None, doc_ref)
        doc_ref.get.return_value = make_doc(
            "new-id",
            {"text": "hello", "userID": "u1", "displayName": "Ada", "createdAt": created_at},
        )
        repo = FirestoreCommentRepository(client)
        post = make_post()
        draft = CommentDraft(
            post_id=post.id,
            post_type=post.type,
            post_user_id=post.owner_id,
            text="hello",
            user_id=UserId("u1"),
            display_name="Ada",
        )

        comment = await repo.add(draft)

        [data], _ = comments_ref.add.call_args
        assert data["createdAt"] is firestore.SERVER_TIMESTAMP
        assert data["likedBy"] == []
        assert comment.id == "new-id"
        assert comment.created_at == created_at

    @pytest.mark.asyncio
    async def test_failed_readback_still_returns_written_comment(
        self, comments_ref, client
    ):
        """A written comment is reported as added even if reading it back fails."""
        doc_ref = MagicMock()
        doc_ref.id = "new-id"
        doc_ref.get.side_effect = RuntimeError("deadline exceeded")
        comments_ref.add.return_value = (None, doc_ref)
        repo = FirestoreCommentRepository(client)
        post = make_post(owner_id="user-owner")
        draft = CommentDraft(
            post_id=post.id,
            post_type=post.type,
            post_user_id=post.owner_id,
            text="hello @Bob",
            user_id=UserId("u1"),
            display_name="Ada",
            mentioned_user_ids=[UserId("user-bob")],
        )

        comment = await repo.add(draft)

        comments_ref.add.assert_called_once()
        assert comment.id == "new-id"
        assert comment.text == "hello @Bob"
        assert comment.user_id == "u1"
        assert comment.mentioned_user_ids == ["user-bob"]
        assert comment.post_user_id == "user-owner"
        assert comment.created_at.tzinfo is not None


class TestDelete:
    """Tests for delete method."""

    @pytest.mark.asyncio
    async def test_delete_removes_document(self, comments_ref, client):
        repo = FirestoreCommentRepository(client)
        comment = make_comment(comment_id="c1")

        await repo.delete(comment)

        comments_ref.document.assert_called_once_with("c1")
        comments_ref.document.return_value.delete.assert_called_once_with()


class TestToggleLike:
    """Tests for toggle_like method."""

    @pytest.fixture(autouse=True)
    def plain_transaction(self, monkeypatch):
        # Run the transaction body once, without the retry wrapper
        monkeypatch.setattr(firestore, "transactional", lambda func: func)

    @pytest.mark.asyncio
    async def test_adds_liker_with_array_union(self, comments_ref, client):
        doc_ref = comments_ref.document.return_value
        doc_ref.get.return_value = make_doc("c1", {"likedBy": ["someone"]})
        repo = FirestoreCommentRepository(client)

        toggle = await repo.toggle_like(make_comment(comment_id="c1"), UserId("u1"))

        assert toggle.liked is True
        transaction = client.transaction.return_value
        transaction.update.assert_called_once_with(
            doc_ref, {"likedBy": firestore.ArrayUnion(["u1"])}
        )

    @pytest.mark.asyncio
    async def test_removes_liker_with_array_remove(self, comments_ref, client):
        doc_ref = comments_ref.document.return_value
        doc_ref.get.return_value = make_doc("c1", {"likedBy": ["u1"]})
        repo = FirestoreCommentRepository(client)

        toggle = await repo.toggle_like(make_comment(comment_id="c1"), UserId("u1"))

        assert toggle.liked is False
        client.transaction.return_value.update.assert_called_once_with(
            doc_ref, {"likedBy": firestore.ArrayRemove(["u1"])}
        )

    @pytest.mark.asyncio
    async def test_missing_comment_raises(self, comments_ref, client):
        comments_ref.document.return_value.get.return_value = make_doc(
            "c1", None, exists=False
        )
        repo = FirestoreCommentRepository(client)

        with pytest.raises(NotFoundError):
            await repo.toggle_like(make_comment(comment_id="c1"), UserId("u1"))
