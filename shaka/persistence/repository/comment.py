"""Firestore implementation of Comment repository."""

import asyncio
from datetime import datetime, timezone

import logfire
from firebase_admin import firestore

from shaka.domain.error import NotFoundError
from shaka.domain.model import Comment, CommentDraft
from shaka.domain.repository import CommentRepository, CommentSubscription
from shaka.domain.value import CommentId, LikeToggle, PostId, PostType, UserId
from shaka.persistence.mappers import (
    document_to_comment,
    documents_to_snapshot,
    draft_to_document,
)
from shaka.persistence.subscription import QueueCommentSubscription


class FirestoreCommentRepository(CommentRepository):
    """Firestore implementation of CommentRepository.

    Comments live in ``{works|questions}/{postID}/comments``. The client is
    synchronous, so writes run in worker threads and listener callbacks are
    handed back to the event loop.
    """

    def __init__(self, client: firestore.Client) -> None:
        """Initialize repository with a Firestore client.

        Args:
            client: Firestore client
        """
        self.client = client

    def _comments_ref(self, post_id: PostId, post_type: PostType):
        return (
            self.client.collection(post_type.collection)
            .document(post_id)
            .collection("comments")
        )

    def subscribe(self, post_id: PostId, post_type: PostType) -> CommentSubscription:
        """Open a snapshot listener ordered by createdAt ascending."""
        subscription = QueueCommentSubscription()
        query = self._comments_ref(post_id, post_type).order_by(
            "createdAt", direction=firestore.Query.ASCENDING
        )

        def _on_snapshot(docs, changes, read_time):
            try:
                snapshot = documents_to_snapshot(
                    ((doc.id, doc.to_dict()) for doc in docs), post_id, post_type
                )
            except Exception as e:
                # Runs on the listener thread; nothing above us can handle it
                logfire.error(
                    "Comment listener failed",
                    post_id=post_id,
                    error=str(e),
                    error_type=type(e).__name__,
                )
                subscription.end_threadsafe()
                return
            subscription.push_threadsafe(snapshot)

        watch = query.on_snapshot(_on_snapshot)
        subscription.attach(watch.unsubscribe)
        return subscription

    async def add(self, draft: CommentDraft) -> Comment:
        """Add a comment document stamped with the server time."""
        data = draft_to_document(draft, firestore.SERVER_TIMESTAMP)
        _, doc_ref = await asyncio.to_thread(
            self._comments_ref(draft.post_id, draft.post_type).add, data
        )
        # Read back to pick up the server-assigned createdAt
        try:
            doc = await asyncio.to_thread(doc_ref.get)
        except Exception as e:
            # The write landed; the next snapshot carries the stored timestamp
            logfire.warn(
                "Comment readback failed",
                comment_id=doc_ref.id,
                post_id=draft.post_id,
                error=str(e),
            )
            return Comment(
                id=CommentId(doc_ref.id),
                post_id=draft.post_id,
                post_type=draft.post_type,
                text=draft.text,
                user_id=draft.user_id,
                display_name=draft.display_name,
                created_at=datetime.now(timezone.utc),
                mentioned_user_ids=draft.mentioned_user_ids,
                post_user_id=draft.post_user_id,
            )
        return document_to_comment(
            doc_ref.id, doc.to_dict() or {}, draft.post_id, draft.post_type
        )

    async def delete(self, comment: Comment) -> None:
        """Delete a comment document."""
        doc_ref = self._comments_ref(comment.post_id, comment.post_type).document(
            comment.id
        )
        await asyncio.to_thread(doc_ref.delete)

    async def toggle_like(self, comment: Comment, user_id: UserId) -> LikeToggle:
        """Flip membership inside a transaction using array transforms."""
        doc_ref = self._comments_ref(comment.post_id, comment.post_type).document(
            comment.id
        )
        liked = await asyncio.to_thread(self._toggle_like_sync, doc_ref, user_id)
        return LikeToggle(comment_id=comment.id, user_id=user_id, liked=liked)

    def _toggle_like_sync(self, doc_ref, user_id: UserId) -> bool:
        transaction = self.client.transaction()

        @firestore.transactional
        def _toggle_in_transaction(transaction, doc_ref, user_id):
            snapshot = doc_ref.get(transaction=transaction)
            if not snapshot.exists:
                raise NotFoundError("Comment", doc_ref.id)

            liked_by = (snapshot.to_dict() or {}).get("likedBy") or []
            if user_id in liked_by:
                transaction.update(doc_ref, {"likedBy": firestore.ArrayRemove([user_id])})
                return False
            transaction.update(doc_ref, {"likedBy": firestore.ArrayUnion([user_id])})
            return True

        return _toggle_in_transaction(transaction, doc_ref, user_id)
