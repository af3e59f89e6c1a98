"""In-memory comment repository for testing."""

import asyncio
from datetime import datetime, timezone
from typing import Any, Dict
from uuid import uuid4

from shaka.domain.error import NotFoundError
from shaka.domain.model import Comment, CommentDraft
from shaka.domain.repository import CommentRepository, CommentSubscription, Snapshot
from shaka.domain.value import CommentId, LikeToggle, PostId, PostType, UserId
from shaka.persistence.mappers import (
    document_to_comment,
    documents_to_snapshot,
    draft_to_document,
)
from shaka.persistence.subscription import QueueCommentSubscription

ThreadKey = tuple[PostType, PostId]


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Keeps raw documents (the same dicts Firestore would hold) so decoding and
    defaulting run exactly as in production. Every write pushes a fresh
    snapshot to all open subscriptions on that thread.
    """

    def __init__(self) -> None:
        self._threads: dict[ThreadKey, dict[CommentId, Dict[str, Any]]] = {}
        self._subscriptions: dict[ThreadKey, list[QueueCommentSubscription]] = {}
        self._lock = asyncio.Lock()

    def put_document(
        self,
        post_id: PostId,
        post_type: PostType,
        comment_id: CommentId,
        data: Dict[str, Any],
    ) -> None:
        """Store a raw document as-is and notify subscribers."""
        key = (post_type, post_id)
        self._threads.setdefault(key, {})[comment_id] = data
        self._publish(key)

    def snapshot(self, post_id: PostId, post_type: PostType) -> Snapshot:
        """Current decoded comments of a thread, oldest first."""
        documents = self._threads.get((post_type, post_id), {})
        comments = documents_to_snapshot(documents.items(), post_id, post_type)
        # sorted() is stable, so equal timestamps keep insertion order
        return sorted(comments, key=lambda c: c.created_at)

    def subscriber_count(self, post_id: PostId, post_type: PostType) -> int:
        return len(self._subscriptions.get((post_type, post_id), []))

    def subscribe(self, post_id: PostId, post_type: PostType) -> CommentSubscription:
        """Open a subscription; the current state is delivered immediately."""
        key = (post_type, post_id)
        subscription = QueueCommentSubscription()
        self._subscriptions.setdefault(key, []).append(subscription)
        subscription.attach(lambda: self._detach(key, subscription))
        subscription.push(self.snapshot(post_id, post_type))
        return subscription

    async def add(self, draft: CommentDraft) -> Comment:
        """Add a comment with a generated id."""
        comment_id = CommentId(uuid4().hex[:20])
        data = draft_to_document(draft, datetime.now(timezone.utc))
        self.put_document(draft.post_id, draft.post_type, comment_id, data)
        return document_to_comment(comment_id, data, draft.post_id, draft.post_type)

    async def delete(self, comment: Comment) -> None:
        """Delete a comment if present."""
        key = (comment.post_type, comment.post_id)
        if self._threads.get(key, {}).pop(comment.id, None) is not None:
            self._publish(key)

    async def toggle_like(self, comment: Comment, user_id: UserId) -> LikeToggle:
        """Flip membership under a lock so concurrent toggles serialize."""
        key = (comment.post_type, comment.post_id)
        async with self._lock:
            data = self._threads.get(key, {}).get(comment.id)
            if data is None:
                raise NotFoundError("Comment", comment.id)

            liked_by = list(data.get("likedBy") or [])
            if user_id in liked_by:
                liked_by = [uid for uid in liked_by if uid != user_id]
                liked = False
            else:
                liked_by.append(user_id)
                liked = True
            data["likedBy"] = liked_by

        self._publish(key)
        return LikeToggle(comment_id=comment.id, user_id=user_id, liked=liked)

    def _publish(self, key: ThreadKey) -> None:
        post_type, post_id = key
        subscriptions = self._subscriptions.get(key, [])
        if not subscriptions:
            return
        snapshot = self.snapshot(post_id, post_type)
        for subscription in list(subscriptions):
            subscription.push(list(snapshot))

    def _detach(self, key: ThreadKey, subscription: QueueCommentSubscription) -> None:
        subscriptions = self._subscriptions.get(key, [])
        if subscription in subscriptions:
            subscriptions.remove(subscription)
