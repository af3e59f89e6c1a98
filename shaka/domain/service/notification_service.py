"""Notification domain service.

Notifications are best effort: every write is independent, failures are
logged and reported but never retried, and they never undo the comment or
like that caused them.
"""

from datetime import datetime

import logfire

from shaka.domain.model.comment import Comment
from shaka.domain.model.notification import Notification
from shaka.domain.repository import NotificationRepository
from shaka.domain.value import (
    Identity,
    NotificationType,
    OperationResult,
    PostType,
    UserId,
)

from .base import Service


def plan_comment_notifications(
    author_id: UserId,
    post_owner_id: UserId | None,
    mentioned_user_ids: list[UserId],
) -> list[tuple[UserId, NotificationType]]:
    """Decide who is notified about a new comment, and how.

    Rules:
    1. Every mentioned user other than the author gets a ``mention``.
    2. The post owner gets a ``comment`` unless they wrote the comment or
       were already notified by rule 1.

    Args:
        author_id: Who wrote the comment
        post_owner_id: Who owns the post (None if unknown)
        mentioned_user_ids: Users tagged in the comment

    Returns:
        (recipient, type) pairs in dispatch order
    """
    plan: list[tuple[UserId, NotificationType]] = []
    notified: set[UserId] = set()

    for user_id in mentioned_user_ids:
        if user_id == author_id or user_id in notified:
            continue
        plan.append((user_id, NotificationType.MENTION))
        notified.add(user_id)

    if post_owner_id and post_owner_id != author_id and post_owner_id not in notified:
        plan.append((post_owner_id, NotificationType.COMMENT))

    return plan


def compose_message(
    n_type: NotificationType, actor_name: str, post_type: PostType
) -> str:
    """Human-readable notification text."""
    if n_type is NotificationType.COMMENT:
        return f"{actor_name} commented on your {post_type.value}"
    if n_type is NotificationType.MENTION:
        return f"{actor_name} mentioned you in a comment"
    return f"{actor_name} liked your comment"


class NotificationService(Service):
    """Domain service emitting comment, mention and like notifications."""

    def __init__(
        self,
        notification_repository: NotificationRepository,
        snippet_length: int = 50,
    ) -> None:
        """Initialize notification service.

        Args:
            notification_repository: Notification repository
            snippet_length: Characters of comment text copied into notifications
        """
        self.notification_repository = notification_repository
        self.snippet_length = snippet_length

    async def notify_comment_added(self, comment: Comment) -> list[OperationResult]:
        """Notify mentioned users and the post owner about a new comment.

        Args:
            comment: The stored comment; its author is the actor

        Returns:
            One result per attempted notification
        """
        with logfire.span(
            "notification_service.notify_comment_added",
            comment_id=comment.id,
            post_id=comment.post_id,
        ):
            plan = plan_comment_notifications(
                author_id=comment.user_id,
                post_owner_id=comment.post_user_id,
                mentioned_user_ids=comment.mentioned_user_ids,
            )
            actor = Identity(user_id=comment.user_id, display_name=comment.display_name)

            results = []
            for recipient_id, n_type in plan:
                results.append(await self._send(recipient_id, n_type, actor, comment))
            return results

    async def notify_comment_liked(
        self, comment: Comment, liker: Identity
    ) -> OperationResult | None:
        """Notify a comment's author that someone liked it.

        Args:
            comment: The liked comment
            liker: Who liked it

        Returns:
            The notification result, or None when the author liked their own
            comment or the liker is signed out
        """
        if liker.user_id is None or liker.user_id == comment.user_id:
            return None
        with logfire.span(
            "notification_service.notify_comment_liked",
            comment_id=comment.id,
            liker_id=liker.user_id,
        ):
            return await self._send(
                comment.user_id, NotificationType.COMMENT_LIKE, liker, comment
            )

    async def _send(
        self,
        recipient_id: UserId,
        n_type: NotificationType,
        actor: Identity,
        comment: Comment,
    ) -> OperationResult:
        operation = f"notify_{n_type.value}"
        notification = Notification(
            type=n_type,
            actor_uid=actor.user_id,
            actor_name=actor.display_name,
            target_type=comment.post_type,
            target_id=comment.post_id,
            message=compose_message(n_type, actor.display_name, comment.post_type),
            snippet=comment.text[: self.snippet_length],
            created_at=datetime.now(),
        )
        try:
            notification_id = await self.notification_repository.add(
                recipient_id, notification
            )
        except Exception as e:
            logfire.error(
                "Notification write failed",
                type=n_type.value,
                recipient_id=recipient_id,
                error=str(e),
            )
            return OperationResult.failure(operation, str(e))

        logfire.info(
            "Notification sent",
            type=n_type.value,
            actor_uid=actor.user_id,
            recipient_id=recipient_id,
        )
        return OperationResult.success(operation, resource_id=notification_id)
