"""Mappers for converting between store documents and domain models.

Documents use the camelCase field names of the mobile app's schema:

    {works|questions}/{postID}/comments/{commentID}
        text, userID, displayName, createdAt, isPrivate, postUserID,
        likedBy, mentionedUserIDs
    notifications/{userID}/items/{notificationID}
        type, actorUid, actorName, targetType, targetId, message, snippet,
        createdAt, read
"""

from collections.abc import Iterable
from datetime import datetime, timezone
from typing import Any, Dict

import logfire
from pydantic import ValidationError

from shaka.domain.model import Comment, CommentDraft, Notification
from shaka.domain.model.comment import default_display_name
from shaka.domain.value import CommentId, PostId, PostType
from shaka.persistence.error import DecodeError


def document_to_comment(
    document_id: str,
    data: Dict[str, Any],
    post_id: PostId,
    post_type: PostType,
) -> Comment:
    """Convert a comment document to a Comment domain model.

    Missing fields are defaulted the way the app always has: ``displayName``
    becomes ``User_`` plus the first six characters of the user id, lists
    become empty and ``createdAt`` becomes now. Timestamps are returned as
    timezone-aware UTC; naive values are taken as local time.

    Args:
        document_id: Store-assigned document id
        data: Document fields
        post_id: Parent post id
        post_type: Parent post type

    Returns:
        Comment domain model

    Raises:
        DecodeError: If a present field has an unusable value
    """
    user_id = data.get("userID") or "unknown"
    try:
        comment = Comment(
            id=CommentId(document_id),
            post_id=post_id,
            post_type=post_type,
            text=data.get("text") or "",
            user_id=user_id,
            display_name=data.get("displayName") or default_display_name(str(user_id)),
            created_at=data.get("createdAt") or datetime.now(timezone.utc),
            is_private=data.get("isPrivate") or False,
            liked_by=data.get("likedBy") or [],
            mentioned_user_ids=data.get("mentionedUserIDs") or [],
            post_user_id=data.get("postUserID"),
        )
    except (ValidationError, TypeError) as e:
        raise DecodeError(document_id, str(e)) from e

    if comment.created_at.tzinfo is None:
        # Naive values are local time; snapshots sort on aware UTC only
        comment = comment.model_copy(
            update={"created_at": comment.created_at.astimezone(timezone.utc)}
        )
    return comment


def documents_to_snapshot(
    documents: Iterable[tuple[str, Dict[str, Any] | None]],
    post_id: PostId,
    post_type: PostType,
) -> list[Comment]:
    """Decode an ordered batch of documents, dropping the ones that fail.

    Args:
        documents: (document id, fields) pairs in store order
        post_id: Parent post id
        post_type: Parent post type

    Returns:
        Decoded comments in the same order
    """
    comments = []
    for document_id, data in documents:
        try:
            comments.append(document_to_comment(document_id, data or {}, post_id, post_type))
        except DecodeError as e:
            logfire.warn(
                "Dropping undecodable comment",
                post_id=post_id,
                comment_id=document_id,
                error=str(e),
            )
    return comments


def draft_to_document(draft: CommentDraft, created_at: Any) -> Dict[str, Any]:
    """Convert a CommentDraft to a new comment document.

    Args:
        draft: Comment to write
        created_at: Timestamp value, or the store's server-timestamp sentinel

    Returns:
        Dict suitable for document creation
    """
    return {
        "text": draft.text,
        "userID": draft.user_id,
        "displayName": draft.display_name,
        "createdAt": created_at,
        "isPrivate": False,
        "postUserID": draft.post_user_id,
        "likedBy": [],
        "mentionedUserIDs": list(draft.mentioned_user_ids),
    }


def notification_to_document(notification: Notification) -> Dict[str, Any]:
    """Convert a Notification domain model to a notification document.

    Args:
        notification: Notification domain model

    Returns:
        Dict suitable for document creation
    """
    return {
        "type": notification.type.value,
        "actorUid": notification.actor_uid,
        "actorName": notification.actor_name,
        "targetType": notification.target_type.value,
        "targetId": notification.target_id,
        "message": notification.message,
        "snippet": notification.snippet,
        "createdAt": notification.created_at,
        "read": notification.read,
    }
