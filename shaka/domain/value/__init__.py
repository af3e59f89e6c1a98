"""Domain value objects for Shaka."""

from shaka.domain.value.identifiers import (
    CommentId,
    NotificationId,
    PostId,
    UserId,
)
from shaka.domain.value.types import (
    Identity,
    LikeToggle,
    NotificationType,
    OperationResult,
    OperationStatus,
    PostType,
)

__all__ = [
    # Identifiers
    "UserId",
    "PostId",
    "CommentId",
    "NotificationId",
    # Types
    "PostType",
    "NotificationType",
    "OperationStatus",
    "OperationResult",
    "LikeToggle",
    "Identity",
]
