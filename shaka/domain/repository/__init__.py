"""Repository interfaces for Shaka domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from shaka.domain.repository.comment import (
    CommentRepository,
    CommentSubscription,
    Snapshot,
)
from shaka.domain.repository.notification import NotificationRepository

__all__ = [
    "CommentRepository",
    "CommentSubscription",
    "NotificationRepository",
    "Snapshot",
]
