"""Firestore repository implementations."""

from .comment import FirestoreCommentRepository
from .notification import FirestoreNotificationRepository

__all__ = [
    "FirestoreCommentRepository",
    "FirestoreNotificationRepository",
]
