"""Domain services."""

from .base import Service
from .comment_service import CommentService
from .identity_service import IdentityProvider
from .notification_service import (
    NotificationService,
    compose_message,
    plan_comment_notifications,
)

__all__ = [
    "CommentService",
    "IdentityProvider",
    "NotificationService",
    "Service",
    "compose_message",
    "plan_comment_notifications",
]
