"""Notification repository interface."""

from abc import ABC, abstractmethod

from shaka.domain.model.notification import Notification
from shaka.domain.value import NotificationId, UserId


class NotificationRepository(ABC):
    """Write-only repository for per-user notifications."""

    @abstractmethod
    async def add(
        self, recipient_id: UserId, notification: Notification
    ) -> NotificationId:
        """Append a notification to a user's inbox.

        Args:
            recipient_id: The user receiving the notification
            notification: The notification to write

        Returns:
            The id assigned by the store
        """
        pass
