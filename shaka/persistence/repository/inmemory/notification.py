"""In-memory notification repository for testing."""

from uuid import uuid4

from shaka.domain.model import Notification
from shaka.domain.repository import NotificationRepository
from shaka.domain.value import NotificationId, UserId


class InMemoryNotificationRepository(NotificationRepository):
    """In-memory implementation of NotificationRepository for testing."""

    def __init__(self) -> None:
        self._inboxes: dict[UserId, dict[NotificationId, Notification]] = {}

    async def add(
        self, recipient_id: UserId, notification: Notification
    ) -> NotificationId:
        """Append to the recipient's inbox."""
        notification_id = NotificationId(uuid4().hex[:20])
        self._inboxes.setdefault(recipient_id, {})[notification_id] = notification
        return notification_id

    def for_user(self, user_id: UserId) -> list[Notification]:
        """Notifications received by a user, in arrival order."""
        return list(self._inboxes.get(user_id, {}).values())

    def count(self) -> int:
        return sum(len(inbox) for inbox in self._inboxes.values())
