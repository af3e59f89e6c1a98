"""Firestore implementation of Notification repository."""

import asyncio

from firebase_admin import firestore

from shaka.domain.model import Notification
from shaka.domain.repository import NotificationRepository
from shaka.domain.value import NotificationId, UserId
from shaka.persistence.mappers import notification_to_document


class FirestoreNotificationRepository(NotificationRepository):
    """Writes notifications to ``notifications/{userID}/items``."""

    def __init__(self, client: firestore.Client) -> None:
        """Initialize repository with a Firestore client.

        Args:
            client: Firestore client
        """
        self.client = client

    async def add(
        self, recipient_id: UserId, notification: Notification
    ) -> NotificationId:
        """Add a notification document to the recipient's inbox."""
        items_ref = (
            self.client.collection("notifications")
            .document(recipient_id)
            .collection("items")
        )
        _, doc_ref = await asyncio.to_thread(
            items_ref.add, notification_to_document(notification)
        )
        return NotificationId(doc_ref.id)
