"""Persistence infrastructure providers."""

from collections.abc import Iterator
from pathlib import Path

import firebase_admin
from dishka import Scope, provide
from firebase_admin import firestore

from shaka.config import Settings
from shaka.domain.repository import CommentRepository, NotificationRepository
from shaka.persistence.database import create_client, create_firebase_app
from shaka.persistence.repository import (
    FirestoreCommentRepository,
    FirestoreNotificationRepository,
)
from shaka.util.di.base import ProviderBase
from shaka.util.error import ConfigurationError


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using Firestore."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_firebase_app(self, settings: Settings) -> Iterator[firebase_admin.App]:
        """Provide the firebase_admin app, deleted when the container closes."""
        credentials_path = settings.firestore.credentials_path
        if credentials_path and not Path(credentials_path).is_file():
            raise ConfigurationError(
                f"Firestore credentials file not found: {credentials_path}"
            )
        app = create_firebase_app(settings)
        yield app
        firebase_admin.delete_app(app)

    @provide(scope=Scope.APP)
    def get_client(self, app: firebase_admin.App) -> firestore.Client:
        """Provide Firestore client."""
        return create_client(app)

    @provide(scope=Scope.APP)
    def get_comment_repository(self, client: firestore.Client) -> CommentRepository:
        """Provide Comment repository."""
        return FirestoreCommentRepository(client)

    @provide(scope=Scope.APP)
    def get_notification_repository(
        self, client: firestore.Client
    ) -> NotificationRepository:
        """Provide Notification repository."""
        return FirestoreNotificationRepository(client)
