"""Domain layer DI providers."""

from dishka import Scope, provide

from shaka.config import Settings
from shaka.domain.repository import CommentRepository, NotificationRepository
from shaka.domain.service import CommentService, NotificationService
from shaka.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped, one set per signed-in session.
    """

    scope = Scope.REQUEST

    @provide
    def get_comment_service(
        self, comment_repository: CommentRepository
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(comment_repository=comment_repository)

    @provide
    def get_notification_service(
        self, notification_repository: NotificationRepository, settings: Settings
    ) -> NotificationService:
        """Provide notification domain service."""
        return NotificationService(
            notification_repository=notification_repository,
            snippet_length=settings.notifications.snippet_length,
        )
