"""Application layer DI providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide

from shaka.application.usecase.comment import (
    AddCommentUseCase,
    DeleteCommentUseCase,
    ToggleLikeUseCase,
    WatchCommentsUseCase,
)
from shaka.config import Settings
from shaka.domain.service import CommentService, IdentityProvider, NotificationService
from shaka.interface.thread import CommentThreadController
from shaka.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_watch_comments_use_case(
        self, comment_service: CommentService
    ) -> WatchCommentsUseCase:
        """Provide watch comments use case."""
        return WatchCommentsUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_add_comment_use_case(
        self,
        comment_service: CommentService,
        notification_service: NotificationService,
        identity_provider: IdentityProvider,
    ) -> AddCommentUseCase:
        """Provide add comment use case."""
        return AddCommentUseCase(
            comment_service=comment_service,
            notification_service=notification_service,
            identity_provider=identity_provider,
        )

    @provide(scope=Scope.REQUEST)
    def get_delete_comment_use_case(
        self, comment_service: CommentService
    ) -> DeleteCommentUseCase:
        """Provide delete comment use case."""
        return DeleteCommentUseCase(comment_service=comment_service)

    @provide(scope=Scope.REQUEST)
    def get_toggle_like_use_case(
        self,
        comment_service: CommentService,
        notification_service: NotificationService,
        identity_provider: IdentityProvider,
    ) -> ToggleLikeUseCase:
        """Provide toggle like use case."""
        return ToggleLikeUseCase(
            comment_service=comment_service,
            notification_service=notification_service,
            identity_provider=identity_provider,
        )

    # Controllers
    @provide(scope=Scope.REQUEST)
    async def get_comment_thread_controller(
        self,
        watch_comments: WatchCommentsUseCase,
        add_comment: AddCommentUseCase,
        delete_comment: DeleteCommentUseCase,
        toggle_like: ToggleLikeUseCase,
        identity_provider: IdentityProvider,
        settings: Settings,
    ) -> AsyncIterator[CommentThreadController]:
        """Provide a comment thread controller.

        The controller's subscription is released when the request scope
        closes.
        """
        controller = CommentThreadController(
            watch_comments=watch_comments,
            add_comment=add_comment,
            delete_comment=delete_comment,
            toggle_like=toggle_like,
            identity_provider=identity_provider,
            submit_cooldown_seconds=settings.thread.submit_cooldown_seconds,
        )
        yield controller
        await controller.aclose()
