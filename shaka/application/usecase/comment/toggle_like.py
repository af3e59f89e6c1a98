"""Toggle comment like use case."""

import logfire
from pydantic import BaseModel

from shaka.application.usecase.base import BaseUseCase
from shaka.domain.model import Comment
from shaka.domain.service import CommentService, IdentityProvider, NotificationService
from shaka.domain.value import OperationResult


class ToggleLikeRequest(BaseModel):
    """Toggle like request."""

    comment: Comment


class ToggleLikeResponse(BaseModel):
    """Toggle like response."""

    result: OperationResult
    liked: bool | None = None  # None when the toggle did not happen
    notification: OperationResult | None = None


class ToggleLikeUseCase(BaseUseCase):
    """Use case for liking or unliking a comment."""

    def __init__(
        self,
        comment_service: CommentService,
        notification_service: NotificationService,
        identity_provider: IdentityProvider,
    ) -> None:
        """Initialize toggle like use case.

        Args:
            comment_service: Comment domain service
            notification_service: Notification domain service
            identity_provider: Who is liking
        """
        self.comment_service = comment_service
        self.notification_service = notification_service
        self.identity_provider = identity_provider

    async def execute(self, request: ToggleLikeRequest) -> ToggleLikeResponse:
        """Execute toggle like flow.

        Signed-out users cannot like. Liking someone else's comment notifies
        its author; unliking never notifies.

        Args:
            request: Toggle like request

        Returns:
            Toggle result, resulting like state and the notification result
        """
        comment = request.comment
        identity = self.identity_provider.identity()
        if identity.user_id is None:
            return ToggleLikeResponse(
                result=OperationResult.skipped("toggle_like", "not signed in")
            )

        try:
            toggle = await self.comment_service.toggle_like(comment, identity.user_id)
        except Exception as e:
            logfire.error(
                "Error updating comment like",
                comment_id=comment.id,
                error=str(e),
            )
            return ToggleLikeResponse(
                result=OperationResult.failure("toggle_like", str(e), comment.id)
            )

        notification = None
        if toggle.liked:
            notification = await self.notification_service.notify_comment_liked(
                comment, identity
            )

        return ToggleLikeResponse(
            result=OperationResult.success("toggle_like", resource_id=comment.id),
            liked=toggle.liked,
            notification=notification,
        )
