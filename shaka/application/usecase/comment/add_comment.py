"""Add comment use case."""

import logfire
from pydantic import BaseModel, Field

from shaka.application.usecase.base import BaseUseCase
from shaka.domain.model import Comment, CommentDraft, PostRef
from shaka.domain.service import CommentService, IdentityProvider, NotificationService
from shaka.domain.value import OperationResult, UserId

ANONYMOUS_USER_ID = UserId("anonymous")


class AddCommentRequest(BaseModel):
    """Add comment request."""

    post: PostRef
    text: str
    mentioned_user_ids: list[str] = Field(default_factory=list)


class AddCommentResponse(BaseModel):
    """Add comment response."""

    result: OperationResult
    comment: Comment | None = None
    notifications: list[OperationResult] = Field(default_factory=list)


class AddCommentUseCase(BaseUseCase):
    """Use case for posting a comment and notifying the people it concerns."""

    def __init__(
        self,
        comment_service: CommentService,
        notification_service: NotificationService,
        identity_provider: IdentityProvider,
    ) -> None:
        """Initialize add comment use case.

        Args:
            comment_service: Comment domain service
            notification_service: Notification domain service
            identity_provider: Who is posting
        """
        self.comment_service = comment_service
        self.notification_service = notification_service
        self.identity_provider = identity_provider

    async def execute(self, request: AddCommentRequest) -> AddCommentResponse:
        """Execute add comment flow.

        Steps:
        1. Resolve the author (``anonymous`` when signed out)
        2. Write the comment
        3. Send mention/comment notifications (signed-in authors only)

        Write failures are logged and returned as a failed result.

        Args:
            request: Add comment request

        Returns:
            Result of the write plus one result per notification
        """
        text = request.text.strip()
        if not text:
            return AddCommentResponse(
                result=OperationResult.skipped("add_comment", "empty comment")
            )

        identity = self.identity_provider.identity()
        draft = CommentDraft(
            post_id=request.post.id,
            post_type=request.post.type,
            post_user_id=request.post.owner_id,
            text=text,
            user_id=identity.user_id or ANONYMOUS_USER_ID,
            display_name=identity.display_name,
            mentioned_user_ids=[UserId(uid) for uid in request.mentioned_user_ids],
        )

        try:
            comment = await self.comment_service.create_comment(draft)
        except Exception as e:
            logfire.error(
                "Error adding comment",
                post_id=request.post.id,
                error=str(e),
            )
            return AddCommentResponse(
                result=OperationResult.failure("add_comment", str(e))
            )

        notifications: list[OperationResult] = []
        if identity.user_id is not None:
            notifications = await self.notification_service.notify_comment_added(
                comment
            )

        return AddCommentResponse(
            result=OperationResult.success("add_comment", resource_id=comment.id),
            comment=comment,
            notifications=notifications,
        )
