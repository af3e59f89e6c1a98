"""Delete comment use case."""

import logfire
from pydantic import BaseModel

from shaka.application.usecase.base import BaseUseCase
from shaka.domain.model import Comment
from shaka.domain.service import CommentService
from shaka.domain.value import OperationResult


class DeleteCommentRequest(BaseModel):
    """Delete comment request."""

    comment: Comment


class DeleteCommentUseCase(BaseUseCase):
    """Use case for deleting a comment.

    Notifications already sent about the comment are left in place.
    """

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize delete comment use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: DeleteCommentRequest) -> OperationResult:
        """Execute delete comment flow.

        Args:
            request: Delete comment request

        Returns:
            Result of the delete
        """
        comment = request.comment
        try:
            await self.comment_service.delete_comment(comment)
        except Exception as e:
            logfire.error(
                "Error deleting comment",
                comment_id=comment.id,
                error=str(e),
            )
            return OperationResult.failure("delete_comment", str(e), comment.id)
        return OperationResult.success("delete_comment", resource_id=comment.id)
