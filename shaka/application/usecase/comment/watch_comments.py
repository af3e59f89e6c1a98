"""Watch comments use case."""

from pydantic import BaseModel

from shaka.domain.model import PostRef
from shaka.domain.repository import CommentSubscription
from shaka.domain.service import CommentService


class WatchCommentsRequest(BaseModel):
    """Watch comments request."""

    post: PostRef


class WatchCommentsUseCase:
    """Use case for following a post's comments live.

    Opening is synchronous; the caller owns the returned subscription and
    must close it.
    """

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize watch comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    def execute(self, request: WatchCommentsRequest) -> CommentSubscription:
        """Open the subscription.

        Args:
            request: Watch comments request

        Returns:
            Subscription yielding ordered snapshots
        """
        return self.comment_service.watch_comments(request.post.id, request.post.type)
