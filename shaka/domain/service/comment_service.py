"""Comment domain service."""

import logfire

from shaka.domain.model.comment import Comment, CommentDraft
from shaka.domain.repository import CommentRepository, CommentSubscription
from shaka.domain.value import LikeToggle, PostId, PostType, UserId

from .base import Service


class CommentService(Service):
    """Domain service for comment operations."""

    def __init__(self, comment_repository: CommentRepository) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
        """
        self.comment_repository = comment_repository

    def watch_comments(self, post_id: PostId, post_type: PostType) -> CommentSubscription:
        """Open a live subscription on a post's comments.

        Args:
            post_id: Post ID
            post_type: Post type

        Returns:
            Subscription yielding ordered snapshots
        """
        subscription = self.comment_repository.subscribe(post_id, post_type)
        logfire.info(
            "Comment subscription opened",
            post_id=post_id,
            post_type=post_type.value,
        )
        return subscription

    async def create_comment(self, draft: CommentDraft) -> Comment:
        """Write a new comment.

        Args:
            draft: Comment to write

        Returns:
            Stored comment with id and timestamp assigned
        """
        with logfire.span(
            "comment_service.create_comment",
            post_id=draft.post_id,
            post_type=draft.post_type.value,
            author_id=draft.user_id,
            mention_count=len(draft.mentioned_user_ids),
        ):
            comment = await self.comment_repository.add(draft)
            logfire.info(
                "Comment created",
                comment_id=comment.id,
                post_id=comment.post_id,
                author_id=comment.user_id,
            )
            return comment

    async def delete_comment(self, comment: Comment) -> None:
        """Delete a comment. Missing comments are ignored by the store.

        Args:
            comment: Comment to delete
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=comment.id,
            post_id=comment.post_id,
        ):
            await self.comment_repository.delete(comment)
            logfire.info("Comment deleted", comment_id=comment.id)

    async def toggle_like(self, comment: Comment, user_id: UserId) -> LikeToggle:
        """Flip a user's like on a comment.

        Args:
            comment: Comment to like or unlike
            user_id: Acting user

        Returns:
            Toggle outcome

        Raises:
            NotFoundError: If the comment was deleted meanwhile
        """
        with logfire.span(
            "comment_service.toggle_like",
            comment_id=comment.id,
            user_id=user_id,
        ):
            toggle = await self.comment_repository.toggle_like(comment, user_id)
            logfire.info(
                "Comment like toggled",
                comment_id=comment.id,
                user_id=user_id,
                liked=toggle.liked,
            )
            return toggle
