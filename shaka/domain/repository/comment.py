"""Comment repository interface."""

from abc import ABC, abstractmethod
from collections.abc import AsyncIterator
from types import TracebackType

from shaka.domain.model.comment import Comment, CommentDraft
from shaka.domain.value import LikeToggle, PostId, PostType, UserId

Snapshot = list[Comment]


class CommentSubscription(ABC):
    """Handle on a standing query over one post's comments.

    Iterating yields full, ordered snapshots of the thread, one per change.
    Closing releases the underlying listener and ends iteration. Use it as an
    async context manager to guarantee release:

        async with repository.subscribe(post_id, post_type) as subscription:
            async for snapshot in subscription:
                ...
    """

    @abstractmethod
    def __aiter__(self) -> AsyncIterator[Snapshot]:
        pass

    @abstractmethod
    async def close(self) -> None:
        """Stop delivery and release the listener. Safe to call twice."""
        pass

    @property
    @abstractmethod
    def closed(self) -> bool:
        pass

    async def __aenter__(self) -> "CommentSubscription":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.close()


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    def subscribe(self, post_id: PostId, post_type: PostType) -> CommentSubscription:
        """Open a live subscription on a post's comments.

        Snapshots are ordered by creation time, oldest first. Records that
        cannot be decoded are left out of the snapshot.

        Args:
            post_id: The post ID
            post_type: Which collection the post lives in

        Returns:
            Subscription yielding full snapshots
        """
        pass

    @abstractmethod
    async def add(self, draft: CommentDraft) -> Comment:
        """Write a new comment.

        The store assigns the id and the creation timestamp; ``liked_by``
        starts empty.

        Args:
            draft: The comment to write

        Returns:
            The stored comment
        """
        pass

    @abstractmethod
    async def delete(self, comment: Comment) -> None:
        """Delete a comment.

        Deleting a comment that no longer exists is not an error.

        Args:
            comment: The comment to delete
        """
        pass

    @abstractmethod
    async def toggle_like(self, comment: Comment, user_id: UserId) -> LikeToggle:
        """Atomically flip a user's membership in a comment's likes.

        Args:
            comment: The comment being liked or unliked
            user_id: The acting user

        Returns:
            Whether the user likes the comment after the toggle

        Raises:
            NotFoundError: If the comment no longer exists
        """
        pass
