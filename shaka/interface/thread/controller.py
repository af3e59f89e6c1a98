"""Comment thread controller.

Mediates between a comment thread screen and the comment use cases. It
keeps two layers of state:

- the authoritative comment list, replaced wholesale by each snapshot
- a local like-intent cache holding optimistic like toggles

Every authoritative snapshot clears the intent cache, so the store always
has the last word.
"""

import asyncio
from collections.abc import Callable
from types import TracebackType

import logfire

from shaka.application.usecase.comment import (
    AddCommentRequest,
    AddCommentUseCase,
    DeleteCommentRequest,
    DeleteCommentUseCase,
    ToggleLikeRequest,
    ToggleLikeUseCase,
    WatchCommentsRequest,
    WatchCommentsUseCase,
)
from shaka.domain.model import Comment, PostRef
from shaka.domain.repository import CommentSubscription, Snapshot
from shaka.domain.service import IdentityProvider
from shaka.domain.value import CommentId, OperationResult, UserId
from shaka.domain.value.mention import mention_token

from .view_model import CommentRow, LikeState, build_row

RowsListener = Callable[[list[CommentRow]], None]


class CommentThreadController:
    """View-model for one comment thread.

    Submission lock: an accepted submit moves the controller from idle to
    locked; it returns to idle after ``submit_cooldown_seconds`` whether or
    not the write has finished. Submits while locked are skipped.
    """

    def __init__(
        self,
        watch_comments: WatchCommentsUseCase,
        add_comment: AddCommentUseCase,
        delete_comment: DeleteCommentUseCase,
        toggle_like: ToggleLikeUseCase,
        identity_provider: IdentityProvider,
        submit_cooldown_seconds: float = 1.0,
    ) -> None:
        """Initialize comment thread controller.

        Args:
            watch_comments: Use case opening the live subscription
            add_comment: Use case posting comments
            delete_comment: Use case deleting comments
            toggle_like: Use case liking and unliking comments
            identity_provider: Who is viewing the thread
            submit_cooldown_seconds: How long the submission lock is held
        """
        self.watch_comments = watch_comments
        self.add_comment = add_comment
        self.delete_comment = delete_comment
        self.toggle_like_use_case = toggle_like
        self.identity_provider = identity_provider
        self.submit_cooldown_seconds = submit_cooldown_seconds

        self.post: PostRef | None = None
        self.comments: list[Comment] = []
        self.draft = ""

        self._like_intents: dict[CommentId, LikeState] = {}
        self._mention_targets: dict[UserId, str] = {}
        self._subscription: CommentSubscription | None = None
        self._consumer: asyncio.Task | None = None
        self._activation_lock = asyncio.Lock()
        self._submit_locked = False
        self._unlock_handle: asyncio.TimerHandle | None = None
        self._listeners: list[RowsListener] = []

    # Subscription

    async def activate(self, post: PostRef) -> None:
        """Start following a post's comments, replacing any previous thread."""
        async with self._activation_lock:
            await self._release_subscription()
            self.post = post
            self._subscription = self.watch_comments.execute(
                WatchCommentsRequest(post=post)
            )
            self._consumer = asyncio.create_task(self._consume(self._subscription))
        logfire.info("Comment thread activated", post_id=post.id, post_type=post.type.value)

    async def deactivate(self) -> None:
        """Release the live subscription, if any."""
        async with self._activation_lock:
            await self._release_subscription()

    async def _release_subscription(self) -> None:
        # Caller holds _activation_lock
        subscription, consumer = self._subscription, self._consumer
        self._subscription = None
        self._consumer = None
        if subscription is not None:
            await subscription.close()
        if consumer is not None and consumer is not asyncio.current_task():
            await consumer

    async def aclose(self) -> None:
        await self.deactivate()
        if self._unlock_handle is not None:
            self._unlock_handle.cancel()
            self._unlock_handle = None
        self._submit_locked = False

    async def __aenter__(self) -> "CommentThreadController":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    @property
    def is_active(self) -> bool:
        return self._subscription is not None

    async def _consume(self, subscription: CommentSubscription) -> None:
        async for snapshot in subscription:
            self._apply_snapshot(snapshot)

    def _apply_snapshot(self, snapshot: Snapshot) -> None:
        self.comments = list(snapshot)
        self._like_intents.clear()
        self._notify()

    # Observation

    @property
    def rows(self) -> list[CommentRow]:
        """Displayed rows: authoritative comments merged with like intents."""
        viewer_id = self.identity_provider.current_user_id()
        return [
            build_row(comment, viewer_id, self._like_intents.get(comment.id))
            for comment in self.comments
        ]

    def add_listener(self, listener: RowsListener) -> Callable[[], None]:
        """Call listener with fresh rows on every change.

        Returns:
            Callable removing the listener
        """
        self._listeners.append(listener)

        def _remove() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return _remove

    def _notify(self) -> None:
        if not self._listeners:
            return
        rows = self.rows
        for listener in list(self._listeners):
            try:
                listener(rows)
            except Exception as e:
                logfire.error("Comment rows listener failed", error=str(e))

    # Compose

    @property
    def mention_targets(self) -> list[UserId]:
        """Distinct users tagged in the current draft, in tap order."""
        return list(self._mention_targets)

    @property
    def is_submitting(self) -> bool:
        return self._submit_locked

    def tap_mention(self, comment: Comment) -> bool:
        """Tag a comment's author in the draft.

        Ignored for the viewer's own comments.

        Returns:
            Whether the draft changed
        """
        if comment.user_id == self.identity_provider.current_user_id():
            return False
        if self.draft and not self.draft.endswith(" "):
            self.draft += " "
        self.draft += mention_token(comment.display_name)
        self._mention_targets.setdefault(comment.user_id, comment.display_name)
        return True

    async def submit(self) -> OperationResult:
        """Post the draft.

        The draft and mention targets are cleared before the write starts.

        Returns:
            Result of the write, or a skipped result when the draft is empty,
            a submission is still locked or no thread is active
        """
        if self.post is None:
            return OperationResult.skipped("add_comment", "no active thread")
        if self._submit_locked:
            return OperationResult.skipped("add_comment", "submission in progress")
        text = self.draft.strip()
        if not text:
            return OperationResult.skipped("add_comment", "empty comment")

        self._lock_submission()
        mentioned_user_ids = self.mention_targets
        self.draft = ""
        self._mention_targets.clear()

        response = await self.add_comment.execute(
            AddCommentRequest(
                post=self.post,
                text=text,
                mentioned_user_ids=mentioned_user_ids,
            )
        )
        return response.result

    def _lock_submission(self) -> None:
        self._submit_locked = True
        loop = asyncio.get_running_loop()
        self._unlock_handle = loop.call_later(
            self.submit_cooldown_seconds, self._release_submission
        )

    def _release_submission(self) -> None:
        self._submit_locked = False
        self._unlock_handle = None

    # Row actions

    async def delete(self, comment: Comment) -> OperationResult:
        """Delete a comment; the next snapshot removes it from the list."""
        return await self.delete_comment.execute(DeleteCommentRequest(comment=comment))

    async def toggle_like(self, comment: Comment) -> OperationResult:
        """Flip the row's like state immediately, then write it.

        A failed write is not rolled back locally; the next snapshot
        restores the stored state.
        """
        current = self._like_intents.get(comment.id) or LikeState(
            comment.is_liked_by(self.identity_provider.current_user_id()),
            comment.like_count,
        )
        if current.is_liked:
            flipped = LikeState(False, max(0, current.like_count - 1))
        else:
            flipped = LikeState(True, current.like_count + 1)
        self._like_intents[comment.id] = flipped
        self._notify()

        response = await self.toggle_like_use_case.execute(ToggleLikeRequest(comment=comment))
        return response.result
