"""Domain value objects for Shaka.

Value objects are immutable and defined by their values, not identity.
"""

from enum import Enum

from shaka.domain.value.common import ValueObject
from shaka.domain.value.identifiers import CommentId, UserId


class PostType(str, Enum):
    """Kind of post a comment thread belongs to."""

    WORK = "work"
    QUESTION = "question"

    @property
    def collection(self) -> str:
        """Top-level store collection holding posts of this type."""
        return "works" if self is PostType.WORK else "questions"


class NotificationType(str, Enum):
    """Kind of notification emitted by comment activity."""

    COMMENT = "comment"
    MENTION = "mention"
    COMMENT_LIKE = "comment_like"


class OperationStatus(str, Enum):
    """Outcome of a write requested by the user."""

    OK = "ok"
    FAILED = "failed"
    SKIPPED = "skipped"  # Rejected before reaching the store


class OperationResult(ValueObject):
    """Typed result of a fire-and-forget style write.

    Failures are never raised to the caller; they are reported here so the
    presentation layer can decide whether to surface them.
    """

    operation: str
    status: OperationStatus
    resource_id: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status is OperationStatus.OK

    @classmethod
    def success(cls, operation: str, resource_id: str | None = None) -> "OperationResult":
        return cls(operation=operation, status=OperationStatus.OK, resource_id=resource_id)

    @classmethod
    def failure(
        cls, operation: str, error: str, resource_id: str | None = None
    ) -> "OperationResult":
        return cls(
            operation=operation,
            status=OperationStatus.FAILED,
            resource_id=resource_id,
            error=error,
        )

    @classmethod
    def skipped(cls, operation: str, reason: str) -> "OperationResult":
        return cls(operation=operation, status=OperationStatus.SKIPPED, error=reason)


class LikeToggle(ValueObject):
    """Result of flipping a user's like on a comment."""

    comment_id: CommentId
    user_id: UserId
    liked: bool  # True when the user is now in likedBy


class Identity(ValueObject):
    """The signed-in user as seen by the comment thread.

    ``user_id`` is None when nobody is signed in.
    """

    user_id: UserId | None = None
    display_name: str
