"""Domain model entities for Shaka."""

from shaka.domain.model.comment import Comment, CommentDraft
from shaka.domain.model.notification import Notification
from shaka.domain.model.post import PostRef

__all__ = [
    "Comment",
    "CommentDraft",
    "Notification",
    "PostRef",
]
