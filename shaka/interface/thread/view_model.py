"""Presentation models for a comment thread.

Rows merge the authoritative comment with any optimistic like state the
user produced since the last snapshot.
"""

from datetime import datetime
from typing import NamedTuple

from pydantic import BaseModel, ConfigDict

from shaka.domain.model import Comment
from shaka.domain.value import UserId
from shaka.domain.value.mention import MentionSpan


class LikeState(NamedTuple):
    """Per-row like state as displayed."""

    is_liked: bool
    like_count: int


class CommentRow(BaseModel):
    """One displayed comment."""

    model_config = ConfigDict(frozen=True)

    comment: Comment
    is_own: bool  # Viewer wrote it; offer delete, disable mention-tap
    is_liked: bool
    like_count: int
    time_ago: str
    mentions: list[MentionSpan]


def format_time_ago(created_at: datetime, now: datetime | None = None) -> str:
    """Render a timestamp relative to now, e.g. ``5m ago`` or ``yesterday``.

    Args:
        created_at: When the comment was created (naive or aware)
        now: Reference time, defaults to the current time in the same zone

    Returns:
        Relative description, or a short date for anything a month or older
    """
    if now is None:
        now = datetime.now(created_at.tzinfo)
    seconds = (now - created_at).total_seconds()

    if seconds < 60:
        return "just now"
    if seconds < 3600:
        return f"{int(seconds // 60)}m ago"
    if seconds < 86400:
        return f"{int(seconds // 3600)}h ago"

    days = int(seconds // 86400)
    if days == 1:
        return "yesterday"
    if days < 30:
        return f"{days}d ago"
    return created_at.strftime("%Y/%m/%d")


def build_row(
    comment: Comment,
    viewer_id: UserId | None,
    intent: LikeState | None = None,
    now: datetime | None = None,
) -> CommentRow:
    """Build a row, preferring optimistic like state when present."""
    if intent is None:
        intent = LikeState(comment.is_liked_by(viewer_id), comment.like_count)
    return CommentRow(
        comment=comment,
        is_own=viewer_id is not None and comment.user_id == viewer_id,
        is_liked=intent.is_liked,
        like_count=intent.like_count,
        time_ago=format_time_ago(comment.created_at, now),
        mentions=comment.mentions(),
    )
