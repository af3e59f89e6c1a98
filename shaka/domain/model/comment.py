"""Comment entity.

Comments live in a flat, append-only sub-collection under their post and are
ordered by creation time. Text and author never change after creation; the
only mutation is the set of users who liked the comment.
"""

from datetime import datetime

from pydantic import Field, field_validator

from shaka.domain.model.common import DomainModel
from shaka.domain.value import CommentId, PostId, PostType, UserId
from shaka.domain.value.mention import MentionSpan, find_mention_spans


def default_display_name(user_id: str) -> str:
    """Display name synthesised for records stored without one."""
    return f"User_{user_id[:6]}"


class CommentDraft(DomainModel):
    """A comment about to be written; the store assigns id and timestamp."""

    post_id: PostId
    post_type: PostType
    post_user_id: UserId | None = None
    text: str = Field(min_length=1)
    user_id: UserId
    display_name: str
    mentioned_user_ids: list[UserId] = Field(default_factory=list)


class Comment(DomainModel):
    """Comment entity.

    Business rules:
    - ``liked_by`` has set semantics: no duplicates, toggling is per user
    - ``display_name`` is denormalised at posting time and never refreshed
    - ``is_private`` is persisted but not enforced; every comment is public
    """

    id: CommentId
    post_id: PostId
    post_type: PostType
    text: str
    user_id: UserId
    display_name: str
    created_at: datetime = Field(default_factory=datetime.now)
    is_private: bool = False
    liked_by: list[UserId] = Field(default_factory=list)
    mentioned_user_ids: list[UserId] = Field(default_factory=list)
    post_user_id: UserId | None = None

    @field_validator("liked_by")
    @classmethod
    def dedupe_liked_by(cls, v: list[UserId]) -> list[UserId]:
        """Drop repeated likers, keeping first-seen order."""
        return list(dict.fromkeys(v))

    @property
    def like_count(self) -> int:
        return len(self.liked_by)

    def is_liked_by(self, user_id: UserId | None) -> bool:
        return user_id is not None and user_id in self.liked_by

    def mentions(self) -> list[MentionSpan]:
        return find_mention_spans(self.text)
