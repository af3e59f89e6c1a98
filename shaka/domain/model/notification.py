"""Notification entity.

Notifications are written once by comment activity and read elsewhere in
the app; nothing here marks them read or deletes them. Deleting a comment
leaves the notifications it caused in place.
"""

from datetime import datetime

from pydantic import Field

from shaka.domain.model.common import DomainModel
from shaka.domain.value import NotificationType, PostId, PostType, UserId


class Notification(DomainModel):
    """A notification addressed to one user."""

    type: NotificationType
    actor_uid: UserId
    actor_name: str
    target_type: PostType
    target_id: PostId
    message: str
    snippet: str
    created_at: datetime = Field(default_factory=datetime.now)
    read: bool = False
