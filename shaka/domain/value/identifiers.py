"""Strongly typed identifiers for Shaka domain entities.

Firestore assigns opaque string document ids, so every identifier wraps
``str``. NewType keeps post, comment and user ids from being mixed up.
"""

from typing import NewType

UserId = NewType("UserId", str)
PostId = NewType("PostId", str)
CommentId = NewType("CommentId", str)
NotificationId = NewType("NotificationId", str)
