"""Comment thread presentation layer."""

from .controller import CommentThreadController
from .view_model import CommentRow, LikeState, build_row, format_time_ago

__all__ = [
    "CommentRow",
    "CommentThreadController",
    "LikeState",
    "build_row",
    "format_time_ago",
]
