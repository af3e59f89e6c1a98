"""Test configuration and helpers."""

import asyncio
from collections.abc import Callable
from datetime import datetime
from uuid import uuid4

import logfire

from shaka.domain.model import Comment, PostRef
from shaka.domain.repository import CommentSubscription, Snapshot
from shaka.domain.value import CommentId, PostId, PostType, UserId


def pytest_configure(config):
    logfire.configure(send_to_logfire=False, console=False)


def make_post(
    owner_id: str | None = "user-owner",
    post_type: PostType = PostType.WORK,
    post_id: str | None = None,
) -> PostRef:
    """Helper building a post reference."""
    return PostRef(
        id=PostId(post_id or f"post-{uuid4().hex[:8]}"),
        type=post_type,
        owner_id=UserId(owner_id) if owner_id else None,
    )


def make_comment(
    post: PostRef | None = None,
    user_id: str = "user-commenter",
    display_name: str = "Commenter",
    text: str = "Nice work!",
    liked_by: list[str] | None = None,
    created_at: datetime | None = None,
    comment_id: str | None = None,
) -> Comment:
    """Helper building a comment that was never written to a store."""
    post = post or make_post()
    return Comment(
        id=CommentId(comment_id or uuid4().hex[:20]),
        post_id=post.id,
        post_type=post.type,
        text=text,
        user_id=UserId(user_id),
        display_name=display_name,
        created_at=created_at or datetime.now(),
        liked_by=[UserId(uid) for uid in liked_by or []],
        post_user_id=post.owner_id,
    )


async def next_snapshot(
    subscription: CommentSubscription, timeout: float = 1.0
) -> Snapshot:
    """Wait for the next snapshot from a subscription."""
    return await asyncio.wait_for(subscription.__anext__(), timeout)


async def wait_until(predicate: Callable[[], bool], timeout: float = 1.0) -> None:
    """Let background tasks run until predicate holds."""
    deadline = asyncio.get_running_loop().time() + timeout
    while not predicate():
        if asyncio.get_running_loop().time() > deadline:
            raise AssertionError("Condition not reached before timeout")
        await asyncio.sleep(0.005)
