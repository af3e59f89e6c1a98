#!/usr/bin/env python3
"""Follow a post's comment thread from the console.

Usage:
    python scripts/watch_comments.py <post-id> [--type work|question]
"""

import argparse
import asyncio
import sys

import logfire

from shaka.adapter.firebase import StaticIdentityProvider
from shaka.config import Settings
from shaka.domain.model import PostRef
from shaka.domain.service import IdentityProvider
from shaka.domain.value import PostId, PostType
from shaka.interface.thread import CommentRow, CommentThreadController
from shaka.util.di.container import create_container
from shaka.util.logging import setup_logging
from shaka.util.observability import configure_logfire


def _print_rows(rows: list[CommentRow]) -> None:
    print(f"--- {len(rows)} comment(s) ---")
    for row in rows:
        likes = f" ♥{row.like_count}" if row.like_count else ""
        print(f"{row.comment.display_name} • {row.time_ago}{likes}: {row.comment.text}")


async def watch(post: PostRef) -> None:
    container = create_container()
    viewer = StaticIdentityProvider()  # Signed-out viewer
    try:
        async with container(context={IdentityProvider: viewer}) as request_container:
            controller = await request_container.get(CommentThreadController)
            controller.add_listener(_print_rows)
            await controller.activate(post)
            await asyncio.Event().wait()  # Until interrupted
    finally:
        await container.close()


def main() -> int:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("post_id")
    parser.add_argument(
        "--type", choices=[t.value for t in PostType], default=PostType.WORK.value
    )
    args = parser.parse_args()

    settings = Settings()
    setup_logging(settings)
    configure_logfire(settings)

    post = PostRef(id=PostId(args.post_id), type=PostType(args.type))
    try:
        asyncio.run(watch(post))
    except KeyboardInterrupt:
        logfire.info("Stopped watching", post_id=post.id)
    except Exception as e:
        logfire.error(
            "Watching comments failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
