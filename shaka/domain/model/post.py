"""Reference to the post a comment thread hangs off."""

from shaka.domain.model.common import DomainModel
from shaka.domain.value import PostId, PostType, UserId


class PostRef(DomainModel):
    """The parts of a post the comment thread needs.

    Posts themselves are managed elsewhere; ``owner_id`` is only used to
    address comment notifications.
    """

    id: PostId
    type: PostType
    owner_id: UserId | None = None
