"""@mention tokens inside comment text."""

import re

from shaka.domain.value.common import ValueObject

MENTION_PATTERN = re.compile(r"@([A-Za-z0-9_]+)")


class MentionSpan(ValueObject):
    """Location of one ``@name`` token in a comment.

    ``start`` and ``end`` are string offsets covering the ``@`` sign and the
    name, so ``text[start:end]`` is the whole token.
    """

    start: int
    end: int
    name: str


def find_mention_spans(text: str) -> list[MentionSpan]:
    """Find every ``@name`` token in text, in order of appearance."""
    return [
        MentionSpan(start=match.start(), end=match.end(), name=match.group(1))
        for match in MENTION_PATTERN.finditer(text)
    ]


def mention_token(display_name: str) -> str:
    """Build the token inserted into a draft when tapping an author's name."""
    return f"@{display_name} "
