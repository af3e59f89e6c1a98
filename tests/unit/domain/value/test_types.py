"""Unit tests for domain value types."""

from shaka.domain.value import OperationResult, OperationStatus, PostType
from shaka.domain.value.mention import find_mention_spans, mention_token


def test_post_type_collections():
    assert PostType.WORK.collection == "works"
    assert PostType.QUESTION.collection == "questions"


def test_operation_result_constructors():
    assert OperationResult.success("add_comment", "c1").ok
    failed = OperationResult.failure("add_comment", "offline")
    assert failed.status is OperationStatus.FAILED
    assert failed.error == "offline"
    skipped = OperationResult.skipped("add_comment", "empty comment")
    assert skipped.status is OperationStatus.SKIPPED
    assert not skipped.ok


def test_mention_token_round_trips_through_pattern():
    text = "hi " + mention_token("Dr_Who")
    assert [s.name for s in find_mention_spans(text)] == ["Dr_Who"]


def test_mention_stops_at_non_word_characters():
    [span] = find_mention_spans("@jane.doe")
    assert span.name == "jane"
    assert (span.start, span.end) == (0, 5)
