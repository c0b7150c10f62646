"""Tests for reply composition. Every input must produce non-empty text."""

import itertools

import pytest

from slack_relay.models.relay import RelayResponse, ReplyKind
from slack_relay.relay.normalizer import compose_reply

NO_ANSWER = "Noted, nothing to add."
ERROR = ":warning: Relay is unavailable."


def _compose(response: RelayResponse | None, **kwargs):
    return compose_reply("C1", response, no_answer_text=NO_ANSWER, error_text=ERROR, **kwargs)


def test_answer_with_tags():
    reply = _compose(RelayResponse(answer="Try restarting", tags=["<@U1>"]))
    assert reply.text == "Try restarting\n\n<@U1>"
    assert reply.kind == ReplyKind.ANSWER


def test_answer_with_multiple_tags_joined_by_space():
    reply = _compose(RelayResponse(answer="Escalating", tags=["<@U1>", "<@U2>"]))
    assert reply.text == "Escalating\n\n<@U1> <@U2>"


def test_answer_without_tags():
    assert _compose(RelayResponse(answer="Done")).text == "Done"


def test_answer_with_empty_tags():
    assert _compose(RelayResponse(answer="Done", tags=[])).text == "Done"


def test_blank_tag_tokens_are_dropped():
    assert _compose(RelayResponse(answer="Done", tags=["", "<@U1>"])).text == "Done\n\n<@U1>"
    assert _compose(RelayResponse(answer="Done", tags=[""])).text == "Done"


def test_tags_without_answer_use_no_answer_fallback():
    reply = _compose(RelayResponse(tags=["<@U1>", "<@U2>"]))
    assert reply.text == NO_ANSWER
    assert reply.kind == ReplyKind.NO_ANSWER


@pytest.mark.parametrize("answer", [None, "", "   \n"])
def test_missing_or_blank_answer_uses_no_answer_fallback(answer: str | None):
    assert _compose(RelayResponse(answer=answer)).text == NO_ANSWER


def test_dispatch_failure_uses_error_fallback():
    reply = _compose(None)
    assert reply.text == ERROR
    assert reply.kind == ReplyKind.ERROR


def test_error_fallback_differs_from_no_answer():
    assert _compose(None).text != _compose(RelayResponse()).text


def test_thread_ts_is_carried():
    assert _compose(RelayResponse(answer="Done"), thread_ts="1.2").thread_ts == "1.2"
    assert _compose(None, thread_ts="1.2").thread_ts == "1.2"


def test_reply_targets_given_channel():
    assert _compose(RelayResponse(answer="Done")).channel_id == "C1"


def test_never_empty_for_any_answer_tags_combination():
    answers = [None, "", " ", "Done"]
    tag_lists = [None, [], [""], ["<@U1>"], ["<@U1>", "<@U2>"]]
    for answer, tags in itertools.product(answers, tag_lists):
        assert _compose(RelayResponse(answer=answer, tags=tags)).text
    assert _compose(None).text
