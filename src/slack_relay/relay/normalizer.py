"""Turns an orchestration result into the text posted back to Slack."""

from slack_relay.models.relay import OutboundReply, RelayResponse, ReplyKind


def compose_reply(
    channel_id: str,
    response: RelayResponse | None,
    *,
    no_answer_text: str,
    error_text: str,
    thread_ts: str | None = None,
) -> OutboundReply:
    """Compose the channel reply for one event.

    ``response`` is None when the dispatch failed. An answer is followed by a
    blank line and the space-joined mention tags; tags are never posted
    without an answer. Every branch yields non-empty text.
    """
    if response is None:
        return OutboundReply(
            channel_id=channel_id, text=error_text, kind=ReplyKind.ERROR, thread_ts=thread_ts
        )

    answer = response.answer or ""
    if not answer.strip():
        return OutboundReply(
            channel_id=channel_id,
            text=no_answer_text,
            kind=ReplyKind.NO_ANSWER,
            thread_ts=thread_ts,
        )

    tags = [tag for tag in response.tags or [] if tag]
    text = f"{answer}\n\n{' '.join(tags)}" if tags else answer
    return OutboundReply(
        channel_id=channel_id, text=text, kind=ReplyKind.ANSWER, thread_ts=thread_ts
    )
