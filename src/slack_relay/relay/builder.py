"""Builds the orchestration request for an accepted event."""

from collections.abc import Mapping

from slack_relay.models.events import InboundEvent
from slack_relay.models.relay import RelayRequest


def build_request(event: InboundEvent, directory: Mapping[str, str]) -> RelayRequest:
    """Forward text and identifiers verbatim, embedding a copy of the directory snapshot."""
    return RelayRequest(
        text=event.text,
        author_id=event.author_id or "",
        channel_id=event.channel_id,
        directory=dict(directory),
    )
