"""Event intake: parsing raw Slack events and deciding which reach dispatch."""

from pydantic import ValidationError

from slack_relay.models.events import InboundEvent
from slack_relay.relay.errors import MalformedEvent


def parse_event(event: dict) -> InboundEvent:
    """Parse a raw Slack message event, raising MalformedEvent if identifiers are missing."""
    try:
        return InboundEvent.from_slack(event)
    except ValidationError as exc:
        reasons = "; ".join(err["msg"] for err in exc.errors())
        raise MalformedEvent(reasons) from exc


def accept_event(event: InboundEvent) -> bool:
    """Return True if the event is a plain user message.

    Any subtype (edits, deletions, channel joins, bot echoes including our own
    replies) is rejected. Empty text is accepted; the orchestration endpoint
    decides what to do with it.
    """
    return event.event_subtype is None
