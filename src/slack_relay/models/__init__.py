"""Data models for the relay pipeline."""

from slack_relay.models.events import InboundEvent
from slack_relay.models.relay import OutboundReply, RelayRequest, RelayResponse, ReplyKind

__all__ = [
    "InboundEvent",
    "OutboundReply",
    "RelayRequest",
    "RelayResponse",
    "ReplyKind",
]
