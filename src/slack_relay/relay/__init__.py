"""Relay core: intake, request building, dispatch, reply composition.

Public API:
    RelayDispatcher(...).relay(event) -> RelayOutcome
        Runs one inbound event through the whole pipeline and posts a reply.
"""

from slack_relay.relay.builder import build_request
from slack_relay.relay.dispatch import OrchestrationClient
from slack_relay.relay.dispatcher import RelayDispatcher, RelayOutcome
from slack_relay.relay.errors import DispatchFailure, MalformedEvent, RelayError, SendFailure
from slack_relay.relay.intake import accept_event, parse_event
from slack_relay.relay.normalizer import compose_reply
from slack_relay.relay.sender import send_reply

__all__ = [
    "DispatchFailure",
    "MalformedEvent",
    "OrchestrationClient",
    "RelayDispatcher",
    "RelayError",
    "RelayOutcome",
    "SendFailure",
    "accept_event",
    "build_request",
    "compose_reply",
    "parse_event",
    "send_reply",
]
