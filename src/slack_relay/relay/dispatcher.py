"""Per-event relay pipeline: filter -> build -> dispatch -> normalize -> send.

Each accepted event runs as its own background task. The dispatcher holds no
per-event state; the directory snapshot is the only shared data and it is
read-only here.
"""

import logging
from enum import Enum

from slack_sdk.web.async_client import AsyncWebClient

from slack_relay.directory import Directory
from slack_relay.models.events import InboundEvent
from slack_relay.models.relay import RelayResponse
from slack_relay.relay.builder import build_request
from slack_relay.relay.dispatch import OrchestrationClient
from slack_relay.relay.errors import DispatchFailure, SendFailure
from slack_relay.relay.intake import accept_event
from slack_relay.relay.normalizer import compose_reply
from slack_relay.relay.sender import send_reply

logger = logging.getLogger(__name__)


class RelayOutcome(str, Enum):
    """Terminal state reached by one event."""

    REJECTED = "rejected"
    SENT = "sent"
    SEND_FAILED = "send_failed"


class RelayDispatcher:
    """Relays Slack messages to the orchestration endpoint and posts the answer back."""

    def __init__(
        self,
        orchestrator: OrchestrationClient,
        slack_client: AsyncWebClient,
        directory: Directory,
        *,
        no_answer_text: str,
        error_text: str,
        reply_in_thread: bool = False,
    ) -> None:
        self.orchestrator = orchestrator
        self.slack_client = slack_client
        self.directory = directory
        self.no_answer_text = no_answer_text
        self.error_text = error_text
        self.reply_in_thread = reply_in_thread

    async def relay(self, event: InboundEvent) -> RelayOutcome:
        """Run the full pipeline for one event. Never raises."""
        log_extra = {"channel_id": event.channel_id, "event_ts": event.timestamp}
        try:
            return await self._relay(event, log_extra)
        except Exception:
            logger.exception("Relay crashed for event %s", event.timestamp, extra=log_extra)
            return RelayOutcome.SEND_FAILED

    async def _relay(self, event: InboundEvent, log_extra: dict) -> RelayOutcome:
        if not accept_event(event):
            logger.debug(
                "Ignoring %s event %s", event.event_subtype, event.timestamp, extra=log_extra
            )
            return RelayOutcome.REJECTED

        request = build_request(event, self.directory.current())

        response: RelayResponse | None
        try:
            response = await self.orchestrator.dispatch(request)
        except DispatchFailure as exc:
            logger.error(
                "Dispatch failed for event %s: %s",
                event.timestamp,
                exc.cause,
                extra={**log_extra, "status_code": exc.status_code},
            )
            response = None
        except Exception:
            logger.exception(
                "Dispatch raised unexpectedly for event %s", event.timestamp, extra=log_extra
            )
            response = None

        reply = compose_reply(
            event.channel_id,
            response,
            no_answer_text=self.no_answer_text,
            error_text=self.error_text,
            thread_ts=event.timestamp if self.reply_in_thread else None,
        )

        try:
            await send_reply(self.slack_client, reply)
        except SendFailure as exc:
            logger.error(
                "Reply for event %s not delivered: %s",
                event.timestamp,
                exc,
                exc_info=True,
                extra=log_extra,
            )
            return RelayOutcome.SEND_FAILED

        logger.info(
            "Relayed event %s (%s reply)", event.timestamp, reply.kind.value, extra=log_extra
        )
        return RelayOutcome.SENT
