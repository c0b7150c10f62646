"""Slack event dispatch: challenge handling, event parsing, and relay scheduling."""

import logging

from fastapi import BackgroundTasks
from fastapi.responses import JSONResponse

from slack_relay.relay.dispatcher import RelayDispatcher
from slack_relay.relay.errors import MalformedEvent
from slack_relay.relay.intake import accept_event, parse_event

logger = logging.getLogger(__name__)


def handle_slack_event(
    payload: dict, background_tasks: BackgroundTasks, dispatcher: RelayDispatcher
) -> JSONResponse:
    """Dispatch a Slack event based on its type.

    - url_verification: return the challenge token
    - event_callback: process the contained event
    - anything else: acknowledge with 200
    """
    if payload.get("type") == "url_verification":
        return JSONResponse({"challenge": payload["challenge"]})

    if payload.get("type") == "event_callback":
        event = payload.get("event", {})
        handle_message_event(event, background_tasks, dispatcher)
        return JSONResponse({"ok": True})

    return JSONResponse({"ok": True})


def handle_message_event(
    event: dict, background_tasks: BackgroundTasks, dispatcher: RelayDispatcher
) -> None:
    """Parse and filter a message event, then schedule it as its own relay task.

    Non-message events are ignored. Malformed events are logged and dropped.
    Events with a subtype (edits, joins, bot posts) never reach dispatch.
    """
    if event.get("type") != "message":
        return

    try:
        inbound = parse_event(event)
    except MalformedEvent as exc:
        logger.warning("Dropping malformed message event: %s", exc)
        return

    if not accept_event(inbound):
        return

    logger.info(
        "Relaying message %s from user %s in channel %s",
        inbound.timestamp,
        inbound.author_id,
        inbound.channel_id,
    )
    background_tasks.add_task(dispatcher.relay, inbound)
