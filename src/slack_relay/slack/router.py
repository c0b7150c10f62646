"""Slack webhook router with signature verification."""

from fastapi import APIRouter, BackgroundTasks, Depends, Request
from fastapi.responses import JSONResponse

from slack_relay.slack.handlers import handle_slack_event
from slack_relay.slack.verification import verify_slack_request

router = APIRouter(prefix="", tags=["slack"])


@router.post("/slack/events")
async def slack_events(
    request: Request,
    background_tasks: BackgroundTasks,
    payload: dict = Depends(verify_slack_request),
) -> JSONResponse:
    """Receive Slack webhook events.

    Slack redeliveries (X-Slack-Retry-Num header) are acknowledged without
    processing: the first delivery was already relayed, and relaying again
    would call the orchestration endpoint twice for one message.
    """
    if request.headers.get("X-Slack-Retry-Num"):
        return JSONResponse({"ok": True})

    return handle_slack_event(payload, background_tasks, request.app.state.dispatcher)
