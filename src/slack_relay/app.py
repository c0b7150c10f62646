"""FastAPI application: lifespan wiring, health, and directory refresh."""

import logging
from contextlib import asynccontextmanager

from fastapi import Body, Depends, FastAPI, HTTPException, Request

from slack_relay.config import Settings, get_settings
from slack_relay.directory import Directory
from slack_relay.logging_config import configure_logging
from slack_relay.relay.dispatch import OrchestrationClient
from slack_relay.relay.dispatcher import RelayDispatcher
from slack_relay.slack.client import create_slack_client
from slack_relay.slack.router import router as slack_router

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan: configure logging, validate config, build the dispatcher.

    A missing credential or endpoint URL raises here and aborts startup.
    """
    settings = get_settings()
    configure_logging(settings.log_level)
    settings.check_required()

    directory = Directory(settings.employee_directory)
    orchestrator = OrchestrationClient(
        settings.workflow_url, timeout_seconds=settings.dispatch_timeout_seconds
    )
    app.state.settings = settings
    app.state.directory = directory
    app.state.dispatcher = RelayDispatcher(
        orchestrator,
        create_slack_client(settings),
        directory,
        no_answer_text=settings.no_answer_reply,
        error_text=settings.dispatch_failed_reply,
        reply_in_thread=settings.reply_in_thread,
    )
    logger.info(
        "Slack relay started (%d directory entries, %.1fs dispatch timeout)",
        len(directory),
        settings.dispatch_timeout_seconds,
    )
    try:
        yield
    finally:
        await orchestrator.aclose()


app = FastAPI(
    title="Slack Relay",
    lifespan=lifespan,
)
app.include_router(slack_router)


async def verify_admin(request: Request) -> None:
    """Verify the admin secret header for protected endpoints.

    Raises HTTPException 403 if the header is missing, empty, or mismatched,
    or if no admin secret is configured.
    """
    settings: Settings = request.app.state.settings
    secret = request.headers.get("X-Admin-Secret", "")
    if not settings.admin_secret or secret != settings.admin_secret:
        raise HTTPException(status_code=403, detail="Invalid admin secret")


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {
        "status": "ok",
        "service": "slack-relay",
        "version": "0.1.0",
    }


@app.put("/directory")
async def replace_directory(
    request: Request,
    entries: dict[str, str] = Body(...),
    _: None = Depends(verify_admin),
):
    """Replace the role -> mention token directory used for subsequent requests."""
    directory: Directory = request.app.state.directory
    directory.replace(entries)
    return {"status": "ok", "entries": len(directory)}
