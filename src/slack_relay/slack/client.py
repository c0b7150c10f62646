"""Async Slack client construction.

The client is created once in the application lifespan and handed to the
relay dispatcher, rather than cached in a module global.
"""

from slack_sdk.web.async_client import AsyncWebClient

from slack_relay.config import Settings


def create_slack_client(settings: Settings) -> AsyncWebClient:
    """Return an AsyncWebClient authenticated with the configured bot token."""
    return AsyncWebClient(token=settings.slack_bot_token)
