"""Tests for Slack client construction."""

from slack_sdk.web.async_client import AsyncWebClient

from slack_relay.config import Settings
from slack_relay.slack.client import create_slack_client


def test_create_slack_client_uses_bot_token():
    """create_slack_client returns an AsyncWebClient authenticated with the bot token."""
    client = create_slack_client(Settings(_env_file=None, slack_bot_token="xoxb-relay"))

    assert isinstance(client, AsyncWebClient)
    assert client.token == "xoxb-relay"


def test_create_slack_client_returns_new_instance():
    settings = Settings(_env_file=None, slack_bot_token="xoxb-relay")
    assert create_slack_client(settings) is not create_slack_client(settings)
