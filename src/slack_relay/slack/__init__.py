"""Slack ingress: webhook handling, signature verification, and client construction."""

from slack_relay.slack.client import create_slack_client

__all__ = [
    "create_slack_client",
]
