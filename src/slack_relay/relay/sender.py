"""Posts composed replies back to the originating Slack channel."""

import logging

import aiohttp
from slack_sdk.errors import SlackApiError, SlackClientError
from slack_sdk.web.async_client import AsyncWebClient

from slack_relay.models.relay import OutboundReply
from slack_relay.relay.errors import SendFailure

logger = logging.getLogger(__name__)


async def send_reply(client: AsyncWebClient, reply: OutboundReply) -> None:
    """Send one chat.postMessage for the reply.

    Args:
        client: Slack web client authenticated as the bot.
        reply: Composed reply; ``thread_ts`` is passed only when set.

    Raises:
        SendFailure: Slack rejected the call or could not be reached.
    """
    kwargs: dict = {"channel": reply.channel_id, "text": reply.text}
    if reply.thread_ts:
        kwargs["thread_ts"] = reply.thread_ts

    try:
        await client.chat_postMessage(**kwargs)
    except SlackApiError as exc:
        error_code = exc.response.get("error", "") if exc.response else ""
        raise SendFailure(f"Slack API error: {error_code or 'unknown'}") from exc
    except (SlackClientError, aiohttp.ClientError, TimeoutError) as exc:
        raise SendFailure(f"Slack client error: {exc!r}") from exc

    logger.debug("Posted %s reply to %s", reply.kind.value, reply.channel_id)
