"""Inbound Slack message event model."""

from pydantic import BaseModel, ConfigDict, model_validator


class InboundEvent(BaseModel):
    """A Slack message event reduced to the fields the relay needs."""

    model_config = ConfigDict(frozen=True)

    channel_id: str
    timestamp: str  # Slack message ts, e.g., "1234567890.123456"
    author_id: str | None = None  # Absent on some system and bot events
    text: str = ""
    event_subtype: str | None = None  # message_changed, channel_join, bot_message, ...

    @model_validator(mode="after")
    def _identifiers_present(self) -> "InboundEvent":
        if not self.channel_id or not self.timestamp:
            raise ValueError("message event is missing 'channel' or 'ts'")
        if self.event_subtype is None and not self.author_id:
            raise ValueError("user-authored message event is missing 'user'")
        return self

    @classmethod
    def from_slack(cls, event: dict) -> "InboundEvent":
        """Build an InboundEvent from the ``event`` object of a Slack event_callback.

        Bot posts can arrive without a subtype but with ``bot_id``; those are
        tagged as ``bot_message`` so they are treated like any other echo.
        Raises pydantic.ValidationError when identifiers are missing.
        """
        subtype = event.get("subtype") or None
        if subtype is None and event.get("bot_id"):
            subtype = "bot_message"
        return cls(
            channel_id=event.get("channel") or "",
            timestamp=event.get("ts") or "",
            author_id=event.get("user"),
            text=event.get("text") or "",
            event_subtype=subtype,
        )
