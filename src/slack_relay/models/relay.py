"""Orchestration request/response models and the composed channel reply."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RelayRequest(BaseModel):
    """Body sent to the orchestration endpoint for one accepted event."""

    text: str
    author_id: str = Field(serialization_alias="user")
    channel_id: str = Field(serialization_alias="channel")
    directory: dict[str, str] = Field(default_factory=dict, serialization_alias="employees")

    def to_payload(self) -> dict:
        """Return the JSON wire shape: text, user, channel, employees."""
        return self.model_dump(by_alias=True)


class RelayResponse(BaseModel):
    """Orchestration endpoint answer. Both fields are optional; unknown keys are ignored."""

    model_config = ConfigDict(extra="ignore")

    answer: str | None = None
    tags: list[str] | None = None  # Ordered mention tokens, e.g. ["<@U1>", "<@U2>"]


class ReplyKind(str, Enum):
    """Which branch of the normalizer produced a reply."""

    ANSWER = "answer"
    NO_ANSWER = "no_answer"
    ERROR = "error"


class OutboundReply(BaseModel):
    """Text posted back to the originating channel."""

    channel_id: str
    text: str = Field(min_length=1)
    kind: ReplyKind
    thread_ts: str | None = None
