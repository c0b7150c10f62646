"""Application configuration via pydantic-settings."""

from functools import lru_cache

import httpx
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_NO_ANSWER_REPLY = "Got it. There is nothing to add on this one right now."
DEFAULT_DISPATCH_FAILED_REPLY = ":warning: Sorry, something went wrong talking to the AI."


class ConfigurationError(RuntimeError):
    """Raised at startup when a required setting is missing."""


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Slack
    slack_bot_token: str = ""
    slack_signing_secret: str = ""
    reply_in_thread: bool = False

    # Orchestration endpoint
    workflow_url: str = ""
    dispatch_timeout_seconds: float = 10.0

    # Replies
    no_answer_reply: str = DEFAULT_NO_ANSWER_REPLY
    dispatch_failed_reply: str = DEFAULT_DISPATCH_FAILED_REPLY

    # Role label -> Slack mention token, e.g. {"Backend developer": "<@U09BD0FFL3C>"}
    employee_directory: dict[str, str] = {}

    # Guards PUT /directory
    admin_secret: str = ""

    # App
    environment: str = "development"
    log_level: str = "INFO"
    port: int = 3000

    @field_validator("dispatch_timeout_seconds")
    @classmethod
    def _positive_timeout(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("dispatch_timeout_seconds must be greater than zero")
        return value

    @field_validator("no_answer_reply", "dispatch_failed_reply")
    @classmethod
    def _non_blank_reply(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("fallback replies must not be blank")
        return value

    def check_required(self) -> None:
        """Raise ConfigurationError if a setting needed to serve traffic is empty or unusable.

        WORKFLOW_URL is parsed with httpx, the client that will post to it,
        and must be an absolute http(s) URL.
        """
        missing = [
            name.upper()
            for name in ("slack_bot_token", "slack_signing_secret", "workflow_url")
            if not getattr(self, name)
        ]
        if missing:
            raise ConfigurationError(f"Missing required settings: {', '.join(missing)}")

        try:
            url = httpx.URL(self.workflow_url)
        except httpx.InvalidURL as exc:
            raise ConfigurationError(f"WORKFLOW_URL is not a valid URL: {exc}") from exc
        if url.scheme not in ("http", "https") or not url.host:
            raise ConfigurationError(
                f"WORKFLOW_URL must be an absolute http(s) URL, got {self.workflow_url!r}"
            )


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()
