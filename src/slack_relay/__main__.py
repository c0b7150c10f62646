"""Run the relay with uvicorn: ``python -m slack_relay``."""

import uvicorn

from slack_relay.config import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run("slack_relay.app:app", host="0.0.0.0", port=settings.port, log_config=None)


if __name__ == "__main__":
    main()
