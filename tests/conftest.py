"""Shared test fixtures."""

import os

# Required settings must exist before the app lifespan reads them.
os.environ.setdefault("SLACK_BOT_TOKEN", "xoxb-test")
os.environ.setdefault("SLACK_SIGNING_SECRET", "test_signing_secret_1234")
os.environ.setdefault("WORKFLOW_URL", "https://workflows.example.com/webhook/relay")

from unittest.mock import AsyncMock  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from slack_relay.app import app  # noqa: E402
from slack_relay.directory import Directory  # noqa: E402
from slack_relay.relay.dispatcher import RelayDispatcher  # noqa: E402

NO_ANSWER_TEXT = "Noted, nothing to add."
ERROR_TEXT = ":warning: Relay is unavailable."


@pytest.fixture(scope="session")
def client() -> TestClient:
    """Create a TestClient for the FastAPI app."""
    return TestClient(app)


@pytest.fixture
def orchestrator() -> AsyncMock:
    """Stand-in for OrchestrationClient; set ``dispatch`` return_value or side_effect."""
    return AsyncMock()


@pytest.fixture
def slack_client() -> AsyncMock:
    """Stand-in for the Slack AsyncWebClient."""
    return AsyncMock()


@pytest.fixture
def directory() -> Directory:
    return Directory({"Frontend developer": "<@U09BEUF110W>", "Backend developer": "<@U09BD0FFL3C>"})


@pytest.fixture
def dispatcher(orchestrator: AsyncMock, slack_client: AsyncMock, directory: Directory) -> RelayDispatcher:
    """RelayDispatcher wired to mocked orchestration and Slack clients."""
    return RelayDispatcher(
        orchestrator,
        slack_client,
        directory,
        no_answer_text=NO_ANSWER_TEXT,
        error_text=ERROR_TEXT,
    )
