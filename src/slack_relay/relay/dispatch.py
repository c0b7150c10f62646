"""Orchestration endpoint client.

One POST per accepted event, bounded by a wall-clock timeout. There is no
retry: the endpoint may already have triggered downstream actions, and it
offers no idempotency key to make a second attempt safe.
"""

import asyncio
import logging
import time

import httpx
from pydantic import ValidationError

from slack_relay.models.relay import RelayRequest, RelayResponse
from slack_relay.relay.errors import DispatchFailure

logger = logging.getLogger(__name__)


class OrchestrationClient:
    """Async client for the orchestration webhook.

    Owns its ``httpx.AsyncClient`` unless one is injected (tests pass a client
    built on ``httpx.MockTransport``).
    """

    def __init__(
        self,
        url: str,
        timeout_seconds: float = 10.0,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        self.url = url
        self.timeout_seconds = timeout_seconds
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(timeout_seconds),
        )

    async def dispatch(self, request: RelayRequest) -> RelayResponse:
        """POST the request and parse the response.

        Raises DispatchFailure on timeout, transport error, non-2xx status,
        a body that is not JSON, or JSON that does not match the contract.
        """
        started = time.monotonic()
        try:
            async with asyncio.timeout(self.timeout_seconds):
                response = await self._client.post(self.url, json=request.to_payload())
        except (TimeoutError, httpx.TimeoutException) as exc:
            raise DispatchFailure(f"timeout after {self.timeout_seconds:g}s") from exc
        except httpx.HTTPError as exc:
            raise DispatchFailure(f"network error: {exc!r}") from exc
        except httpx.InvalidURL as exc:
            raise DispatchFailure(f"invalid URL: {exc}") from exc
        except Exception as exc:
            raise DispatchFailure(f"request failed: {exc!r}") from exc

        elapsed = time.monotonic() - started
        logger.info(
            "Orchestration responded %d in %.2fs",
            response.status_code,
            elapsed,
            extra={"channel_id": request.channel_id},
        )

        if not response.is_success:
            raise DispatchFailure(
                f"HTTP {response.status_code}", status_code=response.status_code
            )

        try:
            body = response.json()
        except ValueError as exc:
            raise DispatchFailure("invalid JSON body") from exc

        try:
            return RelayResponse.model_validate(body)
        except ValidationError as exc:
            raise DispatchFailure("unexpected response shape") from exc

    async def aclose(self) -> None:
        """Close the underlying HTTP client if this instance created it."""
        if self._owns_client:
            await self._client.aclose()
