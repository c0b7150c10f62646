"""Slack request signature verification as a FastAPI dependency."""

from fastapi import HTTPException, Request
from slack_sdk.signature import SignatureVerifier

from slack_relay.config import Settings


async def verify_slack_request(request: Request) -> dict:
    """Check the Slack signature against the signing secret loaded at startup.

    The raw body is read before JSON parsing so the HMAC covers the exact
    bytes Slack signed. Stale timestamps are rejected by SignatureVerifier.
    Returns the parsed payload; raises HTTPException(403) on a bad signature.
    """
    settings: Settings = request.app.state.settings
    body = await request.body()

    verifier = SignatureVerifier(signing_secret=settings.slack_signing_secret)
    is_valid = verifier.is_valid(
        body=body.decode("utf-8"),
        timestamp=request.headers.get("X-Slack-Request-Timestamp", ""),
        signature=request.headers.get("X-Slack-Signature", ""),
    )
    if not is_valid:
        raise HTTPException(status_code=403, detail="Invalid Slack signature")

    return await request.json()
