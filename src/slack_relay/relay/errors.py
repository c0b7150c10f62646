"""Per-event failure types. None of these escape the relay pipeline."""


class RelayError(Exception):
    """Base class for relay failures."""


class MalformedEvent(RelayError):
    """Inbound event is missing required identifiers (channel, ts, or user)."""


class DispatchFailure(RelayError):
    """The orchestration call failed or returned an unusable body.

    ``cause`` is a short operator-facing description: a timeout, a network
    error, an HTTP status, or a decode problem. ``status_code`` is set only
    for non-2xx responses.
    """

    def __init__(self, cause: str, *, status_code: int | None = None) -> None:
        super().__init__(cause)
        self.cause = cause
        self.status_code = status_code


class SendFailure(RelayError):
    """Posting the reply back to Slack failed."""
