"""Protocol definition for HTTP transports."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol, runtime_checkable

JSON_MIME_TYPE = "application/json"


@dataclass(frozen=True)
class RawReply:
    """Undecoded HTTP reply handed from a transport to the codec."""

    status_code: int
    content: bytes
    content_type: str = ""


@runtime_checkable
class Transport(Protocol):
    """Thin abstraction over an HTTP client.

    Implementations must send ``Accept: application/json`` on every request
    (redirects included), follow redirects up to a fixed bound, and raise
    :class:`~wiredriver.exceptions.TransportError` on IO failure.
    """

    def execute(self, method: str, url: str, body: bytes | None = None) -> RawReply:
        """Perform one HTTP round trip and return the raw reply."""
        ...

    def close(self) -> None:
        """Release pooled connections."""
        ...
