"""Custom exception hierarchy for wiredriver."""

from __future__ import annotations

from typing import Any


class WireDriverError(Exception):
    """Base exception for all wiredriver errors."""


class ConfigurationError(WireDriverError):
    """Raised when settings are invalid or cannot be read."""


class TransportError(WireDriverError):
    """Raised when the HTTP round trip itself fails (connect, read, protocol)."""


class TooManyRedirectsError(TransportError):
    """Raised when the server redirects more times than allowed."""


class MalformedReplyError(WireDriverError):
    """Raised when a reply envelope or its value cannot be decoded."""

    def __init__(self, message: str, body: bytes | None = None) -> None:
        super().__init__(message)
        self.body = body


class InvalidSessionStateError(WireDriverError):
    """Raised when a command is issued outside the Active session state."""


class NilValueError(WireDriverError):
    """Raised when the server returns ``null`` where a value was required."""


class ScreenshotError(WireDriverError):
    """Raised when screenshot data cannot be decoded or written to disk."""


class ProtocolError(WireDriverError):
    """A failure reported by the remote end, classified by status code.

    One type covers the whole status table; branch on :attr:`code` (see
    :mod:`wiredriver.protocol.status_codes` for the named constants).
    """

    def __init__(
        self,
        code: int,
        name: str,
        message: str,
        *,
        http_status: int | None = None,
        detail: Any = None,
    ) -> None:
        self.code = code
        self.name = name
        self.message = message
        self.http_status = http_status
        self.detail = detail
        text = f"{name} (status {code}): {message}"
        if isinstance(detail, str) and detail:
            text = f"{text} - {detail}"
        super().__init__(text)
