"""httpx-backed implementation of Transport."""

from __future__ import annotations

import logging

import httpx

from wiredriver.exceptions import TooManyRedirectsError, TransportError
from wiredriver.settings import MAX_REDIRECTS, DriverSettings
from wiredriver.transport.base import JSON_MIME_TYPE, RawReply

logger = logging.getLogger(__name__)

_BODY_CONTENT_TYPE = f"{JSON_MIME_TYPE};charset=UTF-8"


class HttpxTransport:
    """Blocking HTTP transport built on ``httpx.Client``.

    The ``Accept`` header is a client default, so httpx re-sends it on every
    redirected request as well.
    """

    def __init__(
        self,
        *,
        max_redirects: int = MAX_REDIRECTS,
        connect_timeout: float = 10.0,
        read_timeout: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._max_redirects = max_redirects
        self._client = httpx.Client(
            headers={"Accept": JSON_MIME_TYPE},
            follow_redirects=True,
            max_redirects=max_redirects,
            timeout=httpx.Timeout(read_timeout, connect=connect_timeout),
            transport=transport,
        )

    @classmethod
    def from_settings(
        cls, settings: DriverSettings, transport: httpx.BaseTransport | None = None
    ) -> "HttpxTransport":
        return cls(
            max_redirects=settings.max_redirects,
            connect_timeout=settings.connect_timeout,
            read_timeout=settings.read_timeout,
            transport=transport,
        )

    def execute(self, method: str, url: str, body: bytes | None = None) -> RawReply:
        headers = {"Content-Type": _BODY_CONTENT_TYPE} if body is not None else None
        logger.debug("-> %s %s", method, url)
        try:
            response = self._client.request(method, url, content=body, headers=headers)
        except httpx.TooManyRedirects as exc:
            raise TooManyRedirectsError(
                f"{method} {url}: more than {self._max_redirects} redirects"
            ) from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(f"{method} {url}: {exc}") from exc

        if response.history:
            logger.debug("Followed %d redirect(s) to %s.", len(response.history), response.url)
        return RawReply(
            status_code=response.status_code,
            content=response.content,
            content_type=response.headers.get("content-type", ""),
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "HttpxTransport":
        return self

    def __exit__(self, *_) -> None:
        self.close()
