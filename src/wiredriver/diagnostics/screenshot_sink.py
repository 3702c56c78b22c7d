"""Persistence for screenshots returned by the remote end."""

from __future__ import annotations

import base64
import binascii
import logging
import time
from pathlib import Path
from typing import Protocol, runtime_checkable

from wiredriver.exceptions import ScreenshotError

logger = logging.getLogger(__name__)


@runtime_checkable
class ScreenshotSink(Protocol):
    """Receives base64-encoded PNG data and returns where it was stored."""

    def persist(self, data: str) -> str:
        ...


class FileScreenshotSink:
    """Writes each screenshot to ``<directory>/<unix-time>.png``.

    A counter suffix keeps several captures within the same second apart.
    """

    def __init__(self, directory: str | Path = ".") -> None:
        self._directory = Path(directory)

    @property
    def directory(self) -> Path:
        return self._directory

    def _next_path(self) -> Path:
        stamp = int(time.time())
        path = self._directory / f"{stamp}.png"
        index = 1
        while path.exists():
            path = self._directory / f"{stamp}-{index}.png"
            index += 1
        return path

    def persist(self, data: str) -> str:
        try:
            image = base64.b64decode("".join(data.split()), validate=True)
        except (binascii.Error, ValueError) as exc:
            raise ScreenshotError(f"Screenshot data is not valid base64: {exc}") from exc

        try:
            self._directory.mkdir(parents=True, exist_ok=True)
            path = self._next_path()
            path.write_bytes(image)
        except OSError as exc:
            raise ScreenshotError(f"Cannot write screenshot to {self._directory}: {exc}") from exc

        logger.info("Screenshot saved to %s.", path)
        return str(path)
