"""Value objects decoded from (or encoded into) wire protocol replies."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

# Flat capability map, e.g. {"browserName": "chrome", "takesScreenshot": True}.
Capabilities = dict[str, Any]


@dataclass(frozen=True)
class ReplyEnvelope:
    """The ``{sessionId, status, value}`` wrapper shared by every reply."""

    session_id: str | None
    status: int
    value: Any = None
    http_status: int = 200


@dataclass(frozen=True)
class Point:
    """A position in CSS pixels, as returned by the location commands."""

    x: int
    y: int


@dataclass(frozen=True)
class Size:
    """Rendered width and height of an element or window."""

    width: int
    height: int


@dataclass(frozen=True)
class Cookie:
    """A browser cookie as exchanged by the cookie commands."""

    name: str
    value: str
    path: str = ""
    domain: str = ""
    secure: bool = False
    expiry: int | None = None

    def to_wire(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "name": self.name,
            "value": self.value,
            "path": self.path,
            "domain": self.domain,
            "secure": self.secure,
        }
        if self.expiry is not None:
            data["expiry"] = self.expiry
        return data

    @classmethod
    def from_wire(cls, data: dict[str, Any]) -> "Cookie":
        expiry = data.get("expiry")
        return cls(
            name=str(data.get("name", "")),
            value=str(data.get("value", "")),
            path=data.get("path") or "",
            domain=data.get("domain") or "",
            secure=bool(data.get("secure", False)),
            expiry=int(expiry) if expiry is not None else None,
        )


@dataclass(frozen=True)
class Status:
    """Server health / version information from ``GET /status``."""

    build_version: str = ""
    build_revision: str = ""
    build_time: str = ""
    os_arch: str = ""
    os_name: str = ""
    os_version: str = ""
    java_version: str = ""
    ready: bool | None = None
    message: str = ""
    raw: dict[str, Any] = field(default_factory=dict, compare=False)

    @classmethod
    def from_wire(cls, data: dict[str, Any]) -> "Status":
        build = data.get("build") or {}
        os_info = data.get("os") or {}
        java = data.get("java") or {}
        ready = data.get("ready")
        return cls(
            build_version=str(build.get("version", "")),
            build_revision=str(build.get("revision", "")),
            build_time=str(build.get("time", "")),
            os_arch=str(os_info.get("arch", "")),
            os_name=str(os_info.get("name", "")),
            os_version=str(os_info.get("version", "")),
            java_version=str(java.get("version", "")),
            ready=bool(ready) if ready is not None else None,
            message=str(data.get("message", "")),
            raw=dict(data),
        )
