"""Request encoding and reply-envelope decoding.

Decoding happens in two steps: :func:`decode_reply` parses the
``{sessionId, status, value}`` envelope and raises the classified error for
failed commands, then one of the ``decode_*`` helpers turns the envelope's
``value`` into the shape the command promises.
"""

from __future__ import annotations

import json
import logging
import math
from typing import Any, Callable

from wiredriver.exceptions import MalformedReplyError, NilValueError
from wiredriver.models import Cookie, Point, ReplyEnvelope, Size, Status
from wiredriver.protocol import status_codes
from wiredriver.transport.base import RawReply

logger = logging.getLogger(__name__)

# Called with the base64 payload of an inline ``screen`` field.
ScreenHook = Callable[[str], Any]

_ELEMENT_KEYS = ("ELEMENT", "element-6066-11e4-a52e-4f735466cecf")


def encode_params(params: dict[str, Any] | None) -> bytes | None:
    """Serialize command parameters; ``None`` means the request has no body."""
    if params is None:
        return None
    return json.dumps(params).encode("utf-8")


def printable(content: bytes) -> str:
    """Render a reply body for logs, with NUL bytes turned into spaces."""
    return content.replace(b"\x00", b" ").decode("utf-8", errors="replace")


def parse_envelope(raw: RawReply) -> ReplyEnvelope:
    try:
        data = json.loads(raw.content)
    except (ValueError, UnicodeDecodeError) as exc:
        raise MalformedReplyError(
            f"Reply (HTTP {raw.status_code}) is not valid JSON: {exc}", body=raw.content
        ) from exc
    if not isinstance(data, dict):
        raise MalformedReplyError(
            f"Reply (HTTP {raw.status_code}) is not a JSON object.", body=raw.content
        )

    status = data.get("status", status_codes.SUCCESS)
    if status is None:
        status = status_codes.SUCCESS
    if isinstance(status, bool) or not isinstance(status, int):
        raise MalformedReplyError(f"Reply status is not an integer: {status!r}", body=raw.content)

    session_id = data.get("sessionId")
    return ReplyEnvelope(
        session_id=str(session_id) if session_id is not None else None,
        status=status,
        value=data.get("value"),
        http_status=raw.status_code,
    )


def _run_screen_hook(value: Any, on_screen: ScreenHook | None) -> None:
    if on_screen is None or not isinstance(value, dict):
        return
    screen = value.get("screen")
    if not isinstance(screen, str) or not screen:
        return
    try:
        on_screen(screen)
    except Exception as exc:  # best effort, never alters the command outcome
        logger.warning("Could not persist inline screenshot: %s", exc)


def decode_reply(raw: RawReply, on_screen: ScreenHook | None = None) -> ReplyEnvelope:
    """Parse *raw* and raise the classified error if the command failed."""
    envelope = parse_envelope(raw)
    _run_screen_hook(envelope.value, on_screen)

    state = status_codes.status_message(envelope.status) if envelope.status else "success"
    if raw.status_code >= 400:
        logger.warning("<- HTTP %d, %s", raw.status_code, state)
        logger.debug("<- %s", printable(raw.content))
        raise status_codes.classify(
            envelope.status, http_status=raw.status_code, detail=_error_detail(envelope.value)
        )
    logger.debug("<- HTTP %d, %s", raw.status_code, state)

    if envelope.status != status_codes.SUCCESS:
        logger.debug("<- %s", printable(raw.content))
        raise status_codes.classify(
            envelope.status, http_status=raw.status_code, detail=_error_detail(envelope.value)
        )
    return envelope


def _error_detail(value: Any) -> Any:
    if isinstance(value, dict):
        return value.get("message") or None
    return value


# --- typed value shapes ---


def _expect(value: Any, kind: type | tuple[type, ...], what: str) -> Any:
    if value is None:
        raise NilValueError(f"Server returned null where {what} was required.")
    if isinstance(value, bool) and kind is not bool:
        raise MalformedReplyError(f"Expected {what}, got {value!r}.")
    if not isinstance(value, kind):
        raise MalformedReplyError(f"Expected {what}, got {type(value).__name__}.")
    return value


def decode_string(value: Any) -> str:
    return _expect(value, str, "a string")


def decode_bool(value: Any) -> bool:
    return _expect(value, bool, "a boolean")


def decode_strings(value: Any) -> list[str]:
    if value is None:
        return []
    items = _expect(value, list, "a list of strings")
    return [decode_string(item) for item in items]


def decode_element_id(value: Any) -> str:
    ref = _expect(value, dict, "an element reference")
    for key in _ELEMENT_KEYS:
        element_id = ref.get(key)
        if isinstance(element_id, str) and element_id:
            return element_id
    raise MalformedReplyError(f"Element reference carries no identifier: {ref!r}.")


def decode_element_ids(value: Any) -> list[str]:
    if value is None:
        return []
    items = _expect(value, list, "a list of element references")
    return [decode_element_id(item) for item in items]


def decode_cookies(value: Any) -> list[Cookie]:
    if value is None:
        return []
    items = _expect(value, list, "a list of cookies")
    cookies = []
    for item in items:
        try:
            cookies.append(Cookie.from_wire(_expect(item, dict, "a cookie")))
        except (TypeError, ValueError, OverflowError) as exc:
            raise MalformedReplyError(f"Malformed cookie {item!r}: {exc}") from exc
    return cookies


def _number(data: dict[str, Any], key: str) -> int:
    number = _expect(data.get(key), (int, float), f"numeric field {key!r}")
    if isinstance(number, float) and not math.isfinite(number):
        raise MalformedReplyError(f"Numeric field {key!r} is not finite: {number!r}.")
    return int(number)


def decode_point(value: Any) -> Point:
    data = _expect(value, dict, "a point")
    return Point(x=_number(data, "x"), y=_number(data, "y"))


def decode_size(value: Any) -> Size:
    data = _expect(value, dict, "a size")
    return Size(width=_number(data, "width"), height=_number(data, "height"))


def decode_capabilities(value: Any) -> dict[str, Any]:
    return dict(_expect(value, dict, "a capabilities map"))


def decode_status(value: Any) -> Status:
    data = _expect(value, dict, "a status record")
    for section in ("build", "os", "java"):
        if not isinstance(data.get(section) or {}, dict):
            raise MalformedReplyError(f"Status field {section!r} is not an object: {data[section]!r}.")
    return Status.from_wire(data)
