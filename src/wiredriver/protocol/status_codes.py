"""Status-code table for the JSON wire protocol.

Every reply carries a numeric ``status``; 0 means success and the codes below
name the failure conditions a remote end can report. Codes missing from the
table classify as ``UnknownProtocolError`` with the code preserved.
"""

from __future__ import annotations

from typing import Any

from wiredriver.exceptions import ProtocolError

SUCCESS = 0
NO_SUCH_ELEMENT = 7
NO_SUCH_FRAME = 8
UNKNOWN_COMMAND = 9
STALE_ELEMENT_REFERENCE = 10
ELEMENT_NOT_VISIBLE = 11
INVALID_ELEMENT_STATE = 12
UNKNOWN_ERROR = 13
ELEMENT_NOT_SELECTABLE = 15
JAVASCRIPT_ERROR = 17
XPATH_LOOKUP_ERROR = 19
TIMEOUT = 21
NO_SUCH_WINDOW = 23
INVALID_COOKIE_DOMAIN = 24
UNABLE_TO_SET_COOKIE = 25
UNEXPECTED_ALERT_OPEN = 26
NO_ALERT_OPEN = 27
SCRIPT_TIMEOUT = 28
INVALID_ELEMENT_COORDINATES = 29
INVALID_SELECTOR = 32

UNKNOWN_PROTOCOL_ERROR = "UnknownProtocolError"

# code -> (condition name, protocol message)
STATUS_TABLE: dict[int, tuple[str, str]] = {
    NO_SUCH_ELEMENT: ("ElementNotFound", "no such element"),
    NO_SUCH_FRAME: ("NoSuchFrame", "no such frame"),
    UNKNOWN_COMMAND: ("UnknownCommand", "unknown command"),
    STALE_ELEMENT_REFERENCE: ("StaleElementReference", "stale element reference"),
    ELEMENT_NOT_VISIBLE: ("ElementNotVisible", "element not visible"),
    INVALID_ELEMENT_STATE: ("InvalidElementState", "invalid element state"),
    UNKNOWN_ERROR: ("UnknownError", "unknown error"),
    ELEMENT_NOT_SELECTABLE: ("ElementNotSelectable", "element is not selectable"),
    JAVASCRIPT_ERROR: ("JavaScriptError", "javascript error"),
    XPATH_LOOKUP_ERROR: ("XPathLookupError", "xpath lookup error"),
    TIMEOUT: ("Timeout", "timeout"),
    NO_SUCH_WINDOW: ("NoSuchWindow", "no such window"),
    INVALID_COOKIE_DOMAIN: ("InvalidCookieDomain", "invalid cookie domain"),
    UNABLE_TO_SET_COOKIE: ("UnableToSetCookie", "unable to set cookie"),
    UNEXPECTED_ALERT_OPEN: ("UnexpectedAlertOpen", "unexpected alert open"),
    NO_ALERT_OPEN: ("NoAlertOpen", "no alert open"),
    SCRIPT_TIMEOUT: ("ScriptTimeout", "script timeout"),
    INVALID_ELEMENT_COORDINATES: ("InvalidElementCoordinates", "invalid element coordinates"),
    INVALID_SELECTOR: ("InvalidSelector", "invalid selector"),
}


def status_name(code: int) -> str:
    """Return the condition name for *code*."""
    entry = STATUS_TABLE.get(code)
    return entry[0] if entry else UNKNOWN_PROTOCOL_ERROR


def status_message(code: int) -> str:
    entry = STATUS_TABLE.get(code)
    return entry[1] if entry else f"unknown error - {code}"


def classify(code: int, *, http_status: int | None = None, detail: Any = None) -> ProtocolError:
    """Build the classified error for a non-success *code*."""
    return ProtocolError(
        code,
        status_name(code),
        status_message(code),
        http_status=http_status,
        detail=detail,
    )
