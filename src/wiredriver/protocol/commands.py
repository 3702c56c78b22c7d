"""Command path templates and URL construction."""

from __future__ import annotations

from urllib.parse import quote

STATUS = "/status"
NEW_SESSION = "/session"
SESSION = "/session/{session}"

TIMEOUTS = "/session/{session}/timeouts"
ASYNC_SCRIPT_TIMEOUT = "/session/{session}/timeouts/async_script"
IMPLICIT_WAIT_TIMEOUT = "/session/{session}/timeouts/implicit_wait"

URL = "/session/{session}/url"
FORWARD = "/session/{session}/forward"
BACK = "/session/{session}/back"
REFRESH = "/session/{session}/refresh"
TITLE = "/session/{session}/title"
SOURCE = "/session/{session}/source"

WINDOW_HANDLE = "/session/{session}/window_handle"
WINDOW_HANDLES = "/session/{session}/window_handles"
WINDOW = "/session/{session}/window"
WINDOW_MAXIMIZE = "/session/{session}/window/{name}/maximize"
FRAME = "/session/{session}/frame"

FIND_ELEMENT = "/session/{session}/element"
FIND_ELEMENTS = "/session/{session}/elements"
ACTIVE_ELEMENT = "/session/{session}/element/active"

COOKIES = "/session/{session}/cookie"
COOKIE = "/session/{session}/cookie/{name}"

ALERT_TEXT = "/session/{session}/alert_text"
ACCEPT_ALERT = "/session/{session}/accept_alert"
DISMISS_ALERT = "/session/{session}/dismiss_alert"

EXECUTE = "/session/{session}/execute"
EXECUTE_ASYNC = "/session/{session}/execute_async"
SCREENSHOT = "/session/{session}/screenshot"

MOVE_TO = "/session/{session}/moveto"
CLICK = "/session/{session}/click"
DOUBLE_CLICK = "/session/{session}/doubleclick"
BUTTON_DOWN = "/session/{session}/buttondown"
BUTTON_UP = "/session/{session}/buttonup"
MODIFIER = "/session/{session}/modifier"

IME_AVAILABLE_ENGINES = "/session/{session}/ime/available_engines"
IME_ACTIVE_ENGINE = "/session/{session}/ime/active_engine"
IME_ACTIVATED = "/session/{session}/ime/activated"
IME_ACTIVATE = "/session/{session}/ime/activate"
IME_DEACTIVATE = "/session/{session}/ime/deactivate"

# --- element scoped ---
ELEMENT_CLICK = "/session/{session}/element/{element}/click"
ELEMENT_SUBMIT = "/session/{session}/element/{element}/submit"
ELEMENT_CLEAR = "/session/{session}/element/{element}/clear"
ELEMENT_VALUE = "/session/{session}/element/{element}/value"
ELEMENT_FIND_ELEMENT = "/session/{session}/element/{element}/element"
ELEMENT_FIND_ELEMENTS = "/session/{session}/element/{element}/elements"
ELEMENT_NAME = "/session/{session}/element/{element}/name"
ELEMENT_TEXT = "/session/{session}/element/{element}/text"
ELEMENT_SELECTED = "/session/{session}/element/{element}/selected"
ELEMENT_ENABLED = "/session/{session}/element/{element}/enabled"
ELEMENT_DISPLAYED = "/session/{session}/element/{element}/displayed"
ELEMENT_ATTRIBUTE = "/session/{session}/element/{element}/attribute/{name}"
ELEMENT_CSS = "/session/{session}/element/{element}/css/{name}"
ELEMENT_LOCATION = "/session/{session}/element/{element}/location"
ELEMENT_LOCATION_IN_VIEW = "/session/{session}/element/{element}/location_in_view"
ELEMENT_SIZE = "/session/{session}/element/{element}/size"


def build_url(executor: str, template: str, **params: str) -> str:
    """Substitute percent-encoded *params* into *template* under *executor*.

    >>> build_url("http://h:4444/wd/hub", ELEMENT_CSS, session="s", element="1", name="font size")
    'http://h:4444/wd/hub/session/s/element/1/css/font%20size'
    """
    path = template.format(**{k: quote(str(v), safe="") for k, v in params.items()})
    return executor.rstrip("/") + path
