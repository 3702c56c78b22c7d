"""Remote browser session over the JSON wire protocol."""

from __future__ import annotations

import enum
import logging
from typing import Any

from wiredriver.diagnostics.screenshot_sink import FileScreenshotSink, ScreenshotSink
from wiredriver.exceptions import InvalidSessionStateError, MalformedReplyError, ProtocolError
from wiredriver.models import Capabilities, Cookie, ReplyEnvelope, Status
from wiredriver.protocol import codec, commands, status_codes
from wiredriver.protocol.vocabulary import MouseButton, TimeoutType
from wiredriver.session.element import ElementHandle
from wiredriver.settings import DEFAULT_EXECUTOR, DriverSettings
from wiredriver.transport.base import RawReply, Transport
from wiredriver.transport.httpx_transport import HttpxTransport

logger = logging.getLogger(__name__)


def fetch_server_status(
    executor: str,
    transport: Transport,
    screenshot_sink: ScreenshotSink | None = None,
) -> Status:
    """Query ``/status`` on *executor* without a browser session."""
    url = commands.build_url(executor or DEFAULT_EXECUTOR, commands.STATUS)
    raw = transport.execute("GET", url, None)
    on_screen = screenshot_sink.persist if screenshot_sink is not None else None
    return codec.decode_status(codec.decode_reply(raw, on_screen).value)


class SessionState(enum.Enum):
    UNSTARTED = "unstarted"
    ACTIVE = "active"
    ENDED = "ended"


class RemoteSession:
    """One browser-control session on a remote end.

    Lifecycle: ``UNSTARTED`` until :meth:`start` succeeds, ``ACTIVE`` until
    :meth:`quit` succeeds, then ``ENDED``. Every command except :meth:`start`
    requires ``ACTIVE``. For a session-free health check use
    :func:`fetch_server_status`.

    Not safe for concurrent use: the identifier is mutated in place on start
    and quit. Use one session per thread, or serialize access externally.
    """

    def __init__(
        self,
        executor: str = DEFAULT_EXECUTOR,
        capabilities: Capabilities | None = None,
        *,
        transport: Transport | None = None,
        screenshot_sink: ScreenshotSink | None = None,
    ) -> None:
        self._executor = (executor or DEFAULT_EXECUTOR).rstrip("/")
        self._desired: Capabilities = dict(capabilities or {})
        self._capabilities: Capabilities = {}
        self._transport: Transport = transport or HttpxTransport()
        self._sink: ScreenshotSink = screenshot_sink or FileScreenshotSink()
        self._id = ""
        self._state = SessionState.UNSTARTED

    @classmethod
    def from_settings(
        cls,
        settings: DriverSettings,
        *,
        transport: Transport | None = None,
        screenshot_sink: ScreenshotSink | None = None,
    ) -> "RemoteSession":
        return cls(
            settings.executor,
            settings.capabilities,
            transport=transport or HttpxTransport.from_settings(settings),
            screenshot_sink=screenshot_sink or FileScreenshotSink(settings.screenshot_dir),
        )

    @classmethod
    def connect(
        cls,
        capabilities: Capabilities | None = None,
        executor: str = DEFAULT_EXECUTOR,
        **kwargs: Any,
    ) -> "RemoteSession":
        """Build a session and start it on the remote end."""
        session = cls(executor, capabilities, **kwargs)
        session.start()
        return session

    # --- accessors ---

    @property
    def id(self) -> str:
        return self._id

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def executor(self) -> str:
        return self._executor

    @property
    def capabilities(self) -> Capabilities:
        return dict(self._capabilities)

    def __repr__(self) -> str:
        return f"RemoteSession(executor={self._executor!r}, id={self._id!r}, state={self._state.value})"

    # --- dispatch ---

    def _round_trip(self, method: str, url: str, params: dict[str, Any] | None) -> RawReply:
        return self._transport.execute(method, url, codec.encode_params(params))

    def _require_active(self) -> None:
        if self._state is not SessionState.ACTIVE:
            raise InvalidSessionStateError(
                f"Session is {self._state.value}; start it before sending commands."
                if self._state is SessionState.UNSTARTED
                else "Session has ended; create a new session to continue."
            )

    def _dispatch(
        self,
        method: str,
        template: str,
        params: dict[str, Any] | None = None,
        **path: str,
    ) -> ReplyEnvelope:
        """Send one session-scoped command and return its decoded envelope."""
        self._require_active()
        url = commands.build_url(self._executor, template, session=self._id, **path)
        raw = self._round_trip(method, url, params)
        return codec.decode_reply(raw, self._sink.persist)

    def _raw_dispatch(self, method: str, template: str, params: dict[str, Any] | None) -> bytes:
        self._require_active()
        url = commands.build_url(self._executor, template, session=self._id)
        raw = self._round_trip(method, url, params)
        codec.decode_reply(raw, self._sink.persist)
        return raw.content

    def _find_one(self, template: str, by: str, value: str, **path: str) -> ElementHandle:
        envelope = self._dispatch("POST", template, {"using": by, "value": value}, **path)
        return ElementHandle(self, codec.decode_element_id(envelope.value))

    def _find_many(self, template: str, by: str, value: str, **path: str) -> list[ElementHandle]:
        try:
            envelope = self._dispatch("POST", template, {"using": by, "value": value}, **path)
        except ProtocolError as exc:
            if exc.code == status_codes.NO_SUCH_ELEMENT:
                return []
            raise
        return [ElementHandle(self, element_id) for element_id in codec.decode_element_ids(envelope.value)]

    # --- lifecycle ---

    def start(self) -> str:
        """Create the remote session and return its identifier."""
        if self._state is not SessionState.UNSTARTED:
            raise InvalidSessionStateError(f"Session is already {self._state.value}.")

        url = commands.build_url(self._executor, commands.NEW_SESSION)
        params = {"sessionId": None, "desiredCapabilities": self._desired}
        envelope = codec.decode_reply(self._round_trip("POST", url, params), self._sink.persist)
        if not envelope.session_id:
            raise MalformedReplyError("New-session reply carries no sessionId.")

        self._id = envelope.session_id
        if isinstance(envelope.value, dict):
            self._capabilities = dict(envelope.value)
        else:
            self._capabilities = dict(self._desired)
        self._state = SessionState.ACTIVE
        logger.info("Session %s started on %s.", self._id, self._executor)
        return self._id

    def quit(self) -> None:
        """End the remote session. A failed quit leaves the session active."""
        self._dispatch("DELETE", commands.SESSION)
        logger.info("Session %s ended.", self._id)
        self._id = ""
        self._state = SessionState.ENDED

    def close(self) -> None:
        """Release the transport. Does not end the remote session."""
        self._transport.close()

    def __enter__(self) -> "RemoteSession":
        if self._state is SessionState.UNSTARTED:
            self.start()
        return self

    def __exit__(self, *_) -> None:
        try:
            if self._state is SessionState.ACTIVE:
                self.quit()
        finally:
            self.close()

    # --- server ---

    def server_status(self) -> Status:
        """Query ``/status`` on this session's remote end."""
        self._require_active()
        return fetch_server_status(self._executor, self._transport, self._sink)

    def session_capabilities(self) -> Capabilities:
        return codec.decode_capabilities(self._dispatch("GET", commands.SESSION).value)

    # --- timeouts ---

    def set_timeout(self, timeout_type: str, ms: int) -> None:
        """Set one of the ``script``/``implicit``/``page load`` timeouts."""
        self._dispatch("POST", commands.TIMEOUTS, {"type": timeout_type, "ms": ms})

    def set_script_timeout(self, ms: int) -> None:
        self._dispatch("POST", commands.ASYNC_SCRIPT_TIMEOUT, {"ms": ms})

    def set_implicit_wait_timeout(self, ms: int) -> None:
        self._dispatch("POST", commands.IMPLICIT_WAIT_TIMEOUT, {"ms": ms})

    def set_page_load_timeout(self, ms: int) -> None:
        self.set_timeout(TimeoutType.PAGE_LOAD, ms)

    # --- navigation ---

    def get(self, url: str) -> None:
        """Navigate to *url*."""
        self._dispatch("POST", commands.URL, {"url": url})

    def current_url(self) -> str:
        return codec.decode_string(self._dispatch("GET", commands.URL).value)

    def forward(self) -> None:
        self._dispatch("POST", commands.FORWARD)

    def back(self) -> None:
        self._dispatch("POST", commands.BACK)

    def refresh(self) -> None:
        self._dispatch("POST", commands.REFRESH)

    def title(self) -> str:
        return codec.decode_string(self._dispatch("GET", commands.TITLE).value)

    def page_source(self) -> str:
        return codec.decode_string(self._dispatch("GET", commands.SOURCE).value)

    # --- windows and frames ---

    def current_window_handle(self) -> str:
        return codec.decode_string(self._dispatch("GET", commands.WINDOW_HANDLE).value)

    def window_handles(self) -> list[str]:
        return codec.decode_strings(self._dispatch("GET", commands.WINDOW_HANDLES).value)

    def switch_window(self, name: str) -> None:
        self._dispatch("POST", commands.WINDOW, {"name": name})

    def close_window(self) -> None:
        """Close the current window."""
        self._dispatch("DELETE", commands.WINDOW)

    def maximize_window(self, name: str = "current") -> None:
        self._dispatch("POST", commands.WINDOW_MAXIMIZE, name=name or "current")

    def switch_frame(self, frame: str | int | None) -> None:
        """Focus a frame by id, name or index; ``None`` selects the top page."""
        self._dispatch("POST", commands.FRAME, {"id": frame})

    # --- elements ---

    def find_element(self, by: str, value: str) -> ElementHandle:
        """Return the first match; raises ``ElementNotFound`` (7) if none."""
        return self._find_one(commands.FIND_ELEMENT, by, value)

    def find_elements(self, by: str, value: str) -> list[ElementHandle]:
        """Return every match; zero matches is an empty list, not an error."""
        return self._find_many(commands.FIND_ELEMENTS, by, value)

    def active_element(self) -> ElementHandle:
        envelope = self._dispatch("GET", commands.ACTIVE_ELEMENT)
        return ElementHandle(self, codec.decode_element_id(envelope.value))

    # --- cookies ---

    def get_cookies(self) -> list[Cookie]:
        return codec.decode_cookies(self._dispatch("GET", commands.COOKIES).value)

    def add_cookie(self, cookie: Cookie) -> None:
        self._dispatch("POST", commands.COOKIES, {"cookie": cookie.to_wire()})

    def delete_cookie(self, name: str) -> None:
        self._dispatch("DELETE", commands.COOKIE, name=name)

    def delete_all_cookies(self) -> None:
        self._dispatch("DELETE", commands.COOKIES)

    # --- alerts ---

    def alert_text(self) -> str:
        return codec.decode_string(self._dispatch("GET", commands.ALERT_TEXT).value)

    def set_alert_text(self, text: str) -> None:
        self._dispatch("POST", commands.ALERT_TEXT, {"text": text})

    def accept_alert(self) -> None:
        self._dispatch("POST", commands.ACCEPT_ALERT)

    def dismiss_alert(self) -> None:
        self._dispatch("POST", commands.DISMISS_ALERT)

    # --- mouse and keyboard ---

    def click(self, button: int = MouseButton.LEFT) -> None:
        """Click at the current mouse position."""
        self._dispatch("POST", commands.CLICK, {"button": button})

    def double_click(self) -> None:
        self._dispatch("POST", commands.DOUBLE_CLICK)

    def button_down(self) -> None:
        self._dispatch("POST", commands.BUTTON_DOWN)

    def button_up(self) -> None:
        self._dispatch("POST", commands.BUTTON_UP)

    def send_modifier(self, modifier: str, is_down: bool) -> None:
        self._dispatch("POST", commands.MODIFIER, {"value": modifier, "isdown": is_down})

    # --- input method engines ---

    def available_engines(self) -> list[str]:
        return codec.decode_strings(self._dispatch("GET", commands.IME_AVAILABLE_ENGINES).value)

    def active_engine(self) -> str:
        return codec.decode_string(self._dispatch("GET", commands.IME_ACTIVE_ENGINE).value)

    def is_engine_activated(self) -> bool:
        return codec.decode_bool(self._dispatch("GET", commands.IME_ACTIVATED).value)

    def activate_engine(self, engine: str) -> None:
        self._dispatch("POST", commands.IME_ACTIVATE, {"engine": engine})

    def deactivate_engine(self) -> None:
        self._dispatch("POST", commands.IME_DEACTIVATE)

    # --- scripts ---

    def execute_script(self, script: str, args: list[Any] | None = None) -> Any:
        return self._dispatch("POST", commands.EXECUTE, {"script": script, "args": args or []}).value

    def execute_script_async(self, script: str, args: list[Any] | None = None) -> Any:
        return self._dispatch(
            "POST", commands.EXECUTE_ASYNC, {"script": script, "args": args or []}
        ).value

    def execute_script_raw(self, script: str, args: list[Any] | None = None) -> bytes:
        """Like :meth:`execute_script` but return the undecoded reply body."""
        return self._raw_dispatch("POST", commands.EXECUTE, {"script": script, "args": args or []})

    def execute_script_async_raw(self, script: str, args: list[Any] | None = None) -> bytes:
        return self._raw_dispatch(
            "POST", commands.EXECUTE_ASYNC, {"script": script, "args": args or []}
        )

    # --- screenshots ---

    def screenshot(self) -> str:
        """Capture the current window and return the path of the saved PNG."""
        data = codec.decode_string(self._dispatch("GET", commands.SCREENSHOT).value)
        return self._sink.persist(data)
