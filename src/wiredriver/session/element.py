"""Remote element handles."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

from wiredriver.models import Point, Size
from wiredriver.protocol import codec, commands

if TYPE_CHECKING:
    from wiredriver.session.remote_session import RemoteSession


@dataclass(frozen=True)
class ElementHandle:
    """Opaque reference to one DOM element inside a session.

    Handles hold no cached state. A reference that went stale is only noticed
    when the server answers a command with ``StaleElementReference`` (10).
    """

    session: RemoteSession = field(repr=False)
    id: str

    def _get(self, template: str, **params: str) -> Any:
        return self.session._dispatch("GET", template, element=self.id, **params).value

    def _post(self, template: str, body: dict[str, Any] | None = None) -> None:
        self.session._dispatch("POST", template, body, element=self.id)

    # --- interaction ---

    def click(self) -> None:
        self._post(commands.ELEMENT_CLICK)

    def send_keys(self, keys: str) -> None:
        """Type *keys*, sent as one single-character string per code point."""
        self._post(commands.ELEMENT_VALUE, {"value": list(keys)})

    def submit(self) -> None:
        self._post(commands.ELEMENT_SUBMIT)

    def clear(self) -> None:
        self._post(commands.ELEMENT_CLEAR)

    def move_to(self, x_offset: int = 0, y_offset: int = 0) -> None:
        """Move the mouse to an offset from this element's top-left corner."""
        self.session._dispatch(
            "POST",
            commands.MOVE_TO,
            {"element": self.id, "xoffset": x_offset, "yoffset": y_offset},
        )

    # --- finding ---

    def find_element(self, by: str, value: str) -> ElementHandle:
        return self.session._find_one(commands.ELEMENT_FIND_ELEMENT, by, value, element=self.id)

    def find_elements(self, by: str, value: str) -> list[ElementHandle]:
        return self.session._find_many(commands.ELEMENT_FIND_ELEMENTS, by, value, element=self.id)

    # --- properties ---

    def tag_name(self) -> str:
        return codec.decode_string(self._get(commands.ELEMENT_NAME))

    def text(self) -> str:
        return codec.decode_string(self._get(commands.ELEMENT_TEXT))

    def is_selected(self) -> bool:
        return codec.decode_bool(self._get(commands.ELEMENT_SELECTED))

    def is_enabled(self) -> bool:
        return codec.decode_bool(self._get(commands.ELEMENT_ENABLED))

    def is_displayed(self) -> bool:
        return codec.decode_bool(self._get(commands.ELEMENT_DISPLAYED))

    def get_attribute(self, name: str) -> str:
        return codec.decode_string(self._get(commands.ELEMENT_ATTRIBUTE, name=name))

    def css_property(self, name: str) -> str:
        return codec.decode_string(self._get(commands.ELEMENT_CSS, name=name))

    def location(self) -> Point:
        return codec.decode_point(self._get(commands.ELEMENT_LOCATION))

    def location_in_view(self) -> Point:
        """Location after the element has been scrolled into view."""
        return codec.decode_point(self._get(commands.ELEMENT_LOCATION_IN_VIEW))

    def size(self) -> Size:
        return codec.decode_size(self._get(commands.ELEMENT_SIZE))
