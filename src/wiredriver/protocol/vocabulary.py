"""Names and key codes understood by the remote end."""

from __future__ import annotations


class By:
    """Element lookup strategies (the ``using`` field of find commands)."""

    ID = "id"
    XPATH = "xpath"
    LINK_TEXT = "link text"
    PARTIAL_LINK_TEXT = "partial link text"
    NAME = "name"
    TAG_NAME = "tag name"
    CLASS_NAME = "class name"
    CSS_SELECTOR = "css selector"


class Keys:
    """Special characters accepted by send-keys."""

    BACKSPACE = "\b"
    TAB = "\t"
    CLEAR = "\ue005"
    RETURN = "\n"
    ENTER = "\n"


class MouseButton:
    LEFT = 0
    MIDDLE = 1
    RIGHT = 2


class TimeoutType:
    """Values for the ``type`` field of the timeouts command."""

    SCRIPT = "script"
    IMPLICIT = "implicit"
    PAGE_LOAD = "page load"
