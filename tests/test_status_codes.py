"""Tests for status-code classification."""

from __future__ import annotations

import pytest

from wiredriver.exceptions import ProtocolError
from wiredriver.protocol import status_codes

DOCUMENTED = {
    7: "ElementNotFound",
    8: "NoSuchFrame",
    9: "UnknownCommand",
    10: "StaleElementReference",
    11: "ElementNotVisible",
    12: "InvalidElementState",
    13: "UnknownError",
    15: "ElementNotSelectable",
    17: "JavaScriptError",
    19: "XPathLookupError",
    21: "Timeout",
    23: "NoSuchWindow",
    24: "InvalidCookieDomain",
    25: "UnableToSetCookie",
    26: "UnexpectedAlertOpen",
    27: "NoAlertOpen",
    28: "ScriptTimeout",
    29: "InvalidElementCoordinates",
    32: "InvalidSelector",
}


def test_table_covers_documented_codes():
    assert set(status_codes.STATUS_TABLE) == set(DOCUMENTED)


@pytest.mark.parametrize("code,name", sorted(DOCUMENTED.items()))
def test_known_codes_classify_by_name(code, name):
    err = status_codes.classify(code)
    assert isinstance(err, ProtocolError)
    assert err.code == code
    assert err.name == name


@pytest.mark.parametrize("code", [0, 1, 14, 33, 404, -1])
def test_unknown_codes_keep_their_code(code):
    err = status_codes.classify(code)
    assert err.name == "UnknownProtocolError"
    assert err.code == code
    assert err.message == f"unknown error - {code}"


def test_named_constants_match_table():
    assert status_codes.status_name(status_codes.NO_SUCH_ELEMENT) == "ElementNotFound"
    assert status_codes.status_name(status_codes.STALE_ELEMENT_REFERENCE) == "StaleElementReference"
    assert status_codes.status_message(status_codes.NO_ALERT_OPEN) == "no alert open"


def test_error_text_includes_detail():
    err = status_codes.classify(7, http_status=500, detail="Unable to locate #missing")
    assert err.http_status == 500
    assert "ElementNotFound" in str(err)
    assert "Unable to locate #missing" in str(err)
