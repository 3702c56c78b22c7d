"""Tests for envelope parsing and typed value decoding."""

from __future__ import annotations

import json
import logging

import pytest

from wiredriver.exceptions import MalformedReplyError, NilValueError, ProtocolError
from wiredriver.models import Cookie, Point, Size
from wiredriver.protocol import codec
from wiredriver.transport.base import RawReply


def _raw(payload, http_status: int = 200) -> RawReply:
    content = payload if isinstance(payload, bytes) else json.dumps(payload).encode()
    return RawReply(status_code=http_status, content=content, content_type="application/json")


def test_encode_params():
    assert codec.encode_params(None) is None
    assert json.loads(codec.encode_params({"url": "http://example.test"})) == {
        "url": "http://example.test"
    }


def test_success_envelope():
    env = codec.decode_reply(_raw({"sessionId": "abc", "status": 0, "value": "hello"}))
    assert env.session_id == "abc"
    assert env.status == 0
    assert env.value == "hello"
    assert env.http_status == 200


def test_missing_fields_default():
    env = codec.decode_reply(_raw({}))
    assert env.session_id is None
    assert env.status == 0
    assert env.value is None


def test_non_json_is_malformed():
    with pytest.raises(MalformedReplyError) as info:
        codec.decode_reply(_raw(b"<html>proxy error</html>", http_status=502))
    assert info.value.body == b"<html>proxy error</html>"


def test_non_object_is_malformed():
    with pytest.raises(MalformedReplyError):
        codec.decode_reply(_raw([1, 2, 3]))


def test_non_zero_status_is_classified():
    with pytest.raises(ProtocolError) as info:
        codec.decode_reply(_raw({"status": 27, "value": {"message": "no alert"}}))
    assert info.value.code == 27
    assert info.value.name == "NoAlertOpen"
    assert info.value.detail == "no alert"


def test_http_error_wins_over_success_status():
    with pytest.raises(ProtocolError) as info:
        codec.decode_reply(_raw({"status": 0, "value": "fine"}, http_status=500))
    assert info.value.code == 0
    assert info.value.name == "UnknownProtocolError"
    assert info.value.http_status == 500


def test_http_error_keeps_envelope_code():
    with pytest.raises(ProtocolError) as info:
        codec.decode_reply(_raw({"status": 10, "value": {}}, http_status=404))
    assert info.value.name == "StaleElementReference"


def test_screen_hook_runs_on_error_replies():
    seen = []
    reply = _raw({"status": 13, "value": {"message": "boom", "screen": "aGVsbG8="}}, 500)
    with pytest.raises(ProtocolError):
        codec.decode_reply(reply, seen.append)
    assert seen == ["aGVsbG8="]


def test_failing_screen_hook_does_not_change_outcome(caplog):
    def broken(_data):
        raise OSError("disk full")

    with caplog.at_level(logging.WARNING):
        env = codec.decode_reply(_raw({"status": 0, "value": {"screen": "aGVsbG8="}}), broken)
    assert env.value == {"screen": "aGVsbG8="}
    assert "disk full" in caplog.text


def test_nul_bytes_only_cleaned_for_logs():
    assert codec.printable(b'{"value":"a\x00b"}') == '{"value":"a b"}'


def test_decode_string_null_is_nil_value():
    with pytest.raises(NilValueError):
        codec.decode_string(None)


def test_decode_string_wrong_type():
    with pytest.raises(MalformedReplyError):
        codec.decode_string(42)


def test_decode_bool():
    assert codec.decode_bool(True) is True
    assert codec.decode_bool(False) is False
    with pytest.raises(MalformedReplyError):
        codec.decode_bool("true")


def test_decode_strings():
    assert codec.decode_strings(["w1", "w2"]) == ["w1", "w2"]
    assert codec.decode_strings(None) == []


def test_decode_element_ids_both_key_styles():
    assert codec.decode_element_id({"ELEMENT": "0"}) == "0"
    assert codec.decode_element_id({"element-6066-11e4-a52e-4f735466cecf": "w3c"}) == "w3c"
    assert codec.decode_element_ids([{"ELEMENT": "1"}, {"ELEMENT": "2"}]) == ["1", "2"]
    with pytest.raises(MalformedReplyError):
        codec.decode_element_id({"id": "nope"})


def test_decode_point_and_size():
    assert codec.decode_point({"x": 10, "y": 20.0}) == Point(10, 20)
    assert codec.decode_size({"width": 300, "height": 40}) == Size(300, 40)
    with pytest.raises(NilValueError):
        codec.decode_point({"x": 1, "y": None})


@pytest.mark.parametrize("bad", [float("nan"), float("inf"), float("-inf")])
def test_decode_point_rejects_non_finite(bad):
    with pytest.raises(MalformedReplyError):
        codec.decode_point({"x": bad, "y": 0})
    with pytest.raises(MalformedReplyError):
        codec.decode_size({"width": 10, "height": bad})


def test_decode_cookies():
    cookies = codec.decode_cookies(
        [{"name": "sid", "value": "xyz", "path": "/", "domain": "example.test", "secure": True, "expiry": 1700000000}]
    )
    assert cookies == [Cookie("sid", "xyz", "/", "example.test", True, 1700000000)]


def test_decode_cookies_bad_expiry_is_malformed():
    with pytest.raises(MalformedReplyError) as info:
        codec.decode_cookies([{"name": "sid", "value": "xyz", "expiry": "soon"}])
    assert isinstance(info.value.__cause__, ValueError)


def test_decode_status():
    status = codec.decode_status(
        {"build": {"version": "2.53.1", "revision": "a36b8b1"}, "os": {"name": "Linux", "arch": "amd64"}}
    )
    assert status.build_version == "2.53.1"
    assert status.os_name == "Linux"
    assert status.ready is None


@pytest.mark.parametrize("section", ["build", "os", "java"])
def test_decode_status_non_object_section_is_malformed(section):
    with pytest.raises(MalformedReplyError):
        codec.decode_status({section: "2.53"})
