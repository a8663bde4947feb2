import pytest

from minihttp.headers import Headers
from minihttp.http import HttpMethod
from minihttp.payload import PayloadError, build_payload, parse_payload

REQUEST = (
    "POST /count HTTP/1.1\r\n"
    "Host: localhost:8192\r\n"
    "Content-Type: application/json\r\n"
    "\r\n"
    '{"a":1}'
)


def test_parse_request_line():
    parsed = parse_payload(REQUEST)
    assert parsed.method is HttpMethod.POST
    assert parsed.path == "/count"
    assert parsed.version == "HTTP/1.1"


def test_parse_headers_and_body():
    parsed = parse_payload(REQUEST)
    assert parsed.headers.get("Host") == "localhost:8192"
    assert parsed.headers.get("Content-Type") == "application/json"
    assert parsed.headers.keys() == ["Host", "Content-Type"]
    assert parsed.body == '{"a":1}'


def test_parse_bytes_input():
    parsed = parse_payload(REQUEST.encode())
    assert parsed.path == "/count"
    assert parsed.body == '{"a":1}'


def test_unknown_method_is_kept_as_unknown():
    parsed = parse_payload("BREW /pot HTTP/1.1\r\n\r\n")
    assert parsed.method is HttpMethod.UNKNOWN
    assert parsed.path == "/pot"
    assert parsed.body == ""
    assert len(parsed.headers) == 0


def test_missing_header_terminator():
    with pytest.raises(PayloadError):
        parse_payload("GET / HTTP/1.1\r\nHost: x")


def test_short_request_line():
    with pytest.raises(PayloadError):
        parse_payload("GET /\r\n\r\n")


def test_header_without_colon():
    with pytest.raises(PayloadError):
        parse_payload("GET / HTTP/1.1\r\nbroken\r\n\r\n")


def test_build_payload_wire_format():
    headers = Headers({"Content-Type": "application/json"})
    payload = build_payload(200, "HTTP/1.1", "{}", headers)
    assert payload == "HTTP/1.1 200\r\nContent-Type: application/json\r\n\r\n{}"


def test_build_payload_without_headers_or_body():
    payload = build_payload(404, "HTTP/1.1", None, Headers())
    assert payload == "HTTP/1.1 404\r\n\r\n"


def test_build_payload_repeats_first_value_for_duplicate_keys():
    headers = Headers([("X-A", "1"), ("X-A", "2")])
    payload = build_payload(200, "HTTP/1.0", "ok", headers)
    assert payload.count("X-A: 1\r\n") == 2
    assert "X-A: 2" not in payload