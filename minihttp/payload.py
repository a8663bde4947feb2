"""Parsing of raw HTTP requests and building of raw HTTP responses."""

from __future__ import annotations

from dataclasses import dataclass, field

from .headers import Headers
from .http import HttpMethod

_LINE_END = "\r\n"
_HEAD_END = "\r\n\r\n"


class PayloadError(ValueError):
    """Raised when a request cannot be parsed."""


@dataclass
class ParsedPayload:
    """The parts of a parsed HTTP request."""

    method: HttpMethod
    path: str
    version: str
    headers: Headers = field(default_factory=Headers)
    body: str = ""


def parse_payload(data: str | bytes) -> ParsedPayload:
    """Parse a raw request into its method, path, version, headers and body."""
    if isinstance(data, bytes):
        data = data.decode("utf-8", errors="replace")

    head, sep, body = data.partition(_HEAD_END)
    if not sep:
        raise PayloadError("request has no end of headers")

    request_line, _, header_block = head.partition(_LINE_END)
    parts = request_line.split()
    if len(parts) < 3:
        raise PayloadError(f"malformed request line: {request_line!r}")
    method, path, version = parts[:3]

    headers = Headers()
    for line in filter(None, header_block.split(_LINE_END)):
        key, colon, value = line.partition(":")
        if not colon:
            raise PayloadError(f"malformed header line: {line!r}")
        headers.set(key, value.removeprefix(" "))

    return ParsedPayload(
        method=HttpMethod.from_name(method),
        path=path,
        version=version,
        headers=headers,
        body=body,
    )


def build_payload(
    status_code: int, version: str, body: str | None, headers: Headers
) -> str:
    """Build a raw response: status line, header fields, blank line, body."""
    lines = [f"{version} {status_code}"]
    lines.extend(f"{key}: {headers.get(key)}" for key in headers.keys())
    return _LINE_END.join(lines) + _HEAD_END + (body or "")