"""HTTP request methods understood by the server."""

from __future__ import annotations

import enum


class HttpMethod(enum.Enum):
    """An HTTP request method; ``UNKNOWN`` stands for anything unrecognised."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"
    HEAD = "HEAD"
    UNKNOWN = "UNKNOWN"

    @classmethod
    def from_name(cls, name: str) -> HttpMethod:
        """Return the method spelled exactly ``name``, or ``UNKNOWN``."""
        try:
            return cls(name)
        except ValueError:
            return cls.UNKNOWN